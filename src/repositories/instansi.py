"""Repository untuk instansi dan tingkat instansi."""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.instansi import Instansi, InstansiLevel


class InstansiRepository:
    """Repository untuk referensi instansi."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== LEVEL =====

    async def list_levels(self) -> List[InstansiLevel]:
        result = await self.session.execute(select(InstansiLevel).order_by(InstansiLevel.id))
        return list(result.scalars().all())

    async def get_level(self, level_id: int) -> Optional[InstansiLevel]:
        return await self.session.get(InstansiLevel, level_id)

    async def get_level_by_code(self, code: str) -> Optional[InstansiLevel]:
        result = await self.session.execute(select(InstansiLevel).where(InstansiLevel.code == code))
        return result.scalar_one_or_none()

    # ===== INSTANSI =====

    async def get_by_id(self, instansi_id: int) -> Optional[Instansi]:
        return await self.session.get(Instansi, instansi_id)

    async def get_by_slug(self, slug: str) -> Optional[Instansi]:
        result = await self.session.execute(select(Instansi).where(Instansi.slug == slug))
        return result.scalar_one_or_none()

    async def list_active(self, level_id: Optional[int] = None) -> List[Instansi]:
        """Instansi aktif, urut nama."""
        query = select(Instansi).where(Instansi.is_active.is_(True))
        if level_id is not None:
            query = query.where(Instansi.level_id == level_id)
        result = await self.session.execute(query.order_by(Instansi.name))
        return list(result.scalars().all())
