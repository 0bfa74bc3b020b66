"""Repository untuk referensi wilayah (read-only)."""

from typing import Dict, List, Optional
from sqlalchemy import select, and_, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.region import Province, Regency, District, Village
from src.models.enums import RegencyType


class RegionRepository:
    """Repository untuk operasi baca Provinsi/Kabupaten/Kecamatan/Desa."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== PROVINCE =====

    async def get_province_by_code(self, code: str) -> Optional[Province]:
        result = await self.session.execute(select(Province).where(Province.code == code))
        return result.scalar_one_or_none()

    # ===== REGENCY =====

    async def get_regency(self, regency_id: int) -> Optional[Regency]:
        return await self.session.get(Regency, regency_id)

    async def list_regencies(
        self,
        province_id: int,
        search: Optional[str] = None,
        regency_type: Optional[RegencyType] = None
    ) -> List[Regency]:
        """Kabupaten/kota dalam provinsi, urut nama."""
        query = select(Regency).where(Regency.province_id == province_id)

        if search:
            search_term = f"%{search}%"
            query = query.where(
                or_(Regency.name.ilike(search_term), Regency.code.ilike(search_term))
            )
        if regency_type:
            query = query.where(Regency.type == regency_type)

        result = await self.session.execute(query.order_by(Regency.name))
        return list(result.scalars().all())

    async def get_province_summary(self, province_id: int) -> Dict[str, int]:
        """Jumlah kabupaten, kota, kecamatan, dan desa dalam satu provinsi."""
        type_counts = await self.session.execute(
            select(Regency.type, func.count(Regency.id))
            .where(Regency.province_id == province_id)
            .group_by(Regency.type)
        )
        summary = {"regencies": 0, "kabupaten": 0, "kota": 0, "districts": 0, "villages": 0}
        for regency_type, count in type_counts.all():
            key = regency_type.value if isinstance(regency_type, RegencyType) else str(regency_type)
            summary[key] = count
            summary["regencies"] += count

        district_count = await self.session.execute(
            select(func.count(District.id))
            .join(Regency, District.regency_id == Regency.id)
            .where(Regency.province_id == province_id)
        )
        summary["districts"] = district_count.scalar() or 0

        village_count = await self.session.execute(
            select(func.count(Village.id))
            .join(District, Village.district_id == District.id)
            .join(Regency, District.regency_id == Regency.id)
            .where(Regency.province_id == province_id)
        )
        summary["villages"] = village_count.scalar() or 0
        return summary

    # ===== DISTRICT & VILLAGE =====

    async def get_district(self, district_id: int) -> Optional[District]:
        return await self.session.get(District, district_id)

    async def get_village(self, village_id: int) -> Optional[Village]:
        return await self.session.get(Village, village_id)

    async def list_districts(self, regency_id: int) -> List[District]:
        result = await self.session.execute(
            select(District).where(District.regency_id == regency_id).order_by(District.name)
        )
        return list(result.scalars().all())

    async def list_villages(self, district_ids: List[int]) -> List[Village]:
        if not district_ids:
            return []
        result = await self.session.execute(
            select(Village).where(Village.district_id.in_(district_ids)).order_by(Village.name)
        )
        return list(result.scalars().all())

    # ===== VALIDATION OPERATIONS =====

    async def village_belongs_to(self, village_id: int, district_id: int) -> bool:
        result = await self.session.execute(
            select(Village.id).where(and_(Village.id == village_id, Village.district_id == district_id))
        )
        return result.scalar_one_or_none() is not None

    async def district_belongs_to(self, district_id: int, regency_id: int) -> bool:
        result = await self.session.execute(
            select(District.id).where(and_(District.id == district_id, District.regency_id == regency_id))
        )
        return result.scalar_one_or_none() is not None
