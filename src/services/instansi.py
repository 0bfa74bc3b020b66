"""Service untuk referensi instansi."""

from typing import Any, Dict, List, Optional

from src.core.exceptions import NotFoundError
from src.models.instansi import Instansi, InstansiLevel
from src.repositories.instansi import InstansiRepository
from src.schemas.instansi import InstansiResponse, InstansiLevelResponse


class InstansiService:
    """Service untuk daftar instansi dan tingkat instansi."""

    def __init__(self, instansi_repo: InstansiRepository):
        self.instansi_repo = instansi_repo

    async def list_instansi(self, level_id: Optional[int] = None) -> List[InstansiResponse]:
        instansi_list = await self.instansi_repo.list_active(level_id)
        return [InstansiResponse.model_validate(instansi) for instansi in instansi_list]

    async def list_levels(self) -> List[InstansiLevelResponse]:
        levels = await self.instansi_repo.list_levels()
        return [InstansiLevelResponse.model_validate(level) for level in levels]

    async def get_by_slug_or_404(self, slug: str) -> Instansi:
        instansi = await self.instansi_repo.get_by_slug(slug)
        if not instansi:
            raise NotFoundError(f"Instansi '{slug}' tidak ditemukan")
        return instansi

    async def validate_references(
        self,
        instansi_id: Optional[int],
        level_id: Optional[int]
    ) -> List[Dict[str, Any]]:
        """Error field-level untuk instansi/level yang dikirim tapi tidak terdaftar."""
        errors: List[Dict[str, Any]] = []
        if instansi_id is not None and not await self.instansi_repo.get_by_id(instansi_id):
            errors.append({"field": "instansi_id", "message": "Instansi tidak ditemukan"})
        if level_id is not None and not await self.instansi_repo.get_level(level_id):
            errors.append({"field": "instansi_level_id", "message": "Tingkat instansi tidak ditemukan"})
        return errors

    async def get_level(self, level_id: Optional[int]) -> Optional[InstansiLevel]:
        if level_id is None:
            return None
        return await self.instansi_repo.get_level(level_id)
