"""API endpoints referensi instansi."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.instansi import InstansiRepository
from src.schemas.instansi import InstansiResponse, InstansiLevelResponse
from src.services.instansi import InstansiService

router = APIRouter()


async def get_instansi_service(session: AsyncSession = Depends(get_db)) -> InstansiService:
    """Dependency untuk InstansiService."""
    return InstansiService(InstansiRepository(session))


@router.get("/instansi", response_model=List[InstansiResponse])
async def list_instansi(
    instansi_level_id: Optional[int] = Query(None, description="Filter by tingkat instansi"),
    service: InstansiService = Depends(get_instansi_service)
):
    """Instansi aktif, urut nama."""
    return await service.list_instansi(instansi_level_id)


@router.get("/instansi-levels", response_model=List[InstansiLevelResponse])
async def list_instansi_levels(
    service: InstansiService = Depends(get_instansi_service)
):
    return await service.list_levels()
