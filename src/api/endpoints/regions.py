"""API endpoints referensi wilayah."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.region import RegionRepository
from src.schemas.region import (
    ProvinceRegionsResponse, RegencyDistrictsResponse, DistrictVillagesResponse, RegionFilterParams
)
from src.services.region import RegionService

router = APIRouter()


async def get_region_service(session: AsyncSession = Depends(get_db)) -> RegionService:
    """Dependency untuk RegionService."""
    return RegionService(RegionRepository(session))


@router.get("/regions", response_model=ProvinceRegionsResponse)
async def get_regions(
    filters: RegionFilterParams = Depends(),
    service: RegionService = Depends(get_region_service)
):
    """
    Provinsi beserta kabupaten/kota dan ringkasan jumlah wilayah.

    **Query Parameters**:
    - province_code: default dari konfigurasi (35 = Jawa Timur)
    - search: cari nama/kode kabupaten/kota
    - type: kabupaten atau kota
    """
    return await service.get_regions(filters)


@router.get("/regions/{regency_id}/districts", response_model=RegencyDistrictsResponse)
async def get_regency_districts(
    regency_id: int,
    service: RegionService = Depends(get_region_service)
):
    """Kecamatan dalam kabupaten/kota, masing-masing dengan desa/kelurahannya."""
    return await service.get_regency_districts(regency_id)


@router.get("/districts/{district_id}/villages", response_model=DistrictVillagesResponse)
async def get_district_villages(
    district_id: int,
    service: RegionService = Depends(get_region_service)
):
    return await service.get_district_villages(district_id)
