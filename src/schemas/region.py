"""Schemas untuk referensi wilayah."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import RegencyType


class VillageResponse(BaseModel):
    id: int
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class DistrictResponse(BaseModel):
    id: int
    code: str
    name: str
    villages: Optional[List[VillageResponse]] = None

    model_config = ConfigDict(from_attributes=True)


class RegencyResponse(BaseModel):
    id: int
    code: str
    name: str
    type: RegencyType
    display_name: str

    model_config = ConfigDict(from_attributes=True)


class ProvinceResponse(BaseModel):
    id: int
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class RegionSummary(BaseModel):
    """Ringkasan jumlah wilayah dalam satu provinsi."""

    regencies: int = 0
    kabupaten: int = 0
    kota: int = 0
    districts: int = 0
    villages: int = 0


class ProvinceRegionsResponse(BaseModel):
    """Response GET /regions."""

    province: ProvinceResponse
    regencies: List[RegencyResponse]
    summary: RegionSummary


class RegencyDistrictsResponse(BaseModel):
    """Response GET /regions/{regency_id}/districts (kecamatan + desa)."""

    regency: RegencyResponse
    districts: List[DistrictResponse]


class DistrictVillagesResponse(BaseModel):
    """Response GET /districts/{district_id}/villages."""

    district: DistrictResponse
    regency: RegencyResponse
    villages: List[VillageResponse]


class RegionFilterParams(BaseModel):
    """Query parameter untuk daftar kabupaten/kota."""

    province_code: Optional[str] = Field(None, max_length=20, description="Default dari DEFAULT_PROVINCE_CODE")
    search: Optional[str] = Field(None, max_length=100, description="Cari berdasarkan nama atau kode")
    type: Optional[RegencyType] = Field(None, description="kabupaten atau kota")
