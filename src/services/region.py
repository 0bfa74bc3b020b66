"""Service untuk referensi wilayah."""

from typing import Any, Dict, List, Optional

from src.core.config import settings
from src.core.exceptions import NotFoundError
from src.repositories.region import RegionRepository
from src.schemas.region import (
    ProvinceResponse, RegencyResponse, DistrictResponse, VillageResponse,
    RegionSummary, ProvinceRegionsResponse, RegencyDistrictsResponse,
    DistrictVillagesResponse, RegionFilterParams
)


class RegionService:
    """Service untuk daftar wilayah dan validasi asal wilayah submission."""

    def __init__(self, region_repo: RegionRepository):
        self.region_repo = region_repo

    async def get_regions(self, filters: RegionFilterParams) -> ProvinceRegionsResponse:
        """Provinsi beserta kabupaten/kota dan ringkasan jumlah wilayah."""
        province_code = filters.province_code or settings.DEFAULT_PROVINCE_CODE
        province = await self.region_repo.get_province_by_code(province_code)
        if not province:
            raise NotFoundError(f"Provinsi dengan kode {province_code} tidak ditemukan")

        regencies = await self.region_repo.list_regencies(
            province.id, search=filters.search, regency_type=filters.type
        )
        summary = await self.region_repo.get_province_summary(province.id)

        return ProvinceRegionsResponse(
            province=ProvinceResponse.model_validate(province),
            regencies=[RegencyResponse.model_validate(regency) for regency in regencies],
            summary=RegionSummary(**summary),
        )

    async def get_regency_districts(self, regency_id: int) -> RegencyDistrictsResponse:
        """Kecamatan dalam satu kabupaten/kota, masing-masing dengan daftar desanya."""
        regency = await self.region_repo.get_regency(regency_id)
        if not regency:
            raise NotFoundError("Kabupaten/kota tidak ditemukan")

        districts = await self.region_repo.list_districts(regency.id)
        villages = await self.region_repo.list_villages([district.id for district in districts])

        villages_by_district: Dict[int, List[VillageResponse]] = {}
        for village in villages:
            villages_by_district.setdefault(village.district_id, []).append(
                VillageResponse.model_validate(village)
            )

        return RegencyDistrictsResponse(
            regency=RegencyResponse.model_validate(regency),
            districts=[
                DistrictResponse(
                    id=district.id,
                    code=district.code,
                    name=district.name,
                    villages=villages_by_district.get(district.id, []),
                )
                for district in districts
            ],
        )

    async def get_district_villages(self, district_id: int) -> DistrictVillagesResponse:
        district = await self.region_repo.get_district(district_id)
        if not district:
            raise NotFoundError("Kecamatan tidak ditemukan")

        regency = await self.region_repo.get_regency(district.regency_id)
        villages = await self.region_repo.list_villages([district.id])

        return DistrictVillagesResponse(
            district=DistrictResponse(id=district.id, code=district.code, name=district.name),
            regency=RegencyResponse.model_validate(regency),
            villages=[VillageResponse.model_validate(village) for village in villages],
        )

    async def validate_origin(
        self,
        regency_id: Optional[int],
        district_id: Optional[int] = None,
        village_id: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Cek asal wilayah submission. Tiap id boleh kosong secara independen,
        tapi yang diisi harus ada dan konsisten dengan induknya.
        """
        errors: List[Dict[str, Any]] = []

        if regency_id is not None and not await self.region_repo.get_regency(regency_id):
            errors.append({"field": "origin_regency_id", "message": "Kabupaten/kota tidak ditemukan"})

        if district_id is not None:
            district = await self.region_repo.get_district(district_id)
            if not district:
                errors.append({"field": "origin_district_id", "message": "Kecamatan tidak ditemukan"})
            elif regency_id is not None and district.regency_id != regency_id:
                errors.append({
                    "field": "origin_district_id",
                    "message": "Kecamatan tidak berada di kabupaten/kota yang dipilih"
                })

        if village_id is not None:
            village = await self.region_repo.get_village(village_id)
            if not village:
                errors.append({"field": "origin_village_id", "message": "Desa/kelurahan tidak ditemukan"})
            elif district_id is not None and village.district_id != district_id:
                errors.append({
                    "field": "origin_village_id",
                    "message": "Desa/kelurahan tidak berada di kecamatan yang dipilih"
                })

        return errors

    async def get_origin_names(
        self,
        regency_id: Optional[int],
        district_id: Optional[int] = None,
        village_id: Optional[int] = None
    ) -> Dict[str, Optional[str]]:
        """Nama wilayah untuk tampilan detail dan PDF."""
        regency = await self.region_repo.get_regency(regency_id) if regency_id else None
        district = await self.region_repo.get_district(district_id) if district_id else None
        village = await self.region_repo.get_village(village_id) if village_id else None
        return {
            "origin_regency_name": regency.display_name if regency else None,
            "origin_district_name": district.name if district else None,
            "origin_village_name": village.name if village else None,
        }
