"""API endpoints administrasi template (reviewer only)."""

from fastapi import APIRouter, Depends

from src.auth.permissions import reviewer_required
from src.api.endpoints.templates import get_evaluasi_template_service, get_laporan_template_service
from src.schemas.evaluasi_template import EvaluasiTemplateResponse, EvaluasiTemplateSaveRequest
from src.schemas.laporan_template import (
    LaporanTemplateResponse, LaporanTemplateSaveRequest,
    LaporanTemplateListResponse, LaporanTemplateFilterParams
)
from src.services.evaluasi_template import EvaluasiTemplateService
from src.services.laporan_template import LaporanTemplateService

router = APIRouter()


@router.post("/evaluasi", response_model=EvaluasiTemplateResponse)
async def save_evaluasi_template(
    template_data: EvaluasiTemplateSaveRequest,
    current_user: dict = Depends(reviewer_required),
    template_service: EvaluasiTemplateService = Depends(get_evaluasi_template_service)
):
    """
    Simpan bank pertanyaan Evaluasi untuk satu scope level.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Urutan list menentukan sequence klaster dan pertanyaan
    - Klaster/pertanyaan yang tidak dikirim di-nonaktifkan (tidak dihapus)
    - Tanpa instansi_level_id: scope global (berlaku untuk semua level)
    """
    return await template_service.save_template(template_data, current_user["id"])


@router.get("/laporan", response_model=LaporanTemplateListResponse)
async def list_laporan_templates(
    filters: LaporanTemplateFilterParams = Depends(),
    current_user: dict = Depends(reviewer_required),
    template_service: LaporanTemplateService = Depends(get_laporan_template_service)
):
    """
    Daftar template Laporan.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Query Parameters**: page, size, instansi_level_id, instansi_id, year, include_inactive
    """
    return await template_service.list_templates(filters)


@router.post("/laporan/{template_id}", response_model=LaporanTemplateResponse)
async def save_laporan_template(
    template_id: str,
    template_data: LaporanTemplateSaveRequest,
    current_user: dict = Depends(reviewer_required),
    template_service: LaporanTemplateService = Depends(get_laporan_template_service)
):
    """
    Simpan section template Laporan.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Jika instansi/level/tahun dikirim dan template aktifnya belum ada,
      template {template_id} di-clone (is_default=false)
    - Section di-upsert sesuai urutan; section yang tidak dikirim dihapus
    - has_target/has_budget mengikuti nilai lama jika tidak dikirim (default true)
    """
    return await template_service.save_template(template_id, template_data, current_user["id"])
