"""API endpoints untuk kategori nilai Evaluasi."""

from typing import List
from fastapi import APIRouter, Depends

from src.auth.permissions import reviewer_required
from src.api.endpoints.templates import get_evaluasi_template_service
from src.schemas.evaluasi_template import EvaluationCategoryResponse, EvaluationCategoryUpdateRequest
from src.services.evaluasi_template import EvaluasiTemplateService

router = APIRouter()


@router.get("", response_model=List[EvaluationCategoryResponse])
async def list_categories(
    template_service: EvaluasiTemplateService = Depends(get_evaluasi_template_service)
):
    """
    Band kategori nilai, urut min_score.

    **Accessible by**: Public
    """
    return await template_service.list_categories()


@router.put("", response_model=List[EvaluationCategoryResponse])
async def update_categories(
    category_data: EvaluationCategoryUpdateRequest,
    current_user: dict = Depends(reviewer_required),
    template_service: EvaluasiTemplateService = Depends(get_evaluasi_template_service)
):
    """
    Ganti seluruh set band kategori.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Band harus menutup 0-100 tanpa gap dan tanpa overlap
    - Band yang tidak dikirim dihapus
    - Submission lama tidak dihitung ulang
    """
    return await template_service.update_categories(category_data, current_user["id"])
