"""API endpoints untuk submission Evaluasi."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.permissions import get_current_user, reviewer_required
from src.core.database import get_db
from src.core.exceptions import PortalError
from src.repositories.evaluasi_template import EvaluasiTemplateRepository
from src.repositories.evaluation_submission import EvaluationSubmissionRepository
from src.repositories.instansi import InstansiRepository
from src.repositories.region import RegionRepository
from src.repositories.reporting_setting import ReportingSettingRepository
from src.repositories.status_log import SubmissionStatusLogRepository
from src.schemas.common import SuccessResponse
from src.schemas.evaluation_submission import (
    EvaluationSubmissionCreate, EvaluationSubmissionResponse, EvaluationSubmissionListResponse
)
from src.schemas.filters import SubmissionFilterParams
from src.schemas.status import EvaluationStatusUpdate
from src.services.evaluasi_template import EvaluasiTemplateService
from src.services.evaluation_submission import EvaluationSubmissionService
from src.services.instansi import InstansiService
from src.services.region import RegionService

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_evaluation_submission_service(
    session: AsyncSession = Depends(get_db)
) -> EvaluationSubmissionService:
    """Dependency untuk EvaluationSubmissionService."""
    template_repo = EvaluasiTemplateRepository(session)
    instansi_repo = InstansiRepository(session)
    return EvaluationSubmissionService(
        submission_repo=EvaluationSubmissionRepository(session),
        template_repo=template_repo,
        status_log_repo=SubmissionStatusLogRepository(session),
        setting_repo=ReportingSettingRepository(session),
        template_service=EvaluasiTemplateService(template_repo, instansi_repo),
        instansi_service=InstansiService(instansi_repo),
        region_service=RegionService(RegionRepository(session)),
    )


# ===== CREATE OPERATIONS =====

@router.post("", response_model=EvaluationSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def create_evaluasi_submission(
    submission_data: EvaluationSubmissionCreate,
    current_user: dict = Depends(get_current_user),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Kirim hasil evaluasi mandiri.

    **Accessible by**: Semua user terautentikasi

    **Business Rules**:
    - answer_value harus 0 atau 1; semua field yang salah dilaporkan sekaligus (422)
    - Skor = round(100 * jumlah "ya" / jumlah jawaban), kategori dari band aktif
    - Status awal pending, tercatat di status log
    """
    return await service.create_submission(submission_data, current_user)


# ===== READ OPERATIONS =====

@router.get("", response_model=EvaluationSubmissionListResponse)
async def list_evaluasi_submissions(
    filters: SubmissionFilterParams = Depends(),
    current_user: dict = Depends(get_current_user),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Daftar submission Evaluasi.

    **Accessible by**: Reviewer melihat semua; user lain hanya miliknya sendiri

    **Query Parameters**: page, size, search, status, instansi_id, instansi_level_id, report_year
    """
    return await service.get_all_submissions(filters, current_user)


@router.get("/{submission_id}", response_model=EvaluationSubmissionResponse)
async def get_evaluasi_submission(
    submission_id: str,
    current_user: dict = Depends(get_current_user),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Detail submission beserta jawaban dan riwayat status (terbaru di atas).

    **Accessible by**: Pemilik submission atau reviewer
    """
    return await service.get_submission(submission_id, current_user)


@router.get("/{submission_id}/pdf", response_class=Response)
async def generate_evaluasi_pdf(
    submission_id: str,
    current_user: dict = Depends(get_current_user),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Generate PDF hasil evaluasi.

    **Response**: Binary PDF data untuk download atau preview
    **Access Control**: Pemilik submission atau reviewer
    """
    try:
        pdf_bytes, filename = await service.generate_pdf(submission_id, current_user)

        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}"'
            }
        )

    except (HTTPException, PortalError):
        raise
    except Exception as e:
        logger.exception(f"Failed to render Evaluasi PDF {submission_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Gagal generate PDF: {str(e)}"
        )


# ===== UPDATE OPERATIONS =====

@router.patch("/{submission_id}/status", response_model=EvaluationSubmissionResponse)
async def update_evaluasi_status(
    submission_id: str,
    status_data: EvaluationStatusUpdate,
    current_user: dict = Depends(reviewer_required),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Verifikasi atau tolak submission.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Hanya dari pending ke verified/rejected
    - Status final tidak bisa diubah lagi (409)
    - Status dan log tersimpan dalam satu transaksi
    """
    return await service.update_status(submission_id, status_data, current_user)


# ===== DELETE OPERATIONS =====

@router.delete("/{submission_id}", response_model=SuccessResponse)
async def delete_evaluasi_submission(
    submission_id: str,
    current_user: dict = Depends(reviewer_required),
    service: EvaluationSubmissionService = Depends(get_evaluation_submission_service)
):
    """
    Hapus submission beserta jawabannya. Riwayat status tetap disimpan.

    **Accessible by**: SUPER_ADMIN, ADMIN
    """
    return await service.delete_submission(submission_id, current_user)
