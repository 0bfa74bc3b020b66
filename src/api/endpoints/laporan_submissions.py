"""API endpoints untuk submission Laporan."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.permissions import get_current_user, reviewer_required
from src.core.database import get_db
from src.core.exceptions import PortalError
from src.repositories.instansi import InstansiRepository
from src.repositories.laporan_submission import LaporanSubmissionRepository
from src.repositories.laporan_template import LaporanTemplateRepository
from src.repositories.region import RegionRepository
from src.repositories.reporting_setting import ReportingSettingRepository
from src.repositories.status_log import SubmissionStatusLogRepository
from src.schemas.common import SuccessResponse
from src.schemas.filters import SubmissionFilterParams
from src.schemas.laporan_submission import (
    LaporanSubmissionCreate, LaporanSubmissionResponse, LaporanSubmissionListResponse
)
from src.schemas.status import LaporanStatusUpdate
from src.services.instansi import InstansiService
from src.services.laporan_submission import LaporanSubmissionService

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_laporan_submission_service(
    session: AsyncSession = Depends(get_db)
) -> LaporanSubmissionService:
    """Dependency untuk LaporanSubmissionService."""
    return LaporanSubmissionService(
        submission_repo=LaporanSubmissionRepository(session),
        template_repo=LaporanTemplateRepository(session),
        status_log_repo=SubmissionStatusLogRepository(session),
        setting_repo=ReportingSettingRepository(session),
        region_repo=RegionRepository(session),
        instansi_service=InstansiService(InstansiRepository(session)),
    )


# ===== CREATE OPERATIONS =====

@router.post("", response_model=LaporanSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def create_laporan_submission(
    submission_data: LaporanSubmissionCreate,
    current_user: dict = Depends(get_current_user),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Kirim laporan kegiatan.

    **Accessible by**: Semua user terautentikasi

    **Business Rules**:
    - Minimal satu section dengan judul
    - Nilai target/anggaran disimpan sebagai teks (maks 120 karakter)
    - template_id yang dikirim harus ada (404)
    """
    return await service.create_submission(submission_data, current_user)


# ===== READ OPERATIONS =====

@router.get("", response_model=LaporanSubmissionListResponse)
async def list_laporan_submissions(
    filters: SubmissionFilterParams = Depends(),
    current_user: dict = Depends(get_current_user),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Daftar submission Laporan.

    **Accessible by**: Reviewer melihat semua; user lain hanya miliknya sendiri

    **Query Parameters**: page, size, search, status, instansi_id, instansi_level_id, report_year
    """
    return await service.get_all_submissions(filters, current_user)


@router.get("/{submission_id}", response_model=LaporanSubmissionResponse)
async def get_laporan_submission(
    submission_id: str,
    current_user: dict = Depends(get_current_user),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Detail laporan beserta section dan riwayat status (terbaru di atas).

    **Accessible by**: Pemilik laporan atau reviewer
    """
    return await service.get_submission(submission_id, current_user)


@router.get("/{submission_id}/pdf", response_class=Response)
async def generate_laporan_pdf(
    submission_id: str,
    current_user: dict = Depends(get_current_user),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Generate PDF laporan.

    **Response**: Binary PDF data untuk download atau preview
    **Access Control**: Pemilik laporan atau reviewer
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
        logger.exception(f"Failed to render Laporan PDF {submission_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Gagal generate PDF: {str(e)}"
        )


# ===== UPDATE OPERATIONS =====

@router.patch("/{submission_id}/status", response_model=LaporanSubmissionResponse)
async def update_laporan_status(
    submission_id: str,
    status_data: LaporanStatusUpdate,
    current_user: dict = Depends(reviewer_required),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Verifikasi atau tolak laporan; catatan disimpan ke notes.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Hanya dari pending ke verified/rejected
    - Status final tidak bisa diubah lagi (409)
    """
    return await service.update_status(submission_id, status_data, current_user)


# ===== DELETE OPERATIONS =====

@router.delete("/{submission_id}", response_model=SuccessResponse)
async def delete_laporan_submission(
    submission_id: str,
    current_user: dict = Depends(reviewer_required),
    service: LaporanSubmissionService = Depends(get_laporan_submission_service)
):
    """
    Hapus laporan beserta section-nya. Riwayat status tetap disimpan.

    **Accessible by**: SUPER_ADMIN, ADMIN
    """
    return await service.delete_submission(submission_id, current_user)
