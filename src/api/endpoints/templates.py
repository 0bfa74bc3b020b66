"""API endpoints publik untuk resolusi template Evaluasi dan Laporan."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.evaluasi_template import EvaluasiTemplateRepository
from src.repositories.instansi import InstansiRepository
from src.repositories.laporan_template import LaporanTemplateRepository
from src.schemas.evaluasi_template import EvaluasiTemplateResponse
from src.schemas.laporan_template import LaporanTemplateResolution
from src.services.evaluasi_template import EvaluasiTemplateService
from src.services.laporan_template import LaporanTemplateService

router = APIRouter()


async def get_evaluasi_template_service(session: AsyncSession = Depends(get_db)) -> EvaluasiTemplateService:
    """Dependency untuk EvaluasiTemplateService."""
    return EvaluasiTemplateService(EvaluasiTemplateRepository(session), InstansiRepository(session))


async def get_laporan_template_service(session: AsyncSession = Depends(get_db)) -> LaporanTemplateService:
    """Dependency untuk LaporanTemplateService."""
    return LaporanTemplateService(LaporanTemplateRepository(session), InstansiRepository(session))


@router.get("/evaluasi", response_model=EvaluasiTemplateResponse)
async def get_evaluasi_template(
    instansi_level_id: Optional[int] = Query(None, description="ID tingkat instansi"),
    instansi_level_code: Optional[str] = Query(None, description="Kode tingkat instansi, contoh: provinsi"),
    template_service: EvaluasiTemplateService = Depends(get_evaluasi_template_service)
):
    """
    Bank pertanyaan Evaluasi untuk satu tingkat instansi.

    **Accessible by**: Public

    **Resolution**:
    - Klaster aktif untuk level tersebut + klaster global, urut sequence
    - Tanpa level: semua klaster aktif
    - Tidak ada klaster aktif: bank bawaan (source=builtin)
    """
    return await template_service.resolve(level_id=instansi_level_id, level_code=instansi_level_code)


@router.get("/laporan", response_model=LaporanTemplateResolution)
async def get_laporan_template(
    year: Optional[int] = Query(None, ge=2000, le=2100, description="Tahun laporan"),
    instansi_level_id: Optional[int] = Query(None),
    instansi_id: Optional[int] = Query(None),
    instansi_slug: Optional[str] = Query(None, max_length=150),
    template_service: LaporanTemplateService = Depends(get_laporan_template_service)
):
    """
    Template Laporan untuk (instansi, level, tahun).

    **Accessible by**: Public

    **Resolution**:
    - Template tahun spesifik (source=year)
    - Jika tidak ada: template dasar tanpa tahun (source=base)
    - Jika tidak ada keduanya: source=none, sections kosong
    """
    return await template_service.resolve(
        year=year, level_id=instansi_level_id, instansi_id=instansi_id, instansi_slug=instansi_slug
    )
