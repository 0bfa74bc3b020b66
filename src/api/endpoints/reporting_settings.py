"""API endpoints untuk pengaturan periode pelaporan."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.permissions import reviewer_required
from src.core.database import get_db
from src.repositories.reporting_setting import ReportingSettingRepository
from src.schemas.reporting_setting import ReportingSettingUpdate, ReportingSettingResponse
from src.services.reporting_setting import ReportingSettingService

router = APIRouter()


async def get_reporting_setting_service(session: AsyncSession = Depends(get_db)) -> ReportingSettingService:
    """Dependency untuk ReportingSettingService."""
    return ReportingSettingService(ReportingSettingRepository(session))


@router.get("", response_model=ReportingSettingResponse)
async def get_reporting_setting(
    service: ReportingSettingService = Depends(get_reporting_setting_service)
):
    """
    Tahun pelaporan aktif dan batas waktunya.

    **Accessible by**: Public
    """
    return await service.get_setting()


@router.post("", response_model=ReportingSettingResponse)
async def save_reporting_setting(
    setting_data: ReportingSettingUpdate,
    current_user: dict = Depends(reviewer_required),
    service: ReportingSettingService = Depends(get_reporting_setting_service)
):
    """
    Atur tahun pelaporan dan deadline.

    **Accessible by**: SUPER_ADMIN, ADMIN

    **Business Rules**:
    - Submission untuk tahun pelaporan aktif yang masuk setelah deadline
      (23:59 WIB) ditandai terlambat
    """
    return await service.save_setting(setting_data, current_user["id"])
