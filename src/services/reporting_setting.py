"""Service untuk pengaturan periode pelaporan."""

import logging
from datetime import datetime

from src.repositories.reporting_setting import ReportingSettingRepository
from src.schemas.reporting_setting import ReportingSettingUpdate, ReportingSettingResponse

logger = logging.getLogger(__name__)


class ReportingSettingService:
    """Tahun pelaporan aktif dan batas waktunya."""

    def __init__(self, setting_repo: ReportingSettingRepository):
        self.setting_repo = setting_repo

    async def get_setting(self) -> ReportingSettingResponse:
        """Pengaturan aktif; jika belum pernah diatur, tahun berjalan tanpa deadline."""
        setting = await self.setting_repo.get_active()
        if not setting:
            return ReportingSettingResponse(reporting_year=datetime.utcnow().year)
        return ReportingSettingResponse.model_validate(setting)

    async def save_setting(self, data: ReportingSettingUpdate, user_id: str) -> ReportingSettingResponse:
        setting = await self.setting_repo.save(data, user_id)
        logger.info(
            f"Reporting setting updated by {user_id}: year={setting.reporting_year} "
            f"deadline={setting.reporting_deadline}"
        )
        return ReportingSettingResponse.model_validate(setting)
