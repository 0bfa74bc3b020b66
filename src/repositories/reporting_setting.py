"""Repository untuk pengaturan periode pelaporan."""

from typing import Optional
from datetime import datetime
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.reporting_setting import ReportingSetting
from src.schemas.reporting_setting import ReportingSettingUpdate


class ReportingSettingRepository:
    """Baris terbaru adalah pengaturan yang berlaku."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active(self) -> Optional[ReportingSetting]:
        result = await self.session.execute(
            select(ReportingSetting).order_by(ReportingSetting.id.desc()).limit(1)
        )
        return result.scalars().first()

    async def save(self, data: ReportingSettingUpdate, user_id: str) -> ReportingSetting:
        """Update pengaturan aktif, atau buat baru jika belum ada."""
        setting = await self.get_active()
        if setting is None:
            setting = ReportingSetting(
                reporting_year=data.reporting_year,
                created_by=user_id,
            )
            self.session.add(setting)

        setting.reporting_year = data.reporting_year
        setting.reporting_deadline = data.reporting_deadline
        setting.updated_by = user_id
        setting.updated_at = datetime.utcnow()

        await self.session.commit()
        await self.session.refresh(setting)
        return setting
