"""Model pengaturan periode pelaporan."""

from typing import Optional
from datetime import date
from sqlmodel import Field, SQLModel

from src.models.base import BaseModel


class ReportingSetting(BaseModel, SQLModel, table=True):
    """Tahun pelaporan aktif dan batas waktunya. Baris terbaru = yang berlaku."""

    __tablename__ = "reporting_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    reporting_year: int = Field(index=True)
    reporting_deadline: Optional[date] = Field(default=None)

    def applies_to(self, report_year: int) -> bool:
        """Deadline hanya berlaku untuk laporan tahun aktif."""
        return self.reporting_deadline is not None and report_year == self.reporting_year

    def __repr__(self) -> str:
        return f"<ReportingSetting(year={self.reporting_year}, deadline={self.reporting_deadline})>"
