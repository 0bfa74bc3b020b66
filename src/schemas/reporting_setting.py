"""Schemas untuk pengaturan periode pelaporan."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator
from datetime import date, datetime


class ReportingSettingUpdate(BaseModel):
    """Body POST /reporting-settings."""

    reporting_year: int = Field(..., ge=2000, le=2100)
    reporting_deadline: Optional[date] = None

    @model_validator(mode='after')
    def validate_deadline(self):
        if self.reporting_deadline and self.reporting_deadline.year < self.reporting_year:
            raise ValueError("Batas waktu tidak boleh sebelum tahun pelaporan")
        return self


class ReportingSettingResponse(BaseModel):
    id: Optional[int] = None
    reporting_year: int
    reporting_deadline: Optional[date] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
