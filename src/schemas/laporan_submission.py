"""Schemas untuk submission Laporan."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime

from src.models.enums import SubmissionStatus
from src.schemas.shared import BaseListResponse
from src.schemas.status import SubmissionStatusLogResponse


# ===== REQUEST SCHEMAS =====

class LaporanSectionEntryInput(BaseModel):
    """
    Isian satu section.

    Nilai target/anggaran disimpan apa adanya (string), tidak di-parse sebagai angka.
    """

    section_id: Optional[str] = Field(None, max_length=36)
    section_code: Optional[str] = None
    section_title: Optional[str] = None
    target_year: Optional[str] = None
    target_semester_1: Optional[str] = None
    target_semester_2: Optional[str] = None
    budget_year: Optional[str] = None
    budget_semester_1: Optional[str] = None
    budget_semester_2: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        'target_year', 'target_semester_1', 'target_semester_2',
        'budget_year', 'budget_semester_1', 'budget_semester_2',
        mode='before'
    )
    @classmethod
    def coerce_number_to_text(cls, value):
        # Klien kadang mengirim angka; simpan sebagai teks apa adanya
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class LaporanSubmissionCreate(BaseModel):
    """Body POST /laporan/submissions."""

    template_id: Optional[str] = Field(None, max_length=36)
    instansi_id: Optional[int] = None
    instansi_name: str = Field(..., max_length=255)
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = Field(None, max_length=150)
    origin_regency_id: Optional[int] = None
    origin_regency_name: Optional[str] = Field(None, max_length=255)
    report_year: int
    report_level: Optional[str] = Field(None, max_length=120)
    notes: Optional[str] = None
    sections: List[LaporanSectionEntryInput]

    @field_validator('instansi_name', 'instansi_level_text', 'report_level')
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value


# ===== RESPONSE SCHEMAS =====

class LaporanSubmissionSectionResponse(BaseModel):
    id: str
    section_id: Optional[str] = None
    section_code: Optional[str] = None
    section_title: str
    sequence: int
    has_target: bool = Field(True, description="Snapshot section template saat submit; False = kolom target tidak ditampilkan")
    has_budget: bool = Field(True, description="Snapshot section template saat submit; False = kolom anggaran tidak ditampilkan")
    target_year: Optional[str] = None
    target_semester_1: Optional[str] = None
    target_semester_2: Optional[str] = None
    budget_year: Optional[str] = None
    budget_semester_1: Optional[str] = None
    budget_semester_2: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LaporanSubmissionResponse(BaseModel):
    """Detail submission Laporan (snapshot)."""

    id: str
    submission_code: str
    template_id: Optional[str] = None
    template_name: Optional[str] = None
    instansi_id: Optional[int] = None
    instansi_name: str
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = None
    origin_regency_id: Optional[int] = None
    origin_regency_name: Optional[str] = None
    report_year: int
    report_level: Optional[str] = None
    is_late: bool

    status: SubmissionStatus
    status_display: str
    notes: Optional[str] = None
    submitted_by: Optional[str] = None
    submitted_at: datetime
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None

    sections: List[LaporanSubmissionSectionResponse] = []
    status_logs: List[SubmissionStatusLogResponse] = []

    created_at: datetime
    updated_at: Optional[datetime] = None


class LaporanSubmissionSummary(BaseModel):
    """Baris daftar submission Laporan."""

    id: str
    submission_code: str
    instansi_name: str
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = None
    origin_regency_name: Optional[str] = None
    report_year: int
    report_level: Optional[str] = None
    is_late: bool
    status: SubmissionStatus
    submitted_at: datetime
    verified_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LaporanSubmissionListResponse(BaseListResponse[LaporanSubmissionSummary]):
    """Standardized laporan submission list response."""
    pass
