"""Schemas untuk submission Evaluasi."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, StrictInt, field_validator
from datetime import date, datetime

from src.models.enums import SubmissionStatus
from src.schemas.shared import BaseListResponse
from src.schemas.status import SubmissionStatusLogResponse


# ===== REQUEST SCHEMAS =====

class EvaluationAnswerInput(BaseModel):
    """
    Satu jawaban.

    answer_value harus integer asli (true, "1", 1.0 ditolak). Integer selain 0/1
    dilaporkan oleh validator submission bersama question_id yang bermasalah.
    """

    question_id: int
    question_text: str = Field(..., max_length=500)
    answer_value: StrictInt
    remark: Optional[str] = Field(None, max_length=1000)


class EvaluationSubmissionCreate(BaseModel):
    """Body POST /evaluasi/submissions."""

    instansi_id: Optional[int] = None
    instansi_name: str = Field(..., max_length=255)
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = Field(None, max_length=150)
    instansi_address: Optional[str] = Field(None, max_length=255)

    origin_regency_id: Optional[int] = None
    origin_district_id: Optional[int] = None
    origin_village_id: Optional[int] = None

    pejabat_nama: Optional[str] = Field(None, max_length=255)
    pejabat_jabatan: Optional[str] = Field(None, max_length=150)
    employee_male_count: Optional[int] = None
    employee_female_count: Optional[int] = None

    evaluation_date: Optional[date] = None
    report_year: Optional[int] = Field(None, description="Default: tahun evaluation_date atau tahun berjalan")
    remarks: Optional[str] = None

    answers: List[EvaluationAnswerInput]

    @field_validator('instansi_name', 'instansi_level_text', 'pejabat_nama', 'pejabat_jabatan')
    @classmethod
    def strip_text(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value


# ===== RESPONSE SCHEMAS =====

class EvaluationAnswerResponse(BaseModel):
    id: str
    question_id: int
    question_text: str
    answer_value: int
    remark: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryInfo(BaseModel):
    id: int
    slug: str
    label: str
    color_class: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EvaluationSubmissionResponse(BaseModel):
    """Detail submission Evaluasi (snapshot)."""

    id: str
    submission_code: str
    instansi_id: Optional[int] = None
    instansi_name: str
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = None
    instansi_address: Optional[str] = None

    origin_regency_id: Optional[int] = None
    origin_district_id: Optional[int] = None
    origin_village_id: Optional[int] = None
    origin_regency_name: Optional[str] = None
    origin_district_name: Optional[str] = None
    origin_village_name: Optional[str] = None

    pejabat_nama: Optional[str] = None
    pejabat_jabatan: Optional[str] = None
    employee_male_count: Optional[int] = None
    employee_female_count: Optional[int] = None

    evaluation_date: Optional[date] = None
    submission_date: datetime
    report_year: int
    is_late: bool

    score: int
    category: Optional[CategoryInfo] = None
    category_label: Optional[str] = None

    status: SubmissionStatus
    status_display: str
    remarks: Optional[str] = None
    submitted_by: Optional[str] = None
    verified_by: Optional[str] = None
    verified_at: Optional[datetime] = None

    answers: List[EvaluationAnswerResponse] = []
    status_logs: List[SubmissionStatusLogResponse] = []

    created_at: datetime
    updated_at: Optional[datetime] = None


class EvaluationSubmissionSummary(BaseModel):
    """Baris daftar submission Evaluasi."""

    id: str
    submission_code: str
    instansi_name: str
    instansi_level_id: Optional[int] = None
    instansi_level_text: Optional[str] = None
    pejabat_nama: Optional[str] = None
    report_year: int
    is_late: bool
    score: int
    category_label: Optional[str] = None
    status: SubmissionStatus
    submission_date: datetime
    verified_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EvaluationSubmissionListResponse(BaseListResponse[EvaluationSubmissionSummary]):
    """Standardized evaluasi submission list response."""
    pass
