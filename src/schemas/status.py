"""Schemas untuk workflow status submission."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime

from src.models.enums import SubmissionStatus, SubmissionType


class EvaluationStatusUpdate(BaseModel):
    """Body PATCH /evaluasi/submissions/{id}/status."""

    status: SubmissionStatus = Field(..., description="pending, verified, atau rejected")
    remarks: Optional[str] = Field(None, max_length=2000)


class LaporanStatusUpdate(BaseModel):
    """Body PATCH /laporan/submissions/{id}/status."""

    status: SubmissionStatus = Field(..., description="pending, verified, atau rejected")
    notes: Optional[str] = Field(None, max_length=2000)


class SubmissionStatusLogResponse(BaseModel):
    id: str
    submission_type: SubmissionType
    submission_id: str
    previous_status: Optional[SubmissionStatus] = None
    new_status: SubmissionStatus
    remarks: Optional[str] = None
    instansi_id: Optional[int] = None
    changed_by: Optional[str] = None
    changed_by_name: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
