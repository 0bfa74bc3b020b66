"""Model audit trail perubahan status submission (append-only)."""

from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SQLEnum
import uuid as uuid_lib

from src.models.enums import SubmissionStatus, SubmissionType


def _enum(enum_cls, name: str, nullable: bool) -> Column:
    return Column(
        SQLEnum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e]),
        nullable=nullable,
    )


class SubmissionStatusLog(SQLModel, table=True):
    """Satu baris per transisi status. Tidak pernah diubah atau dihapus."""

    __tablename__ = "submission_status_logs"

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    submission_type: SubmissionType = Field(sa_column=_enum(SubmissionType, "submissiontype", False))
    # Bukan FK: log tetap ada setelah submission dihapus
    submission_id: str = Field(max_length=36, index=True)
    previous_status: Optional[SubmissionStatus] = Field(
        default=None, sa_column=_enum(SubmissionStatus, "submissionstatus", True)
    )
    new_status: SubmissionStatus = Field(sa_column=_enum(SubmissionStatus, "submissionstatus", False))
    remarks: Optional[str] = Field(default=None)
    instansi_id: Optional[int] = Field(default=None, foreign_key="instansi.id", ondelete="SET NULL")
    changed_by: Optional[str] = Field(default=None, max_length=36)
    changed_by_name: Optional[str] = Field(default=None, max_length=200, description="Denormalized nama user")
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)

    def __repr__(self) -> str:
        return (
            f"<SubmissionStatusLog({self.submission_type}:{self.submission_id} "
            f"{self.previous_status} -> {self.new_status})>"
        )
