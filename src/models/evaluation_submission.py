"""Model submission Evaluasi beserta jawaban (snapshot)."""

from typing import Optional
from datetime import date, datetime
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import CheckConstraint, Enum as SQLEnum
import uuid as uuid_lib

from src.models.base import TimestampMixin
from src.models.enums import SubmissionStatus


def status_column() -> Column:
    return Column(
        SQLEnum(SubmissionStatus, name="submissionstatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
        default=SubmissionStatus.PENDING.value,
    )


class EvaluationSubmission(TimestampMixin, SQLModel, table=True):
    """Satu pengisian evaluasi mandiri. Skor & kategori dibekukan saat submit."""

    __tablename__ = "evaluation_submissions"
    __table_args__ = (
        CheckConstraint(
            "employee_male_count IS NULL OR employee_male_count >= 0", name="ck_evaluation_submissions_male"
        ),
        CheckConstraint(
            "employee_female_count IS NULL OR employee_female_count >= 0", name="ck_evaluation_submissions_female"
        ),
    )

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    submission_code: str = Field(max_length=30, unique=True, index=True)

    # Identitas instansi (id jika terdaftar, teks bebas jika tidak)
    instansi_id: Optional[int] = Field(default=None, foreign_key="instansi.id", ondelete="SET NULL", index=True)
    instansi_name: str = Field(max_length=255, index=True)
    instansi_level_id: Optional[int] = Field(
        default=None, foreign_key="instansi_levels.id", ondelete="SET NULL", index=True
    )
    instansi_level_text: Optional[str] = Field(default=None, max_length=150)
    instansi_address: Optional[str] = Field(default=None, max_length=255)

    # Asal wilayah - masing-masing boleh null secara independen
    origin_regency_id: Optional[int] = Field(default=None, foreign_key="regencies.id", ondelete="SET NULL")
    origin_district_id: Optional[int] = Field(default=None, foreign_key="districts.id", ondelete="SET NULL")
    origin_village_id: Optional[int] = Field(default=None, foreign_key="villages.id", ondelete="SET NULL")

    # Pejabat & pegawai
    pejabat_nama: Optional[str] = Field(default=None, max_length=255)
    pejabat_jabatan: Optional[str] = Field(default=None, max_length=150)
    employee_male_count: Optional[int] = Field(default=None, ge=0)
    employee_female_count: Optional[int] = Field(default=None, ge=0)

    evaluation_date: Optional[date] = Field(default=None)
    submission_date: datetime = Field(default_factory=datetime.utcnow, index=True)
    report_year: int = Field(index=True)
    is_late: bool = Field(default=False)

    # Hasil scoring
    score: int = Field(default=0)
    category_id: Optional[int] = Field(
        default=None, foreign_key="evaluation_categories.id", ondelete="SET NULL"
    )
    category_label: Optional[str] = Field(default=None, max_length=60)

    # Workflow
    status: SubmissionStatus = Field(default=SubmissionStatus.PENDING, sa_column=status_column())
    remarks: Optional[str] = Field(default=None)
    submitted_by: Optional[str] = Field(default=None, max_length=36, index=True)
    verified_by: Optional[str] = Field(default=None, max_length=36)
    verified_at: Optional[datetime] = Field(default=None)

    def __repr__(self) -> str:
        return f"<EvaluationSubmission(code={self.submission_code}, score={self.score}, status={self.status})>"


class EvaluationAnswer(TimestampMixin, SQLModel, table=True):
    """Jawaban satu pertanyaan. question_text adalah snapshot saat submit."""

    __tablename__ = "evaluation_answers"
    __table_args__ = (
        CheckConstraint("answer_value IN (0, 1)", name="ck_evaluation_answers_value"),
    )

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    submission_id: str = Field(
        foreign_key="evaluation_submissions.id", ondelete="CASCADE", index=True, max_length=36
    )
    # Bukan FK: jawaban dari bank bawaan (fallback) tetap bisa disimpan
    question_id: int = Field(index=True)
    question_text: str = Field(description="Snapshot teks pertanyaan")
    answer_value: int = Field(description="0 = tidak, 1 = ya")
    remark: Optional[str] = Field(default=None)
