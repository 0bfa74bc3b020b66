"""Model submission Laporan beserta section (snapshot)."""

from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
import uuid as uuid_lib

from src.models.base import TimestampMixin
from src.models.enums import SubmissionStatus
from src.models.evaluation_submission import status_column


class LaporanSubmission(TimestampMixin, SQLModel, table=True):
    """Satu laporan kegiatan untuk (instansi, level, tahun)."""

    __tablename__ = "laporan_submissions"

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    submission_code: str = Field(max_length=30, unique=True, index=True)
    template_id: Optional[str] = Field(
        default=None, foreign_key="laporan_templates.id", ondelete="SET NULL", max_length=36
    )

    instansi_id: Optional[int] = Field(default=None, foreign_key="instansi.id", ondelete="SET NULL", index=True)
    instansi_name: str = Field(max_length=255, index=True)
    instansi_level_id: Optional[int] = Field(
        default=None, foreign_key="instansi_levels.id", ondelete="SET NULL", index=True
    )
    instansi_level_text: Optional[str] = Field(default=None, max_length=150)
    origin_regency_id: Optional[int] = Field(default=None, foreign_key="regencies.id", ondelete="SET NULL")
    origin_regency_name: Optional[str] = Field(default=None, max_length=255)

    report_year: int = Field(index=True)
    report_level: Optional[str] = Field(default=None, max_length=120)
    is_late: bool = Field(default=False)

    status: SubmissionStatus = Field(default=SubmissionStatus.PENDING, sa_column=status_column())
    notes: Optional[str] = Field(default=None)
    submitted_by: Optional[str] = Field(default=None, max_length=36, index=True)
    submitted_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    verified_by: Optional[str] = Field(default=None, max_length=36)
    verified_at: Optional[datetime] = Field(default=None)

    def __repr__(self) -> str:
        return f"<LaporanSubmission(code={self.submission_code}, year={self.report_year}, status={self.status})>"


class LaporanSubmissionSection(TimestampMixin, SQLModel, table=True):
    """Isian satu section. Judul/kode adalah snapshot, bukan referensi live."""

    __tablename__ = "laporan_submission_sections"

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    laporan_submission_id: str = Field(
        foreign_key="laporan_submissions.id", ondelete="CASCADE", index=True, max_length=36
    )
    section_id: Optional[str] = Field(
        default=None, foreign_key="laporan_sections.id", ondelete="SET NULL", max_length=36
    )
    section_code: Optional[str] = Field(default=None, max_length=50)
    section_title: str = Field(max_length=255)
    sequence: int = Field(default=1)
    # Snapshot flag section template saat submit
    has_target: bool = Field(default=True)
    has_budget: bool = Field(default=True)

    # Nilai disimpan apa adanya sebagai string
    target_year: Optional[str] = Field(default=None, max_length=120)
    target_semester_1: Optional[str] = Field(default=None, max_length=120)
    target_semester_2: Optional[str] = Field(default=None, max_length=120)
    budget_year: Optional[str] = Field(default=None, max_length=120)
    budget_semester_1: Optional[str] = Field(default=None, max_length=120)
    budget_semester_2: Optional[str] = Field(default=None, max_length=120)
    notes: Optional[str] = Field(default=None)
