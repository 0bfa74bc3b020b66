"""Models initialization - semua tabel harus di-import di sini supaya ter-register di metadata."""

# ===== BASE =====
from .base import BaseModel, TimestampMixin, AuditMixin
from .enums import (
    UserRole, SubmissionStatus, SubmissionType,
    InstansiLevelCode, RegencyType, TemplateSource
)

# ===== REFERENSI =====
from .region import Province, Regency, District, Village
from .instansi import InstansiLevel, Instansi

# ===== TEMPLATE =====
from .evaluasi_template import EvaluasiCluster, EvaluasiQuestion, EvaluationCategory
from .laporan_template import LaporanTemplate, LaporanSection

# ===== SUBMISSION =====
from .evaluation_submission import EvaluationSubmission, EvaluationAnswer
from .laporan_submission import LaporanSubmission, LaporanSubmissionSection
from .submission_status_log import SubmissionStatusLog

# ===== PENGATURAN =====
from .reporting_setting import ReportingSetting

# ===== EXPORTS =====

__all__ = [
    # Base classes
    "BaseModel",
    "TimestampMixin",
    "AuditMixin",

    # Enums
    "UserRole",
    "SubmissionStatus",
    "SubmissionType",
    "InstansiLevelCode",
    "RegencyType",
    "TemplateSource",

    # Referensi
    "Province",
    "Regency",
    "District",
    "Village",
    "InstansiLevel",
    "Instansi",

    # Template
    "EvaluasiCluster",
    "EvaluasiQuestion",
    "EvaluationCategory",
    "LaporanTemplate",
    "LaporanSection",

    # Submission
    "EvaluationSubmission",
    "EvaluationAnswer",
    "LaporanSubmission",
    "LaporanSubmissionSection",
    "SubmissionStatusLog",

    "ReportingSetting",
]

# ===== TABLE CREATION ORDER =====

"""
Urutan pembuatan tabel (berdasarkan foreign key):

1. provinces, instansi_levels, evaluation_categories, reporting_settings (tanpa dependency)
2. regencies -> districts -> villages
3. instansi (depends on instansi_levels)
4. evaluasi_clusters (depends on instansi_levels) -> evaluasi_questions
5. laporan_templates (depends on instansi, instansi_levels) -> laporan_sections
6. evaluation_submissions -> evaluation_answers
7. laporan_submissions -> laporan_submission_sections (section_id SET NULL)
8. submission_status_logs (tanpa FK ke submission; log tetap ada setelah submission dihapus)
"""
