"""
Validasi semantik payload submission.

Semua field yang bermasalah dikumpulkan dulu, baru di-raise sekali sebagai
SubmissionValidationError, supaya klien melihat seluruh kesalahan sekaligus.
"""

from typing import Any, Dict, List, Optional

from src.core.exceptions import SubmissionValidationError
from src.schemas.evaluation_submission import EvaluationSubmissionCreate
from src.schemas.laporan_submission import LaporanSubmissionCreate

VALID_ANSWER_VALUES = (0, 1)
QUESTION_TEXT_MAX = 500
SECTION_TITLE_MAX = 255
SECTION_CODE_MAX = 50
SECTION_VALUE_MAX = 120
REPORT_YEAR_MIN = 2000
REPORT_YEAR_MAX = 2100

SECTION_VALUE_FIELDS = (
    "target_year", "target_semester_1", "target_semester_2",
    "budget_year", "budget_semester_1", "budget_semester_2",
)


def _error(field: str, message: str, question_id: Optional[int] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"field": field, "message": message}
    if question_id is not None:
        error["question_id"] = question_id
    return error


def validate_evaluasi_payload(payload: EvaluationSubmissionCreate) -> List[Dict[str, Any]]:
    """Return list error field-level untuk payload Evaluasi (kosong = valid)."""
    errors: List[Dict[str, Any]] = []

    if not payload.instansi_name:
        errors.append(_error("instansi_name", "Nama instansi wajib diisi"))

    if payload.instansi_level_id is None and not payload.instansi_level_text:
        errors.append(_error("instansi_level_text", "Tingkat instansi wajib diisi"))

    for field in ("employee_male_count", "employee_female_count"):
        value = getattr(payload, field)
        if value is not None and value < 0:
            errors.append(_error(field, "Jumlah pegawai tidak boleh negatif"))

    if not payload.answers:
        errors.append(_error("answers", "Minimal satu jawaban harus diisi"))

    for index, answer in enumerate(payload.answers):
        if answer.answer_value not in VALID_ANSWER_VALUES:
            errors.append(_error(
                f"answers[{index}].answer_value",
                f"Jawaban pertanyaan {answer.question_id} harus 0 atau 1",
                question_id=answer.question_id,
            ))
        if not answer.question_text or not answer.question_text.strip():
            errors.append(_error(
                f"answers[{index}].question_text",
                "Teks pertanyaan wajib diisi",
                question_id=answer.question_id,
            ))

    if payload.report_year is not None and not REPORT_YEAR_MIN <= payload.report_year <= REPORT_YEAR_MAX:
        errors.append(_error("report_year", f"Tahun laporan harus antara {REPORT_YEAR_MIN} dan {REPORT_YEAR_MAX}"))

    return errors


def validate_laporan_payload(payload: LaporanSubmissionCreate) -> List[Dict[str, Any]]:
    """Return list error field-level untuk payload Laporan (kosong = valid)."""
    errors: List[Dict[str, Any]] = []

    if not payload.instansi_name:
        errors.append(_error("instansi_name", "Nama instansi wajib diisi"))

    if payload.instansi_level_id is None and not payload.instansi_level_text:
        errors.append(_error("instansi_level_text", "Tingkat instansi wajib diisi"))

    if not REPORT_YEAR_MIN <= payload.report_year <= REPORT_YEAR_MAX:
        errors.append(_error("report_year", f"Tahun laporan harus antara {REPORT_YEAR_MIN} dan {REPORT_YEAR_MAX}"))

    if not payload.sections:
        errors.append(_error("sections", "Minimal satu section harus diisi"))

    for index, section in enumerate(payload.sections):
        prefix = f"sections[{index}]"
        title = (section.section_title or "").strip()
        if not title:
            errors.append(_error(f"{prefix}.section_title", "Judul section wajib diisi"))
        elif len(title) > SECTION_TITLE_MAX:
            errors.append(_error(f"{prefix}.section_title", f"Maksimal {SECTION_TITLE_MAX} karakter"))

        if section.section_code and len(section.section_code) > SECTION_CODE_MAX:
            errors.append(_error(f"{prefix}.section_code", f"Maksimal {SECTION_CODE_MAX} karakter"))

        # Nilai target/anggaran hanya dibatasi panjangnya
        for field in SECTION_VALUE_FIELDS:
            value = getattr(section, field)
            if value is not None and len(value) > SECTION_VALUE_MAX:
                errors.append(_error(f"{prefix}.{field}", f"Maksimal {SECTION_VALUE_MAX} karakter"))

    return errors


def raise_if_errors(errors: List[Dict[str, Any]]) -> None:
    """Raise SubmissionValidationError jika ada error."""
    if errors:
        raise SubmissionValidationError(errors)
