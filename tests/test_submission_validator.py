"""Tests untuk validasi semantik payload submission."""

import pytest

from src.core.exceptions import SubmissionValidationError
from src.schemas.evaluation_submission import EvaluationSubmissionCreate
from src.schemas.laporan_submission import LaporanSubmissionCreate
from src.utils.submission_validator import (
    validate_evaluasi_payload, validate_laporan_payload, raise_if_errors
)


def _evaluasi(**overrides):
    payload = {
        "instansi_name": "Dinas Kesehatan",
        "instansi_level_text": "Instansi Tingkat Provinsi",
        "answers": [
            {"question_id": 1, "question_text": "Pertanyaan satu", "answer_value": 1},
            {"question_id": 2, "question_text": "Pertanyaan dua", "answer_value": 0},
        ],
    }
    payload.update(overrides)
    return EvaluationSubmissionCreate(**payload)


def _laporan(**overrides):
    payload = {
        "instansi_name": "Dinas Kesehatan",
        "instansi_level_text": "Instansi Tingkat Provinsi",
        "report_year": 2025,
        "sections": [{"section_title": "Sosialisasi GERMAS", "target_year": "12 kali"}],
    }
    payload.update(overrides)
    return LaporanSubmissionCreate(**payload)


class TestEvaluasiValidation:

    def test_valid_payload(self):
        assert validate_evaluasi_payload(_evaluasi()) == []

    def test_invalid_answer_value_references_question(self):
        errors = validate_evaluasi_payload(_evaluasi(answers=[
            {"question_id": 7, "question_text": "Pertanyaan", "answer_value": 2},
        ]))
        assert errors == [{
            "field": "answers[0].answer_value",
            "message": "Jawaban pertanyaan 7 harus 0 atau 1",
            "question_id": 7,
        }]

    def test_all_errors_collected(self):
        errors = validate_evaluasi_payload(_evaluasi(
            instansi_name="   ",
            instansi_level_text=None,
            employee_male_count=-1,
            answers=[
                {"question_id": 1, "question_text": " ", "answer_value": 1},
                {"question_id": 2, "question_text": "Dua", "answer_value": 5},
            ],
        ))
        fields = {error["field"] for error in errors}
        assert fields == {
            "instansi_name",
            "instansi_level_text",
            "employee_male_count",
            "answers[0].question_text",
            "answers[1].answer_value",
        }

    def test_empty_answers(self):
        errors = validate_evaluasi_payload(_evaluasi(answers=[]))
        assert [error["field"] for error in errors] == ["answers"]

    def test_level_id_replaces_level_text(self):
        assert validate_evaluasi_payload(_evaluasi(instansi_level_text=None, instansi_level_id=1)) == []


class TestLaporanValidation:

    def test_valid_payload(self):
        assert validate_laporan_payload(_laporan()) == []

    def test_numbers_stored_as_text(self):
        payload = _laporan(sections=[{"section_title": "Senam", "budget_year": 1500000}])
        assert payload.sections[0].budget_year == "1500000"
        assert validate_laporan_payload(payload) == []

    def test_value_length_limited(self):
        errors = validate_laporan_payload(_laporan(sections=[
            {"section_title": "Senam", "target_semester_1": "x" * 121},
        ]))
        assert [error["field"] for error in errors] == ["sections[0].target_semester_1"]

    def test_blank_title_and_year_range(self):
        errors = validate_laporan_payload(_laporan(
            report_year=1999,
            sections=[{"section_title": "  "}],
        ))
        fields = {error["field"] for error in errors}
        assert fields == {"report_year", "sections[0].section_title"}

    def test_empty_sections(self):
        errors = validate_laporan_payload(_laporan(sections=[]))
        assert [error["field"] for error in errors] == ["sections"]


def test_raise_if_errors():
    raise_if_errors([])
    with pytest.raises(SubmissionValidationError) as exc_info:
        raise_if_errors([{"field": "answers", "message": "kosong"}])
    assert exc_info.value.status_code == 422
    assert exc_info.value.errors[0]["field"] == "answers"
