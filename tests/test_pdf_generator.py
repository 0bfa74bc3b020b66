"""Tests untuk render PDF (tidak pernah gagal karena data kosong)."""

from datetime import date

from reportlab.lib import colors

from src.services.pdf_generator import (
    EvaluasiPDFGenerator, LaporanPDFGenerator, color_from_class
)


def test_color_from_tailwind_class():
    assert color_from_class("text-emerald-600") == colors.HexColor("#059669")
    assert color_from_class("text-red-600") == colors.HexColor("#DC2626")
    assert color_from_class(None) == colors.black
    assert color_from_class("text-unknown-500") == colors.black


def test_evaluasi_pdf_renders():
    data = {
        "submission_code": "EVL-250114-0001",
        "instansi_name": "Dinas Kesehatan & KB",
        "instansi_level_text": "Instansi Tingkat Provinsi",
        "employee_male_count": 10,
        "employee_female_count": None,
        "evaluation_date": date(2025, 1, 14),
        "report_year": 2025,
        "score": 75,
    }
    groups = [
        {"title": "A. Kluster Peningkatan Aktifitas Fisik", "answers": [
            {"question_text": 'Gerakan "Ayo Bergerak" <rutin>', "answer_value": 1, "remark": None},
            {"question_text": "Fasilitas olahraga", "answer_value": 0, "remark": "Belum ada"},
        ]},
        {"title": "Lainnya", "answers": []},
    ]
    pdf = EvaluasiPDFGenerator().generate_evaluasi_pdf(
        data, groups, {"label": "Cukup", "color_class": "text-yellow-600"}
    )
    assert pdf.startswith(b"%PDF")


def test_evaluasi_pdf_with_missing_values():
    pdf = EvaluasiPDFGenerator().generate_evaluasi_pdf({}, [], None)
    assert pdf.startswith(b"%PDF")


def test_laporan_pdf_renders_disabled_columns():
    data = {
        "submission_code": "LPR-250114-0001",
        "instansi_name": "Dinas Kesehatan",
        "report_year": 2027,
        "template_name": "Template Provinsi",
    }
    sections = [
        {"section_code": "1", "section_title": "Sosialisasi", "has_target": True, "has_budget": False,
         "target_year": "12", "budget_year": "tersimpan tapi tidak tampil"},
        {"section_title": "Senam bersama", "has_target": False, "has_budget": True, "budget_year": "5000000"},
    ]
    pdf = LaporanPDFGenerator().generate_laporan_pdf(data, sections)
    assert pdf.startswith(b"%PDF")


def test_laporan_pdf_without_sections():
    assert LaporanPDFGenerator().generate_laporan_pdf({}, []).startswith(b"%PDF")
