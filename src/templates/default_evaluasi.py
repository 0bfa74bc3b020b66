"""Bank pertanyaan Evaluasi bawaan dan data referensi awal."""

from typing import Any, Dict, List

from src.models.enums import InstansiLevelCode


_MANAJEMEN_QUESTIONS = [
    "Adakah Komitmen Pimpinan",
    "Adanya Koordinator/Tim Pelaksana tertuang dalam bentuk SK",
    "Adanya Perencanaan terintegrasi",
    "Adanya Monitoring & Evaluasi",
]


# Dipakai saat tidak ada klaster aktif untuk level yang diminta, dan sebagai seed migrasi.
# ID pertanyaan 1..16 stabil: jawaban yang disimpan dari bank ini tetap bisa dipetakan.
DEFAULT_EVALUASI_CLUSTERS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "A. Kluster Peningkatan Aktifitas Fisik",
        "questions": [
            {"id": 1, "text": 'Melakukan gerakan "Ayo Bergerak" atau senam bersama di tempat kerja secara rutin'},
            {"id": 2, "text": "Menyediakan dan memanfaatkan fasilitas olahraga di tempat kerja"},
            {"id": 3, "text": "Melaksanakan peregangan setiap jam 10.00 WIB dan jam 14.00 WIB minimal 5 menit"},
            {"id": 4, "text": "Menganjurkan penggunaan tangga daripada lift/eskalator "
                              "(untuk tempat kerja yang memiliki lebih dari 1 lantai)"},
        ],
    },
    {
        "id": 2,
        "title": "B. Kluster Peningkatan Perilaku Hidup Sehat",
        "questions": [
            {"id": 5, "text": "Menyediakan sarana dan menerapkan PHBS (Perilaku Hidup Bersih dan Sehat) di tempat kerja;"},
            {"id": 6, "text": "Menerapkan Kawasan Tanpa Rokok (KTR);"},
            {"id": 7, "text": "Menyediakan ruang laktasi di tempat kerja"},
            {"id": 8, "text": "Menyediakan sarana dan fasilitas yang ergonomis di tempat kerja;"},
        ],
    },
    {
        "id": 3,
        "title": "PENGELOLAAN PELAKSANAAN GERMAS",
        "questions": [{"id": 9 + i, "text": text} for i, text in enumerate(_MANAJEMEN_QUESTIONS)],
    },
    {
        "id": 4,
        "title": "PEMANTAUAN DAN EVALUASI",
        "questions": [{"id": 13 + i, "text": text} for i, text in enumerate(_MANAJEMEN_QUESTIONS)],
    },
]


DEFAULT_EVALUATION_CATEGORIES: List[Dict[str, Any]] = [
    {
        "slug": "kurang",
        "label": "Kurang",
        "description": "Nilai < 50",
        "min_score": 0,
        "max_score": 49,
        "color_class": "text-red-600",
    },
    {
        "slug": "cukup",
        "label": "Cukup",
        "description": "Nilai 50–75",
        "min_score": 50,
        "max_score": 75,
        "color_class": "text-yellow-600",
    },
    {
        "slug": "baik",
        "label": "Baik",
        "description": "Nilai > 75",
        "min_score": 76,
        "max_score": 100,
        "color_class": "text-emerald-600",
    },
]


DEFAULT_INSTANSI_LEVELS: List[Dict[str, Any]] = [
    {"id": index, "code": code.value, "name": InstansiLevelCode.get_display_name(code.value)}
    for index, code in enumerate(InstansiLevelCode, start=1)
]


def default_question_count() -> int:
    return sum(len(cluster["questions"]) for cluster in DEFAULT_EVALUASI_CLUSTERS)
