"""API router configuration untuk portal pelaporan."""

from fastapi import APIRouter

from src.api.endpoints import (
    templates, admin_templates, evaluasi_submissions, laporan_submissions,
    categories, reporting_settings, instansi, regions
)

# Create main API router
api_router = APIRouter()

# ===== TEMPLATE ENDPOINTS =====

api_router.include_router(
    templates.router,
    prefix="/templates",
    tags=["Templates"],
    responses={
        404: {"description": "Instansi not found"},
        422: {"description": "Validation Error"},
    }
)

api_router.include_router(
    admin_templates.router,
    prefix="/admin/templates",
    tags=["Templates - Admin"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden - Reviewer only"},
        404: {"description": "Template not found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
    }
)

# ===== SUBMISSION ENDPOINTS =====

api_router.include_router(
    categories.router,
    prefix="/evaluasi/categories",
    tags=["Evaluasi - Kategori"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden - Reviewer only for write operations"},
        422: {"description": "Validation Error"},
    }
)

api_router.include_router(
    evaluasi_submissions.router,
    prefix="/evaluasi/submissions",
    tags=["Evaluasi - Submissions"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden - Owner or reviewer only"},
        404: {"description": "Submission not found"},
        409: {"description": "Status transition not allowed"},
        422: {"description": "Validation Error"},
    }
)

api_router.include_router(
    laporan_submissions.router,
    prefix="/laporan/submissions",
    tags=["Laporan - Submissions"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden - Owner or reviewer only"},
        404: {"description": "Laporan or template not found"},
        409: {"description": "Status transition not allowed"},
        422: {"description": "Validation Error"},
    }
)

# ===== SETTINGS & REFERENCE ENDPOINTS =====

api_router.include_router(
    reporting_settings.router,
    prefix="/reporting-settings",
    tags=["Reporting Settings"],
    responses={
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden - Reviewer only for write operations"},
        422: {"description": "Validation Error"},
    }
)

api_router.include_router(instansi.router, tags=["Referensi - Instansi"])

api_router.include_router(
    regions.router,
    tags=["Referensi - Wilayah"],
    responses={404: {"description": "Region not found"}}
)

# ===== DOCUMENTATION METADATA =====

tags_metadata = [
    {
        "name": "Templates",
        "description": """
        **Resolusi template publik**

        - Bank pertanyaan Evaluasi per tingkat instansi, fallback ke bank bawaan
        - Template Laporan per tahun, fallback ke template dasar
        """,
    },
    {
        "name": "Templates - Admin",
        "description": """
        **Editor template (SUPER_ADMIN, ADMIN)**

        - Upsert klaster/pertanyaan dengan soft-disable
        - Clone template Laporan per instansi/level/tahun
        """,
    },
    {
        "name": "Evaluasi - Submissions",
        "description": """
        **Evaluasi mandiri tatanan tempat kerja**

        - Skor dan kategori dihitung saat submit
        - Workflow pending -> verified/rejected dengan audit log
        - Export PDF
        """,
    },
    {
        "name": "Laporan - Submissions",
        "description": """
        **Laporan kegiatan tahunan**

        - Section dengan target dan anggaran (tahun, semester 1, semester 2)
        - Workflow pending -> verified/rejected dengan audit log
        - Export PDF
        """,
    },
]


# Export untuk main.py
def get_api_router():
    """Get configured API router dengan semua endpoints."""
    return api_router


def get_tags_metadata():
    """Get tags metadata untuk OpenAPI documentation."""
    return tags_metadata
