"""Filter schemas untuk daftar submission."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from src.models.enums import SubmissionStatus


class SubmissionFilterParams(BaseModel):
    """Query parameter daftar submission (Evaluasi & Laporan)."""

    # Pagination
    page: int = Field(1, ge=1, description="Page number")
    size: int = Field(20, ge=1, le=100, description="Page size (max 100)")

    # Search
    search: Optional[str] = Field(
        None,
        description="Cari berdasarkan kode submission, nama instansi, nama pejabat / tingkat laporan"
    )

    # Filters
    status: Optional[SubmissionStatus] = Field(None, description="pending, verified, atau rejected")
    instansi_id: Optional[int] = Field(None, description="Filter by instansi")
    instansi_level_id: Optional[int] = Field(None, description="Filter by tingkat instansi")
    report_year: Optional[int] = Field(None, ge=2000, le=2100, description="Filter by tahun laporan")

    @field_validator('search')
    @classmethod
    def validate_search(cls, search: Optional[str]) -> Optional[str]:
        """Validate and clean search term."""
        if search is not None:
            search = search.strip()
            if not search:
                return None
            if len(search) > 100:
                raise ValueError("Search term too long (max 100 characters)")
        return search
