"""Schemas untuk template Laporan."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime

from src.models.enums import TemplateSource
from src.schemas.shared import BaseListResponse


# ===== RESPONSE SCHEMAS =====

class LaporanSectionResponse(BaseModel):
    id: str
    code: Optional[str] = None
    title: str
    indicator: str = ""
    has_target: bool
    has_budget: bool
    sequence: int

    model_config = ConfigDict(from_attributes=True)


class LaporanTemplateResponse(BaseModel):
    id: str
    instansi_id: Optional[int] = None
    instansi_level_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    year: Optional[int] = None
    is_default: bool
    is_active: bool
    sections: List[LaporanSectionResponse] = []

    created_at: datetime
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LaporanTemplateResolution(BaseModel):
    """
    Hasil resolusi template laporan.

    source: year (template tahun spesifik), base (template dasar), none (belum dikonfigurasi).
    """

    source: TemplateSource
    requested_year: Optional[int] = None
    template: Optional[LaporanTemplateResponse] = None
    sections: List[LaporanSectionResponse] = []


class LaporanTemplateListResponse(BaseListResponse[LaporanTemplateResponse]):
    """Standardized laporan template list response."""
    pass


# ===== REQUEST SCHEMAS (ADMIN EDITOR) =====

class LaporanSectionInput(BaseModel):
    """Section dalam editor. id kosong = section baru; urutan list = sequence."""

    id: Optional[str] = None
    code: Optional[str] = Field(None, max_length=50)
    title: str = Field(..., max_length=255)
    indicator: Optional[str] = None
    has_target: Optional[bool] = None
    has_budget: Optional[bool] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, title: str) -> str:
        title = title.strip()
        if not title:
            raise ValueError("Judul section tidak boleh kosong")
        return title


class LaporanTemplateSaveRequest(BaseModel):
    """
    Simpan template laporan untuk kombinasi (instansi, level, tahun).

    Jika template aktif untuk kombinasi tersebut belum ada, template sumber di-clone.
    Section yang tidak ada di payload akan dihapus.
    """

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    year: Optional[int] = Field(None, ge=2000, le=2100)
    instansi_level_id: Optional[int] = None
    instansi_id: Optional[int] = None
    instansi_slug: Optional[str] = Field(None, max_length=150)
    sections: List[LaporanSectionInput]


class LaporanTemplateFilterParams(BaseModel):
    """Filter daftar template di halaman admin."""

    page: int = Field(1, ge=1, description="Page number")
    size: int = Field(20, ge=1, le=100, description="Page size (max 100)")
    instansi_level_id: Optional[int] = None
    instansi_id: Optional[int] = None
    year: Optional[int] = None
    include_inactive: bool = False
