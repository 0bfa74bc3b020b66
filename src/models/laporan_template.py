"""Model template Laporan dan section-sectionnya."""

from typing import Optional
from sqlmodel import Field, SQLModel
import uuid as uuid_lib

from src.models.base import BaseModel, TimestampMixin


class LaporanTemplate(BaseModel, SQLModel, table=True):
    """Struktur laporan untuk pasangan (instansi, level), opsional dikunci ke satu tahun."""

    __tablename__ = "laporan_templates"

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    instansi_id: Optional[int] = Field(default=None, foreign_key="instansi.id", index=True)
    instansi_level_id: Optional[int] = Field(default=None, foreign_key="instansi_levels.id", index=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    year: Optional[int] = Field(
        default=None,
        index=True,
        description="Null = template dasar yang berlaku untuk semua tahun"
    )
    is_default: bool = Field(default=True)
    is_active: bool = Field(default=True, index=True)

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.year})" if self.year else self.name

    def __repr__(self) -> str:
        return f"<LaporanTemplate(name={self.name}, year={self.year})>"


class LaporanSection(TimestampMixin, SQLModel, table=True):
    """Satu baris kegiatan/indikator dalam template laporan."""

    __tablename__ = "laporan_sections"

    id: str = Field(
        default_factory=lambda: str(uuid_lib.uuid4()),
        primary_key=True,
        max_length=36
    )
    template_id: str = Field(foreign_key="laporan_templates.id", index=True, max_length=36)
    code: Optional[str] = Field(default=None, max_length=50)
    title: str = Field(max_length=255)
    indicator: str = Field(default="", description="Deskripsi apa yang diukur")
    has_target: bool = Field(default=True, description="Section meminta isian target")
    has_budget: bool = Field(default=True, description="Section meminta isian anggaran")
    sequence: int = Field(default=1, index=True)

    def __repr__(self) -> str:
        return f"<LaporanSection(title={self.title}, sequence={self.sequence})>"
