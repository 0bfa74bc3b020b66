"""Model referensi instansi dan tingkat instansi."""

from typing import Optional
from sqlmodel import Field, SQLModel

from src.models.base import TimestampMixin


class InstansiLevel(TimestampMixin, SQLModel, table=True):
    """Tingkat instansi (provinsi, kab_kota, kecamatan, kelurahan_desa, perusahaan)."""

    __tablename__ = "instansi_levels"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(max_length=50, unique=True, index=True)
    name: str = Field(max_length=150)
    description: Optional[str] = Field(default=None, max_length=255)

    def __repr__(self) -> str:
        return f"<InstansiLevel(code={self.code})>"


class Instansi(TimestampMixin, SQLModel, table=True):
    """Instansi pelapor. Slug unik di seluruh sistem."""

    __tablename__ = "instansi"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=150, unique=True, index=True)
    name: str = Field(max_length=255, index=True)
    category: Optional[str] = Field(default=None, max_length=100)
    level_id: int = Field(foreign_key="instansi_levels.id", index=True)
    address: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)

    def __repr__(self) -> str:
        return f"<Instansi(slug={self.slug}, level_id={self.level_id})>"
