"""Model referensi wilayah: Provinsi → Kabupaten/Kota → Kecamatan → Desa/Kelurahan."""

from typing import Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SQLEnum

from src.models.base import TimestampMixin
from src.models.enums import RegencyType


class Province(TimestampMixin, SQLModel, table=True):
    """Provinsi. Data di-import sekali, read-only saat request."""

    __tablename__ = "provinces"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(max_length=20, unique=True, index=True)
    name: str = Field(max_length=255)

    def __repr__(self) -> str:
        return f"<Province(code={self.code}, name={self.name})>"


class Regency(TimestampMixin, SQLModel, table=True):
    """Kabupaten/Kota."""

    __tablename__ = "regencies"

    id: Optional[int] = Field(default=None, primary_key=True)
    province_id: int = Field(foreign_key="provinces.id", index=True)
    code: str = Field(max_length=20, unique=True, index=True)
    name: str = Field(max_length=255)
    type: RegencyType = Field(
        sa_column=Column(SQLEnum(RegencyType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    )

    @property
    def display_name(self) -> str:
        prefix = "Kota" if self.type == RegencyType.KOTA else "Kabupaten"
        return f"{prefix} {self.name}"

    def __repr__(self) -> str:
        return f"<Regency(code={self.code}, name={self.name})>"


class District(TimestampMixin, SQLModel, table=True):
    """Kecamatan."""

    __tablename__ = "districts"

    id: Optional[int] = Field(default=None, primary_key=True)
    regency_id: int = Field(foreign_key="regencies.id", index=True)
    code: str = Field(max_length=20, unique=True, index=True)
    name: str = Field(max_length=255)


class Village(TimestampMixin, SQLModel, table=True):
    """Desa/Kelurahan."""

    __tablename__ = "villages"

    id: Optional[int] = Field(default=None, primary_key=True)
    district_id: int = Field(foreign_key="districts.id", index=True)
    code: str = Field(max_length=20, unique=True, index=True)
    name: str = Field(max_length=255)
