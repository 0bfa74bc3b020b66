"""Schemas untuk instansi dan tingkat instansi."""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class InstansiLevelResponse(BaseModel):
    id: int
    code: str
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class InstansiResponse(BaseModel):
    """Opsi instansi untuk form."""

    id: int
    slug: str
    name: str
    category: Optional[str] = None
    level_id: int
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
