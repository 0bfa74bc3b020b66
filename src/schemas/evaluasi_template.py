"""Schemas untuk bank pertanyaan Evaluasi dan kategori nilai."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from src.models.enums import TemplateSource


# ===== RESPONSE SCHEMAS =====

class EvaluasiQuestionResponse(BaseModel):
    id: int
    question_text: str
    sequence: int

    model_config = ConfigDict(from_attributes=True)


class EvaluasiClusterResponse(BaseModel):
    id: int
    title: str
    sequence: int
    instansi_level_id: Optional[int] = None
    applies_to_all: bool = False
    questions: List[EvaluasiQuestionResponse] = []

    model_config = ConfigDict(from_attributes=True)


class EvaluasiTemplateResponse(BaseModel):
    """Hasil resolusi bank pertanyaan. source=builtin berarti fallback bawaan."""

    source: TemplateSource
    instansi_level_id: Optional[int] = None
    clusters: List[EvaluasiClusterResponse]
    total_questions: int = Field(description="Jumlah pertanyaan aktif")


# ===== REQUEST SCHEMAS (ADMIN EDITOR) =====

class EvaluasiQuestionInput(BaseModel):
    """Pertanyaan dalam editor. id kosong = pertanyaan baru."""

    id: Optional[int] = None
    text: str = Field(..., max_length=1000)

    @field_validator('text')
    @classmethod
    def validate_text(cls, text: str) -> str:
        text = text.strip()
        if not text:
            raise ValueError("Teks pertanyaan tidak boleh kosong")
        return text


class EvaluasiClusterInput(BaseModel):
    """Klaster dalam editor. Urutan list = sequence."""

    id: Optional[int] = None
    title: str = Field(..., max_length=255)
    questions: List[EvaluasiQuestionInput] = []

    @field_validator('title')
    @classmethod
    def validate_title(cls, title: str) -> str:
        title = title.strip()
        if not title:
            raise ValueError("Judul klaster tidak boleh kosong")
        return title


class EvaluasiTemplateSaveRequest(BaseModel):
    """
    Simpan bank pertanyaan untuk satu scope level.

    instansi_level_id kosong = scope global (applies_to_all).
    Klaster/pertanyaan yang tidak ada di payload akan di-nonaktifkan.
    """

    instansi_level_id: Optional[int] = None
    clusters: List[EvaluasiClusterInput]


# ===== KATEGORI NILAI =====

class EvaluationCategoryResponse(BaseModel):
    id: int
    slug: str
    label: str
    description: Optional[str] = None
    min_score: int
    max_score: int
    color_class: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EvaluationCategoryInput(BaseModel):
    """Satu band kategori. Band tanpa id akan dibuat baru."""

    id: Optional[int] = None
    slug: Optional[str] = Field(None, max_length=50)
    label: str = Field(..., min_length=1, max_length=60)
    description: Optional[str] = Field(None, max_length=255)
    min_score: int
    max_score: int
    color_class: Optional[str] = Field(None, max_length=60)


class EvaluationCategoryUpdateRequest(BaseModel):
    """Ganti seluruh set band kategori (tervalidasi tanpa gap/overlap)."""

    categories: List[EvaluationCategoryInput] = Field(..., min_length=1)
