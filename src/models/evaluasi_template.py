"""Model bank pertanyaan Evaluasi: klaster, pertanyaan, dan kategori nilai."""

from typing import Optional
from sqlmodel import Field, SQLModel
from sqlalchemy import CheckConstraint, Index, text

from src.models.base import BaseModel, TimestampMixin


class EvaluasiCluster(BaseModel, SQLModel, table=True):
    """Klaster pertanyaan Evaluasi. Scope ke satu level instansi ATAU global (applies_to_all)."""

    __tablename__ = "evaluasi_clusters"
    __table_args__ = (
        CheckConstraint(
            "NOT applies_to_all OR instansi_level_id IS NULL",
            name="ck_evaluasi_clusters_global_scope",
        ),
        # Sequence unik hanya di antara klaster aktif; klaster non-aktif disimpan untuk histori
        Index(
            "uq_evaluasi_clusters_level_sequence_active",
            "instansi_level_id", "sequence",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    instansi_level_id: Optional[int] = Field(
        default=None,
        foreign_key="instansi_levels.id",
        index=True,
        description="Null jika klaster berlaku untuk semua level"
    )
    title: str = Field(max_length=255)
    sequence: int = Field(default=1, description="Urutan tampil")
    is_active: bool = Field(default=True, index=True)
    applies_to_all: bool = Field(default=False)

    def __repr__(self) -> str:
        return f"<EvaluasiCluster(title={self.title}, sequence={self.sequence})>"


class EvaluasiQuestion(BaseModel, SQLModel, table=True):
    """Pertanyaan ya/tidak dalam satu klaster."""

    __tablename__ = "evaluasi_questions"
    __table_args__ = (
        Index(
            "uq_evaluasi_questions_cluster_sequence_active",
            "cluster_id", "sequence",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    cluster_id: int = Field(foreign_key="evaluasi_clusters.id", index=True)
    question_text: str = Field(description="Teks pertanyaan")
    sequence: int = Field(default=1)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"<EvaluasiQuestion(cluster_id={self.cluster_id}, sequence={self.sequence})>"


class EvaluationCategory(TimestampMixin, SQLModel, table=True):
    """Band kategori nilai; dicari dengan score BETWEEN min_score AND max_score."""

    __tablename__ = "evaluation_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=50, unique=True)
    label: str = Field(max_length=60)
    description: Optional[str] = Field(default=None, max_length=255)
    min_score: int = Field(ge=0)
    max_score: int = Field(ge=0)
    color_class: Optional[str] = Field(default=None, max_length=60)

    def __repr__(self) -> str:
        return f"<EvaluationCategory(label={self.label}, {self.min_score}-{self.max_score})>"
