"""Repository untuk bank pertanyaan Evaluasi dan kategori nilai."""

from typing import Dict, List, Optional
from datetime import datetime
from sqlalchemy import select, and_, or_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.evaluasi_template import EvaluasiCluster, EvaluasiQuestion, EvaluationCategory
from src.schemas.evaluasi_template import EvaluasiClusterInput, EvaluationCategoryInput


class EvaluasiTemplateRepository:
    """Repository untuk klaster, pertanyaan, dan band kategori."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== READ OPERATIONS =====

    async def get_active_clusters(self, level_id: Optional[int] = None) -> List[EvaluasiCluster]:
        """
        Klaster aktif untuk level tertentu (termasuk klaster global), urut sequence.

        Tanpa level: semua klaster aktif.
        """
        query = select(EvaluasiCluster).where(EvaluasiCluster.is_active.is_(True))
        if level_id is not None:
            query = query.where(
                or_(
                    EvaluasiCluster.instansi_level_id == level_id,
                    EvaluasiCluster.applies_to_all.is_(True)
                )
            )
        result = await self.session.execute(
            query.order_by(EvaluasiCluster.sequence, EvaluasiCluster.id)
        )
        return list(result.scalars().all())

    async def get_active_questions(self, cluster_ids: List[int]) -> Dict[int, List[EvaluasiQuestion]]:
        """Pertanyaan aktif dikelompokkan per cluster_id, urut sequence."""
        grouped: Dict[int, List[EvaluasiQuestion]] = {cluster_id: [] for cluster_id in cluster_ids}
        if not cluster_ids:
            return grouped

        result = await self.session.execute(
            select(EvaluasiQuestion)
            .where(and_(
                EvaluasiQuestion.cluster_id.in_(cluster_ids),
                EvaluasiQuestion.is_active.is_(True)
            ))
            .order_by(EvaluasiQuestion.sequence, EvaluasiQuestion.id)
        )
        for question in result.scalars().all():
            grouped[question.cluster_id].append(question)
        return grouped

    async def _get_scope_clusters(self, level_id: Optional[int]) -> List[EvaluasiCluster]:
        """Semua klaster (aktif & non-aktif) dalam satu scope editor."""
        if level_id is None:
            scope = EvaluasiCluster.instansi_level_id.is_(None)
        else:
            scope = EvaluasiCluster.instansi_level_id == level_id
        result = await self.session.execute(select(EvaluasiCluster).where(scope))
        return list(result.scalars().all())

    # ===== SAVE (ADMIN EDITOR) =====

    async def save_scope(
        self,
        level_id: Optional[int],
        clusters_input: List[EvaluasiClusterInput],
        user_id: str
    ) -> List[EvaluasiCluster]:
        """
        Simpan bank pertanyaan satu scope dalam satu transaksi.

        Urutan list menentukan sequence. Klaster/pertanyaan yang tidak ada di payload
        di-nonaktifkan (bukan dihapus) supaya snapshot submission lama tetap utuh.
        """
        now = datetime.utcnow()
        try:
            scope_clusters = await self._get_scope_clusters(level_id)
            clusters_by_id = {cluster.id: cluster for cluster in scope_clusters}

            questions_by_cluster: Dict[int, Dict[int, EvaluasiQuestion]] = {}
            if clusters_by_id:
                result = await self.session.execute(
                    select(EvaluasiQuestion).where(EvaluasiQuestion.cluster_id.in_(list(clusters_by_id)))
                )
                for question in result.scalars().all():
                    questions_by_cluster.setdefault(question.cluster_id, {})[question.id] = question

            # Non-aktifkan seluruh scope dulu; index unik sequence hanya berlaku untuk baris aktif
            for cluster in scope_clusters:
                cluster.is_active = False
                for question in questions_by_cluster.get(cluster.id, {}).values():
                    question.is_active = False
            await self.session.flush()

            saved: List[EvaluasiCluster] = []
            for position, cluster_input in enumerate(clusters_input, start=1):
                cluster = clusters_by_id.get(cluster_input.id) if cluster_input.id else None
                if cluster is None:
                    cluster = EvaluasiCluster(
                        instansi_level_id=level_id,
                        applies_to_all=level_id is None,
                        title=cluster_input.title,
                        created_by=user_id,
                    )
                    self.session.add(cluster)

                cluster.title = cluster_input.title
                cluster.sequence = position
                cluster.is_active = True
                cluster.updated_by = user_id
                cluster.updated_at = now
                await self.session.flush()

                existing_questions = questions_by_cluster.get(cluster.id, {})
                for q_position, question_input in enumerate(cluster_input.questions, start=1):
                    question = existing_questions.get(question_input.id) if question_input.id else None
                    if question is None:
                        question = EvaluasiQuestion(
                            cluster_id=cluster.id,
                            question_text=question_input.text,
                            created_by=user_id,
                        )
                        self.session.add(question)

                    question.question_text = question_input.text
                    question.sequence = q_position
                    question.is_active = True
                    question.updated_by = user_id
                    question.updated_at = now
                    await self.session.flush()

                saved.append(cluster)

            await self.session.commit()
            return saved
        except Exception:
            await self.session.rollback()
            raise

    # ===== KATEGORI NILAI =====

    async def list_categories(self) -> List[EvaluationCategory]:
        result = await self.session.execute(
            select(EvaluationCategory).order_by(EvaluationCategory.min_score)
        )
        return list(result.scalars().all())

    async def get_category(self, category_id: int) -> Optional[EvaluationCategory]:
        return await self.session.get(EvaluationCategory, category_id)

    async def replace_categories(self, categories_input: List[EvaluationCategoryInput]) -> List[EvaluationCategory]:
        """Ganti set band kategori. Band yang tidak dikirim dihapus."""
        now = datetime.utcnow()
        try:
            existing = {category.id: category for category in await self.list_categories()}
            keep_ids = {item.id for item in categories_input if item.id in existing}

            removed_ids = [category_id for category_id in existing if category_id not in keep_ids]
            if removed_ids:
                await self.session.execute(
                    delete(EvaluationCategory).where(EvaluationCategory.id.in_(removed_ids))
                )
                await self.session.flush()

            for item in categories_input:
                category = existing.get(item.id) if item.id else None
                if category is None:
                    category = EvaluationCategory(
                        slug=item.slug or item.label.strip().lower().replace(" ", "-"),
                        label=item.label,
                        min_score=item.min_score,
                        max_score=item.max_score,
                    )
                    self.session.add(category)

                if item.slug:
                    category.slug = item.slug
                category.label = item.label
                category.description = item.description
                category.min_score = item.min_score
                category.max_score = item.max_score
                category.color_class = item.color_class
                category.updated_at = now

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return await self.list_categories()
