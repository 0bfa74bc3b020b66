"""Service untuk resolusi dan administrasi bank pertanyaan Evaluasi."""

import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from src.core.exceptions import ConflictError, SubmissionValidationError
from src.models.enums import TemplateSource
from src.repositories.evaluasi_template import EvaluasiTemplateRepository
from src.repositories.instansi import InstansiRepository
from src.schemas.evaluasi_template import (
    EvaluasiTemplateResponse, EvaluasiClusterResponse, EvaluasiQuestionResponse,
    EvaluasiTemplateSaveRequest, EvaluationCategoryResponse, EvaluationCategoryUpdateRequest
)
from src.templates.default_evaluasi import DEFAULT_EVALUASI_CLUSTERS
from src.utils.evaluasi_calculator import validate_category_bands

logger = logging.getLogger(__name__)

OTHER_GROUP_TITLE = "Lainnya"


class EvaluasiTemplateService:
    """Service untuk bank pertanyaan dan kategori nilai Evaluasi."""

    def __init__(
        self,
        template_repo: EvaluasiTemplateRepository,
        instansi_repo: InstansiRepository
    ):
        self.template_repo = template_repo
        self.instansi_repo = instansi_repo

    # ===== RESOLUTION =====

    async def resolve(
        self,
        level_id: Optional[int] = None,
        level_code: Optional[str] = None
    ) -> EvaluasiTemplateResponse:
        """
        Klaster aktif untuk level (plus klaster global), masing-masing dengan pertanyaan aktif.

        Tidak ada klaster aktif -> bank bawaan dengan source=builtin.
        Kode level yang tidak dikenal diperlakukan sebagai tidak ada klaster.
        """
        clusters = []
        if level_id is None and level_code:
            level = await self.instansi_repo.get_level_by_code(level_code)
            if level:
                level_id = level.id
                clusters = await self.template_repo.get_active_clusters(level_id)
        else:
            clusters = await self.template_repo.get_active_clusters(level_id)

        if not clusters:
            logger.warning(
                f"No active Evaluasi clusters for level {level_id or level_code or '-'}; "
                "falling back to builtin question bank"
            )
            return self.builtin_template(level_id)

        questions = await self.template_repo.get_active_questions([cluster.id for cluster in clusters])

        cluster_responses = []
        for cluster in clusters:
            cluster_questions = questions.get(cluster.id, [])
            cluster_responses.append(EvaluasiClusterResponse(
                id=cluster.id,
                title=cluster.title,
                sequence=cluster.sequence,
                instansi_level_id=cluster.instansi_level_id,
                applies_to_all=cluster.applies_to_all,
                questions=[
                    EvaluasiQuestionResponse.model_validate(question)
                    for question in cluster_questions
                ],
            ))

        return EvaluasiTemplateResponse(
            source=TemplateSource.SERVER,
            instansi_level_id=level_id,
            clusters=cluster_responses,
            total_questions=sum(len(cluster.questions) for cluster in cluster_responses),
        )

    @staticmethod
    def builtin_template(level_id: Optional[int] = None) -> EvaluasiTemplateResponse:
        """Bank pertanyaan bawaan: 4 klaster, 16 pertanyaan dengan id 1..16."""
        clusters = [
            EvaluasiClusterResponse(
                id=cluster["id"],
                title=cluster["title"],
                sequence=position,
                instansi_level_id=None,
                applies_to_all=True,
                questions=[
                    EvaluasiQuestionResponse(id=question["id"], question_text=question["text"], sequence=q_position)
                    for q_position, question in enumerate(cluster["questions"], start=1)
                ],
            )
            for position, cluster in enumerate(DEFAULT_EVALUASI_CLUSTERS, start=1)
        ]
        return EvaluasiTemplateResponse(
            source=TemplateSource.BUILTIN,
            instansi_level_id=level_id,
            clusters=clusters,
            total_questions=sum(len(cluster.questions) for cluster in clusters),
        )

    async def group_answers(self, level_id: Optional[int], answers: List) -> List[Dict]:
        """
        Kelompokkan jawaban per klaster sesuai bank untuk level submission.

        Jawaban yang question_id-nya tidak ada di bank masuk grup "Lainnya".
        """
        template = await self.resolve(level_id=level_id)
        answers_by_question = {}
        for answer in answers:
            answers_by_question.setdefault(answer.question_id, []).append(answer)

        groups = []
        for cluster in template.clusters:
            matched = []
            for question in cluster.questions:
                matched.extend(answers_by_question.pop(question.id, []))
            if matched:
                groups.append({"title": cluster.title, "answers": matched})

        leftovers = [answer for bucket in answers_by_question.values() for answer in bucket]
        if leftovers:
            groups.append({"title": OTHER_GROUP_TITLE, "answers": leftovers})
        return groups

    # ===== ADMIN EDITOR =====

    async def save_template(
        self,
        data: EvaluasiTemplateSaveRequest,
        user_id: str
    ) -> EvaluasiTemplateResponse:
        """Upsert bank pertanyaan satu scope, lalu kembalikan hasil resolusi terbaru."""
        errors = []
        if data.instansi_level_id is not None and not await self.instansi_repo.get_level(data.instansi_level_id):
            errors.append({"field": "instansi_level_id", "message": "Tingkat instansi tidak ditemukan"})

        cluster_ids = [cluster.id for cluster in data.clusters if cluster.id is not None]
        if len(cluster_ids) != len(set(cluster_ids)):
            errors.append({"field": "clusters", "message": "ID klaster tidak boleh duplikat"})

        for index, cluster in enumerate(data.clusters):
            question_ids = [question.id for question in cluster.questions if question.id is not None]
            if len(question_ids) != len(set(question_ids)):
                errors.append({
                    "field": f"clusters[{index}].questions",
                    "message": "ID pertanyaan tidak boleh duplikat"
                })

        if errors:
            raise SubmissionValidationError(errors)

        try:
            saved = await self.template_repo.save_scope(data.instansi_level_id, data.clusters, user_id)
        except IntegrityError as e:
            logger.warning(f"Evaluasi template save conflict for level {data.instansi_level_id}: {e}")
            raise ConflictError("Urutan klaster atau pertanyaan bentrok dengan data lain")

        logger.info(
            f"Evaluasi template saved for level {data.instansi_level_id or 'global'}: "
            f"{len(saved)} clusters by {user_id}"
        )
        return await self.resolve(level_id=data.instansi_level_id)

    # ===== KATEGORI NILAI =====

    async def list_categories(self) -> List[EvaluationCategoryResponse]:
        categories = await self.template_repo.list_categories()
        return [EvaluationCategoryResponse.model_validate(category) for category in categories]

    async def update_categories(
        self,
        data: EvaluationCategoryUpdateRequest,
        user_id: str
    ) -> List[EvaluationCategoryResponse]:
        """Ganti band kategori. Submission yang sudah ada tidak di-rescore."""
        band_errors = validate_category_bands(data.categories)
        if band_errors:
            raise SubmissionValidationError(
                [{"field": "categories", "message": message} for message in band_errors],
                message="Rentang kategori tidak valid"
            )

        try:
            categories = await self.template_repo.replace_categories(data.categories)
        except IntegrityError as e:
            logger.warning(f"Evaluation category update conflict: {e}")
            raise ConflictError("Slug kategori sudah dipakai")

        logger.info(f"Evaluation categories replaced by {user_id}: {[c.slug for c in categories]}")
        return [EvaluationCategoryResponse.model_validate(category) for category in categories]
