"""Service untuk submission Evaluasi: create, list, detail, status, delete, PDF."""

import logging
from datetime import datetime
from typing import Dict, Tuple

from fastapi import HTTPException, status

from src.auth.permissions import is_reviewer
from src.core.exceptions import ConfigurationError, NotFoundError
from src.models.enums import SubmissionStatus, SubmissionType
from src.models.evaluation_submission import EvaluationSubmission, EvaluationAnswer
from src.repositories.evaluasi_template import EvaluasiTemplateRepository
from src.repositories.evaluation_submission import EvaluationSubmissionRepository
from src.repositories.reporting_setting import ReportingSettingRepository
from src.repositories.status_log import SubmissionStatusLogRepository
from src.schemas.common import SuccessResponse
from src.schemas.evaluation_submission import (
    EvaluationSubmissionCreate, EvaluationSubmissionResponse, EvaluationAnswerResponse,
    EvaluationSubmissionSummary, EvaluationSubmissionListResponse, CategoryInfo
)
from src.schemas.filters import SubmissionFilterParams
from src.schemas.status import EvaluationStatusUpdate, SubmissionStatusLogResponse
from src.services.evaluasi_template import EvaluasiTemplateService
from src.services.instansi import InstansiService
from src.services.pdf_generator import EvaluasiPDFGenerator
from src.services.region import RegionService
from src.services.status_workflow import ensure_transition_allowed
from src.utils.evaluasi_calculator import calculate_score, require_category
from src.utils.reporting_period import is_submission_late
from src.utils.submission_code import EVALUASI_PREFIX, generate_unique_code
from src.utils.submission_validator import validate_evaluasi_payload, raise_if_errors

logger = logging.getLogger(__name__)


class EvaluationSubmissionService:
    """Service untuk submission Evaluasi."""

    def __init__(
        self,
        submission_repo: EvaluationSubmissionRepository,
        template_repo: EvaluasiTemplateRepository,
        status_log_repo: SubmissionStatusLogRepository,
        setting_repo: ReportingSettingRepository,
        template_service: EvaluasiTemplateService,
        instansi_service: InstansiService,
        region_service: RegionService
    ):
        self.submission_repo = submission_repo
        self.template_repo = template_repo
        self.status_log_repo = status_log_repo
        self.setting_repo = setting_repo
        self.template_service = template_service
        self.instansi_service = instansi_service
        self.region_service = region_service

    # ===== CREATE =====

    async def create_submission(
        self,
        data: EvaluationSubmissionCreate,
        current_user: Dict
    ) -> EvaluationSubmissionResponse:
        """
        Validasi, hitung skor, lalu simpan submission + jawaban + log awal.

        Workflow:
        1. Kumpulkan semua error (payload, instansi/level, asal wilayah) lalu raise sekali
        2. Skor dan kategori dihitung dari jawaban yang dikirim
        3. Satu transaksi: submission, jawaban, log (null -> pending)
        """
        errors = validate_evaluasi_payload(data)
        errors.extend(await self.instansi_service.validate_references(data.instansi_id, data.instansi_level_id))
        errors.extend(await self.region_service.validate_origin(
            data.origin_regency_id, data.origin_district_id, data.origin_village_id
        ))
        raise_if_errors(errors)

        score = calculate_score(answer.answer_value for answer in data.answers)
        categories = await self.template_repo.list_categories()
        try:
            category = require_category(score, categories)
        except ConfigurationError as e:
            # Submission tetap disimpan tanpa kategori; admin perlu memperbaiki band
            logger.error(f"{e.message} ({e.details}); submission saved without category")
            category = None

        level_text = data.instansi_level_text
        if not level_text and data.instansi_level_id is not None:
            level = await self.instansi_service.get_level(data.instansi_level_id)
            level_text = level.name if level else None

        report_year = data.report_year
        if report_year is None:
            report_year = data.evaluation_date.year if data.evaluation_date else datetime.utcnow().year

        setting = await self.setting_repo.get_active()
        submission_code = await generate_unique_code(EVALUASI_PREFIX, self.submission_repo.code_exists)

        submission = EvaluationSubmission(
            submission_code=submission_code,
            instansi_id=data.instansi_id,
            instansi_name=data.instansi_name,
            instansi_level_id=data.instansi_level_id,
            instansi_level_text=level_text,
            instansi_address=data.instansi_address,
            origin_regency_id=data.origin_regency_id,
            origin_district_id=data.origin_district_id,
            origin_village_id=data.origin_village_id,
            pejabat_nama=data.pejabat_nama,
            pejabat_jabatan=data.pejabat_jabatan,
            employee_male_count=data.employee_male_count,
            employee_female_count=data.employee_female_count,
            evaluation_date=data.evaluation_date,
            report_year=report_year,
            is_late=is_submission_late(setting, report_year),
            score=score,
            category_id=category.id if category else None,
            category_label=category.label if category else None,
            status=SubmissionStatus.PENDING,
            remarks=data.remarks,
            submitted_by=current_user["id"],
        )
        answers = [
            EvaluationAnswer(
                submission_id=submission.id,
                question_id=answer.question_id,
                question_text=answer.question_text.strip(),
                answer_value=answer.answer_value,
                remark=answer.remark,
            )
            for answer in data.answers
        ]
        creation_log = self.status_log_repo.build_log(
            SubmissionType.EVALUASI, submission, None, SubmissionStatus.PENDING, None, current_user
        )

        submission = await self.submission_repo.create_with_answers(submission, answers, creation_log)
        logger.info(
            f"Evaluasi submission {submission.submission_code} created by {current_user['id']}: "
            f"score={score} category={submission.category_label}"
        )
        return await self._build_response(submission)

    # ===== READ =====

    async def get_all_submissions(
        self,
        filters: SubmissionFilterParams,
        current_user: Dict
    ) -> EvaluationSubmissionListResponse:
        """Reviewer melihat semua; user lain hanya submission miliknya."""
        owner_id = None if is_reviewer(current_user) else current_user["id"]
        submissions, total = await self.submission_repo.get_all_filtered(filters, owner_id)
        return EvaluationSubmissionListResponse.create(
            items=[EvaluationSubmissionSummary.model_validate(submission) for submission in submissions],
            total=total,
            page=filters.page,
            size=filters.size,
        )

    async def get_submission(self, submission_id: str, current_user: Dict) -> EvaluationSubmissionResponse:
        submission = await self._get_accessible_submission(submission_id, current_user)
        return await self._build_response(submission)

    # ===== STATUS =====

    async def update_status(
        self,
        submission_id: str,
        data: EvaluationStatusUpdate,
        current_user: Dict
    ) -> EvaluationSubmissionResponse:
        """Verifikasi/tolak. Hanya dari pending; status + log dalam satu commit."""
        submission = await self._get_submission_or_404(submission_id)
        previous_status = submission.status
        ensure_transition_allowed(submission.status, data.status)

        await self.status_log_repo.record_transition(
            SubmissionType.EVALUASI, submission, data.status, "remarks", data.remarks, current_user
        )
        logger.info(
            f"Evaluasi submission {submission.submission_code} {SubmissionStatus(previous_status).value} -> "
            f"{SubmissionStatus(data.status).value} by {current_user['id']}"
        )
        return await self._build_response(submission)

    # ===== DELETE =====

    async def delete_submission(self, submission_id: str, current_user: Dict) -> SuccessResponse:
        """Hapus submission dan jawabannya; status log tetap disimpan."""
        submission = await self._get_submission_or_404(submission_id)
        await self.submission_repo.hard_delete(submission.id)

        logger.info(f"Evaluasi submission {submission.submission_code} deleted by {current_user['id']}")
        return SuccessResponse(
            message=f"Submission {submission.submission_code} berhasil dihapus",
            data={"id": submission.id, "submission_code": submission.submission_code},
        )

    # ===== PDF =====

    async def generate_pdf(self, submission_id: str, current_user: Dict) -> Tuple[bytes, str]:
        """Render PDF submission. Returns (pdf_bytes, filename)."""
        submission = await self._get_accessible_submission(submission_id, current_user)
        response = await self._build_response(submission, include_logs=False)

        groups = await self.template_service.group_answers(submission.instansi_level_id, response.answers)
        cluster_groups = [
            {"title": group["title"], "answers": [answer.model_dump() for answer in group["answers"]]}
            for group in groups
        ]
        category = response.category.model_dump() if response.category else None

        pdf_bytes = EvaluasiPDFGenerator().generate_evaluasi_pdf(
            response.model_dump(), cluster_groups, category
        )
        return pdf_bytes, f"evaluasi_{submission.submission_code}.pdf"

    # ===== HELPERS =====

    async def _get_submission_or_404(self, submission_id: str) -> EvaluationSubmission:
        submission = await self.submission_repo.get_by_id(submission_id)
        if not submission:
            raise NotFoundError("Submission evaluasi tidak ditemukan")
        return submission

    async def _get_accessible_submission(self, submission_id: str, current_user: Dict) -> EvaluationSubmission:
        submission = await self._get_submission_or_404(submission_id)
        if not is_reviewer(current_user) and submission.submitted_by != current_user["id"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied: submission ini bukan milik Anda"
            )
        return submission

    async def _build_response(
        self,
        submission: EvaluationSubmission,
        include_logs: bool = True
    ) -> EvaluationSubmissionResponse:
        answers = await self.submission_repo.get_answers(submission.id)
        logs = []
        if include_logs:
            logs = await self.status_log_repo.list_for_submission(SubmissionType.EVALUASI, submission.id)

        category = None
        if submission.category_id is not None:
            category_row = await self.template_repo.get_category(submission.category_id)
            if category_row:
                category = CategoryInfo.model_validate(category_row)

        origin_names = await self.region_service.get_origin_names(
            submission.origin_regency_id, submission.origin_district_id, submission.origin_village_id
        )
        submission_status = SubmissionStatus(submission.status)

        return EvaluationSubmissionResponse(
            id=submission.id,
            submission_code=submission.submission_code,
            instansi_id=submission.instansi_id,
            instansi_name=submission.instansi_name,
            instansi_level_id=submission.instansi_level_id,
            instansi_level_text=submission.instansi_level_text,
            instansi_address=submission.instansi_address,
            origin_regency_id=submission.origin_regency_id,
            origin_district_id=submission.origin_district_id,
            origin_village_id=submission.origin_village_id,
            **origin_names,
            pejabat_nama=submission.pejabat_nama,
            pejabat_jabatan=submission.pejabat_jabatan,
            employee_male_count=submission.employee_male_count,
            employee_female_count=submission.employee_female_count,
            evaluation_date=submission.evaluation_date,
            submission_date=submission.submission_date,
            report_year=submission.report_year,
            is_late=submission.is_late,
            score=submission.score,
            category=category,
            category_label=submission.category_label,
            status=submission_status,
            status_display=SubmissionStatus.get_display_name(submission_status.value),
            remarks=submission.remarks,
            submitted_by=submission.submitted_by,
            verified_by=submission.verified_by,
            verified_at=submission.verified_at,
            answers=[EvaluationAnswerResponse.model_validate(answer) for answer in answers],
            status_logs=[SubmissionStatusLogResponse.model_validate(log) for log in logs],
            created_at=submission.created_at,
            updated_at=submission.updated_at,
        )
