"""Service untuk submission Laporan: create, list, detail, status, delete, PDF."""

import logging
from typing import Dict, List, Optional, Tuple

from fastapi import HTTPException, status

from src.auth.permissions import is_reviewer
from src.core.exceptions import NotFoundError
from src.models.enums import SubmissionStatus, SubmissionType
from src.models.laporan_submission import LaporanSubmission, LaporanSubmissionSection
from src.models.laporan_template import LaporanSection, LaporanTemplate
from src.repositories.laporan_submission import LaporanSubmissionRepository
from src.repositories.laporan_template import LaporanTemplateRepository
from src.repositories.region import RegionRepository
from src.repositories.reporting_setting import ReportingSettingRepository
from src.repositories.status_log import SubmissionStatusLogRepository
from src.schemas.common import SuccessResponse
from src.schemas.filters import SubmissionFilterParams
from src.schemas.laporan_submission import (
    LaporanSubmissionCreate, LaporanSubmissionResponse, LaporanSubmissionSectionResponse,
    LaporanSubmissionSummary, LaporanSubmissionListResponse
)
from src.schemas.status import LaporanStatusUpdate, SubmissionStatusLogResponse
from src.services.instansi import InstansiService
from src.services.pdf_generator import LaporanPDFGenerator
from src.services.status_workflow import ensure_transition_allowed
from src.utils.reporting_period import is_submission_late
from src.utils.submission_code import LAPORAN_PREFIX, generate_unique_code
from src.utils.submission_validator import validate_laporan_payload, raise_if_errors

logger = logging.getLogger(__name__)


def _section_flag(known_sections: Dict[str, LaporanSection], section_id: Optional[str], flag: str) -> bool:
    """Flag has_target/has_budget dari section template; True untuk section bebas."""
    template_section = known_sections.get(section_id) if section_id else None
    return getattr(template_section, flag) if template_section else True


class LaporanSubmissionService:
    """Service untuk submission Laporan."""

    def __init__(
        self,
        submission_repo: LaporanSubmissionRepository,
        template_repo: LaporanTemplateRepository,
        status_log_repo: SubmissionStatusLogRepository,
        setting_repo: ReportingSettingRepository,
        region_repo: RegionRepository,
        instansi_service: InstansiService
    ):
        self.submission_repo = submission_repo
        self.template_repo = template_repo
        self.status_log_repo = status_log_repo
        self.setting_repo = setting_repo
        self.region_repo = region_repo
        self.instansi_service = instansi_service

    # ===== CREATE =====

    async def create_submission(
        self,
        data: LaporanSubmissionCreate,
        current_user: Dict
    ) -> LaporanSubmissionResponse:
        """
        Simpan laporan + section + log awal dalam satu transaksi.

        Nilai target/anggaran disimpan apa adanya, termasuk untuk sub-kolom yang
        dinonaktifkan di section template. Flag has_target/has_budget ikut
        disalin ke baris section sehingga perubahan template tidak mengubah
        tampilan laporan lama.
        """
        errors = validate_laporan_payload(data)
        errors.extend(await self.instansi_service.validate_references(data.instansi_id, data.instansi_level_id))

        regency = None
        if data.origin_regency_id is not None:
            regency = await self.region_repo.get_regency(data.origin_regency_id)
            if not regency:
                errors.append({"field": "origin_regency_id", "message": "Kabupaten/kota tidak ditemukan"})

        section_ids = [section.section_id for section in data.sections if section.section_id]
        known_sections = {
            section.id: section for section in await self.template_repo.get_sections_by_ids(section_ids)
        }
        for index, section in enumerate(data.sections):
            if not section.section_id:
                continue
            template_section = known_sections.get(section.section_id)
            if template_section is None:
                errors.append({
                    "field": f"sections[{index}].section_id",
                    "message": "Section template tidak ditemukan"
                })
            elif data.template_id and template_section.template_id != data.template_id:
                errors.append({
                    "field": f"sections[{index}].section_id",
                    "message": "Section bukan bagian dari template yang dipilih"
                })

        raise_if_errors(errors)

        if data.template_id and not await self.template_repo.get_by_id(data.template_id):
            raise NotFoundError("Template laporan tidak ditemukan")

        level_text = data.instansi_level_text
        if not level_text and data.instansi_level_id is not None:
            level = await self.instansi_service.get_level(data.instansi_level_id)
            level_text = level.name if level else None

        origin_regency_name = data.origin_regency_name
        if not origin_regency_name and regency:
            origin_regency_name = regency.display_name

        setting = await self.setting_repo.get_active()
        submission_code = await generate_unique_code(LAPORAN_PREFIX, self.submission_repo.code_exists)

        submission = LaporanSubmission(
            submission_code=submission_code,
            template_id=data.template_id,
            instansi_id=data.instansi_id,
            instansi_name=data.instansi_name,
            instansi_level_id=data.instansi_level_id,
            instansi_level_text=level_text,
            origin_regency_id=data.origin_regency_id,
            origin_regency_name=origin_regency_name,
            report_year=data.report_year,
            report_level=data.report_level or level_text,
            is_late=is_submission_late(setting, data.report_year),
            status=SubmissionStatus.PENDING,
            notes=data.notes,
            submitted_by=current_user["id"],
        )
        sections = [
            LaporanSubmissionSection(
                laporan_submission_id=submission.id,
                section_id=section.section_id,
                section_code=section.section_code,
                section_title=section.section_title.strip(),
                sequence=position,
                has_target=_section_flag(known_sections, section.section_id, "has_target"),
                has_budget=_section_flag(known_sections, section.section_id, "has_budget"),
                target_year=section.target_year,
                target_semester_1=section.target_semester_1,
                target_semester_2=section.target_semester_2,
                budget_year=section.budget_year,
                budget_semester_1=section.budget_semester_1,
                budget_semester_2=section.budget_semester_2,
                notes=section.notes,
            )
            for position, section in enumerate(data.sections, start=1)
        ]
        creation_log = self.status_log_repo.build_log(
            SubmissionType.LAPORAN, submission, None, SubmissionStatus.PENDING, None, current_user
        )

        submission = await self.submission_repo.create_with_sections(submission, sections, creation_log)
        logger.info(
            f"Laporan submission {submission.submission_code} created by {current_user['id']}: "
            f"year={submission.report_year} sections={len(sections)}"
        )
        return await self._build_response(submission)

    # ===== READ =====

    async def get_all_submissions(
        self,
        filters: SubmissionFilterParams,
        current_user: Dict
    ) -> LaporanSubmissionListResponse:
        owner_id = None if is_reviewer(current_user) else current_user["id"]
        submissions, total = await self.submission_repo.get_all_filtered(filters, owner_id)
        return LaporanSubmissionListResponse.create(
            items=[LaporanSubmissionSummary.model_validate(submission) for submission in submissions],
            total=total,
            page=filters.page,
            size=filters.size,
        )

    async def get_submission(self, submission_id: str, current_user: Dict) -> LaporanSubmissionResponse:
        submission = await self._get_accessible_submission(submission_id, current_user)
        return await self._build_response(submission)

    # ===== STATUS =====

    async def update_status(
        self,
        submission_id: str,
        data: LaporanStatusUpdate,
        current_user: Dict
    ) -> LaporanSubmissionResponse:
        """Verifikasi/tolak laporan; catatan reviewer disimpan ke notes."""
        submission = await self._get_submission_or_404(submission_id)
        previous_status = submission.status
        ensure_transition_allowed(submission.status, data.status)

        await self.status_log_repo.record_transition(
            SubmissionType.LAPORAN, submission, data.status, "notes", data.notes, current_user
        )
        logger.info(
            f"Laporan submission {submission.submission_code} {SubmissionStatus(previous_status).value} -> "
            f"{SubmissionStatus(data.status).value} by {current_user['id']}"
        )
        return await self._build_response(submission)

    # ===== DELETE =====

    async def delete_submission(self, submission_id: str, current_user: Dict) -> SuccessResponse:
        submission = await self._get_submission_or_404(submission_id)
        await self.submission_repo.hard_delete(submission.id)

        logger.info(f"Laporan submission {submission.submission_code} deleted by {current_user['id']}")
        return SuccessResponse(
            message=f"Laporan {submission.submission_code} berhasil dihapus",
            data={"id": submission.id, "submission_code": submission.submission_code},
        )

    # ===== PDF =====

    async def generate_pdf(self, submission_id: str, current_user: Dict) -> Tuple[bytes, str]:
        submission = await self._get_accessible_submission(submission_id, current_user)
        response = await self._build_response(submission, include_logs=False)

        data = response.model_dump(exclude={"sections", "status_logs"})
        sections = [section.model_dump() for section in response.sections]
        pdf_bytes = LaporanPDFGenerator().generate_laporan_pdf(data, sections)
        return pdf_bytes, f"laporan_{submission.submission_code}.pdf"

    # ===== HELPERS =====

    async def _get_submission_or_404(self, submission_id: str) -> LaporanSubmission:
        submission = await self.submission_repo.get_by_id(submission_id)
        if not submission:
            raise NotFoundError("Laporan tidak ditemukan")
        return submission

    async def _get_accessible_submission(self, submission_id: str, current_user: Dict) -> LaporanSubmission:
        submission = await self._get_submission_or_404(submission_id)
        if not is_reviewer(current_user) and submission.submitted_by != current_user["id"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied: laporan ini bukan milik Anda"
            )
        return submission

    async def _build_sections(self, submission_id: str) -> List[LaporanSubmissionSectionResponse]:
        rows = await self.submission_repo.get_sections(submission_id)
        return [LaporanSubmissionSectionResponse.model_validate(row) for row in rows]

    async def _build_response(
        self,
        submission: LaporanSubmission,
        include_logs: bool = True
    ) -> LaporanSubmissionResponse:
        template: Optional[LaporanTemplate] = None
        if submission.template_id:
            template = await self.template_repo.get_by_id(submission.template_id)

        logs = []
        if include_logs:
            logs = await self.status_log_repo.list_for_submission(SubmissionType.LAPORAN, submission.id)

        submission_status = SubmissionStatus(submission.status)
        return LaporanSubmissionResponse(
            id=submission.id,
            submission_code=submission.submission_code,
            template_id=submission.template_id,
            template_name=template.display_name if template else None,
            instansi_id=submission.instansi_id,
            instansi_name=submission.instansi_name,
            instansi_level_id=submission.instansi_level_id,
            instansi_level_text=submission.instansi_level_text,
            origin_regency_id=submission.origin_regency_id,
            origin_regency_name=submission.origin_regency_name,
            report_year=submission.report_year,
            report_level=submission.report_level,
            is_late=submission.is_late,
            status=submission_status,
            status_display=SubmissionStatus.get_display_name(submission_status.value),
            notes=submission.notes,
            submitted_by=submission.submitted_by,
            submitted_at=submission.submitted_at,
            verified_by=submission.verified_by,
            verified_at=submission.verified_at,
            sections=await self._build_sections(submission.id),
            status_logs=[SubmissionStatusLogResponse.model_validate(log) for log in logs],
            created_at=submission.created_at,
            updated_at=submission.updated_at,
        )
