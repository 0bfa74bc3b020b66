"""Service untuk resolusi dan administrasi template Laporan."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from src.core.exceptions import ConflictError, NotFoundError, SubmissionValidationError
from src.models.enums import TemplateSource
from src.models.laporan_template import LaporanTemplate
from src.repositories.instansi import InstansiRepository
from src.repositories.laporan_template import LaporanTemplateRepository
from src.schemas.laporan_template import (
    LaporanTemplateResponse, LaporanSectionResponse, LaporanTemplateResolution,
    LaporanTemplateListResponse, LaporanTemplateSaveRequest, LaporanTemplateFilterParams
)

logger = logging.getLogger(__name__)


class LaporanTemplateService:
    """Service untuk template Laporan per (instansi, level, tahun)."""

    def __init__(
        self,
        template_repo: LaporanTemplateRepository,
        instansi_repo: InstansiRepository
    ):
        self.template_repo = template_repo
        self.instansi_repo = instansi_repo

    async def _resolve_instansi_id(
        self,
        instansi_id: Optional[int],
        instansi_slug: Optional[str]
    ) -> Optional[int]:
        """Slug diprioritaskan jika dikirim; slug tidak dikenal -> 404."""
        if instansi_slug:
            instansi = await self.instansi_repo.get_by_slug(instansi_slug)
            if not instansi:
                raise NotFoundError(f"Instansi '{instansi_slug}' tidak ditemukan")
            return instansi.id
        return instansi_id

    async def _build_template_response(self, template: LaporanTemplate) -> LaporanTemplateResponse:
        sections = await self.template_repo.get_sections(template.id)
        return LaporanTemplateResponse(
            id=template.id,
            instansi_id=template.instansi_id,
            instansi_level_id=template.instansi_level_id,
            name=template.name,
            description=template.description,
            year=template.year,
            is_default=template.is_default,
            is_active=template.is_active,
            sections=[LaporanSectionResponse.model_validate(section) for section in sections],
            created_at=template.created_at,
            updated_at=template.updated_at,
            created_by=template.created_by,
            updated_by=template.updated_by,
        )

    # ===== RESOLUTION =====

    async def resolve(
        self,
        year: Optional[int] = None,
        level_id: Optional[int] = None,
        instansi_id: Optional[int] = None,
        instansi_slug: Optional[str] = None
    ) -> LaporanTemplateResolution:
        """
        Template tahun spesifik jika ada, selain itu template dasar (year = null).

        Tidak ada keduanya -> source=none dengan sections kosong.
        """
        instansi_id = await self._resolve_instansi_id(instansi_id, instansi_slug)

        template = None
        source = TemplateSource.NONE
        if year is not None:
            template = await self.template_repo.find_for_year(instansi_id, level_id, year)
            if template:
                source = TemplateSource.YEAR

        if template is None:
            template = await self.template_repo.find_for_year(instansi_id, level_id, None)
            if template:
                source = TemplateSource.BASE

        if template is None:
            logger.info(
                f"No Laporan template for instansi={instansi_id} level={level_id} year={year}"
            )
            return LaporanTemplateResolution(source=TemplateSource.NONE, requested_year=year)

        template_response = await self._build_template_response(template)
        return LaporanTemplateResolution(
            source=source,
            requested_year=year,
            template=template_response,
            sections=template_response.sections,
        )

    # ===== ADMIN =====

    async def list_templates(self, filters: LaporanTemplateFilterParams) -> LaporanTemplateListResponse:
        templates, total = await self.template_repo.get_all_filtered(filters)
        items = [await self._build_template_response(template) for template in templates]
        return LaporanTemplateListResponse.create(
            items=items, total=total, page=filters.page, size=filters.size
        )

    async def save_template(
        self,
        template_id: str,
        data: LaporanTemplateSaveRequest,
        user_id: str
    ) -> LaporanTemplateResponse:
        """
        Simpan section template untuk kombinasi (instansi, level, tahun).

        Tanpa kombinasi: template {template_id} sendiri yang diedit.
        Dengan kombinasi: template aktif kombinasi tersebut, atau clone dari
        {template_id} (is_default=False) jika belum ada.
        """
        source = await self.template_repo.get_by_id(template_id)
        if not source:
            raise NotFoundError("Template laporan tidak ditemukan")

        instansi_id = await self._resolve_instansi_id(data.instansi_id, data.instansi_slug)
        if data.instansi_level_id is not None and not await self.instansi_repo.get_level(data.instansi_level_id):
            raise SubmissionValidationError([
                {"field": "instansi_level_id", "message": "Tingkat instansi tidak ditemukan"}
            ])

        section_ids = [section.id for section in data.sections if section.id]
        if len(section_ids) != len(set(section_ids)):
            raise SubmissionValidationError([
                {"field": "sections", "message": "ID section tidak boleh duplikat"}
            ])

        has_combination = any(value is not None for value in (instansi_id, data.instansi_level_id, data.year))
        target = source
        if has_combination:
            scope_instansi = instansi_id if instansi_id is not None else source.instansi_id
            scope_level = data.instansi_level_id if data.instansi_level_id is not None else source.instansi_level_id
            target = await self.template_repo.find_for_year(scope_instansi, scope_level, data.year)
            if target is None:
                target = await self.template_repo.clone(
                    source, scope_instansi, scope_level, data.year, user_id
                )
                logger.info(
                    f"Cloned Laporan template {source.id} -> {target.id} "
                    f"(instansi={scope_instansi}, level={scope_level}, year={data.year})"
                )

        if data.name:
            target.name = data.name.strip()
        if data.description is not None:
            target.description = data.description

        try:
            sections = await self.template_repo.save_sections(target, data.sections, user_id)
        except IntegrityError as e:
            logger.warning(f"Laporan template save conflict for {target.id}: {e}")
            raise ConflictError("Template laporan bentrok dengan data lain")

        logger.info(f"Laporan template {target.id} saved with {len(sections)} sections by {user_id}")
        return await self._build_template_response(target)
