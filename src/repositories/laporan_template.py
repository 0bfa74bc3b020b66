"""Repository untuk template Laporan dan section-sectionnya."""

from typing import List, Optional, Tuple
from datetime import datetime
from sqlalchemy import select, and_, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.laporan_template import LaporanTemplate, LaporanSection
from src.schemas.laporan_template import LaporanSectionInput, LaporanTemplateFilterParams


class LaporanTemplateRepository:
    """Repository untuk operasi template Laporan."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== READ OPERATIONS =====

    async def get_by_id(self, template_id: str) -> Optional[LaporanTemplate]:
        return await self.session.get(LaporanTemplate, template_id)

    async def get_sections(self, template_id: str) -> List[LaporanSection]:
        result = await self.session.execute(
            select(LaporanSection)
            .where(LaporanSection.template_id == template_id)
            .order_by(LaporanSection.sequence, LaporanSection.created_at)
        )
        return list(result.scalars().all())

    async def get_sections_by_ids(self, section_ids: List[str]) -> List[LaporanSection]:
        if not section_ids:
            return []
        result = await self.session.execute(
            select(LaporanSection).where(LaporanSection.id.in_(section_ids))
        )
        return list(result.scalars().all())

    def _scope_query(self, instansi_id: Optional[int], level_id: Optional[int]):
        query = select(LaporanTemplate).where(LaporanTemplate.is_active.is_(True))
        if level_id is not None:
            query = query.where(LaporanTemplate.instansi_level_id == level_id)
        if instansi_id is not None:
            query = query.where(LaporanTemplate.instansi_id == instansi_id)
        return query

    async def find_for_year(
        self,
        instansi_id: Optional[int],
        level_id: Optional[int],
        year: Optional[int]
    ) -> Optional[LaporanTemplate]:
        """
        Template aktif terbaik untuk satu tier.

        year=None mencari template dasar (year IS NULL). Urutan: is_default DESC, name ASC.
        """
        query = self._scope_query(instansi_id, level_id)
        if year is None:
            query = query.where(LaporanTemplate.year.is_(None))
        else:
            query = query.where(LaporanTemplate.year == year)

        result = await self.session.execute(
            query.order_by(LaporanTemplate.is_default.desc(), LaporanTemplate.name.asc()).limit(1)
        )
        return result.scalars().first()

    async def get_all_filtered(
        self,
        filters: LaporanTemplateFilterParams
    ) -> Tuple[List[LaporanTemplate], int]:
        """Daftar template untuk halaman admin."""
        conditions = []
        if not filters.include_inactive:
            conditions.append(LaporanTemplate.is_active.is_(True))
        if filters.instansi_level_id is not None:
            conditions.append(LaporanTemplate.instansi_level_id == filters.instansi_level_id)
        if filters.instansi_id is not None:
            conditions.append(LaporanTemplate.instansi_id == filters.instansi_id)
        if filters.year is not None:
            conditions.append(LaporanTemplate.year == filters.year)

        query = select(LaporanTemplate)
        if conditions:
            query = query.where(and_(*conditions))

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.session.execute(count_query)).scalar() or 0

        offset = (filters.page - 1) * filters.size
        result = await self.session.execute(
            query
            .order_by(LaporanTemplate.year.desc().nulls_last(), LaporanTemplate.name)
            .offset(offset)
            .limit(filters.size)
        )
        return list(result.scalars().all()), total

    # ===== SAVE (ADMIN EDITOR) =====

    async def clone(
        self,
        source: LaporanTemplate,
        instansi_id: Optional[int],
        level_id: Optional[int],
        year: Optional[int],
        user_id: str
    ) -> LaporanTemplate:
        """Clone baris template (tanpa section) untuk kombinasi baru. Tidak commit."""
        template = LaporanTemplate(
            instansi_id=instansi_id if instansi_id is not None else source.instansi_id,
            instansi_level_id=level_id if level_id is not None else source.instansi_level_id,
            name=source.name,
            description=source.description,
            year=year,
            is_default=False,
            is_active=True,
            created_by=user_id,
        )
        self.session.add(template)
        await self.session.flush()
        return template

    async def save_sections(
        self,
        template: LaporanTemplate,
        sections_input: List[LaporanSectionInput],
        user_id: str
    ) -> List[LaporanSection]:
        """
        Upsert section sesuai urutan payload lalu commit.

        Section yang tidak ada di payload dihapus; snapshot di submission tetap menyimpan judulnya.
        """
        now = datetime.utcnow()
        try:
            existing = {section.id: section for section in await self.get_sections(template.id)}
            incoming_ids = {item.id for item in sections_input if item.id in existing}

            removed_ids = [section_id for section_id in existing if section_id not in incoming_ids]
            if removed_ids:
                await self.session.execute(
                    delete(LaporanSection).where(LaporanSection.id.in_(removed_ids))
                )

            saved: List[LaporanSection] = []
            for position, item in enumerate(sections_input, start=1):
                section = existing.get(item.id) if item.id else None
                if section is None:
                    section = LaporanSection(template_id=template.id, title=item.title)
                    self.session.add(section)

                section.code = item.code if item.code is not None else section.code
                section.title = item.title
                if item.indicator is not None:
                    section.indicator = item.indicator
                if item.has_target is not None:
                    section.has_target = item.has_target
                if item.has_budget is not None:
                    section.has_budget = item.has_budget
                section.sequence = position
                section.updated_at = now
                saved.append(section)

            template.updated_by = user_id
            template.updated_at = now
            await self.session.commit()
            return saved
        except Exception:
            await self.session.rollback()
            raise
