"""Repository untuk submission Laporan."""

from typing import List, Optional, Tuple
from sqlalchemy import select, and_, or_, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.laporan_submission import LaporanSubmission, LaporanSubmissionSection
from src.models.submission_status_log import SubmissionStatusLog
from src.schemas.filters import SubmissionFilterParams


class LaporanSubmissionRepository:
    """Repository untuk operasi submission Laporan."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== CREATE OPERATIONS =====

    async def create_with_sections(
        self,
        submission: LaporanSubmission,
        sections: List[LaporanSubmissionSection],
        creation_log: SubmissionStatusLog
    ) -> LaporanSubmission:
        """Simpan laporan, section, dan log awal dalam satu transaksi."""
        try:
            self.session.add(submission)
            await self.session.flush()

            for section in sections:
                section.laporan_submission_id = submission.id
                self.session.add(section)

            creation_log.submission_id = submission.id
            self.session.add(creation_log)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(submission)
        return submission

    # ===== READ OPERATIONS =====

    async def get_by_id(self, submission_id: str) -> Optional[LaporanSubmission]:
        return await self.session.get(LaporanSubmission, submission_id)

    async def get_sections(self, submission_id: str) -> List[LaporanSubmissionSection]:
        result = await self.session.execute(
            select(LaporanSubmissionSection)
            .where(LaporanSubmissionSection.laporan_submission_id == submission_id)
            .order_by(LaporanSubmissionSection.sequence)
        )
        return list(result.scalars().all())

    async def code_exists(self, code: str) -> bool:
        result = await self.session.execute(
            select(LaporanSubmission.id).where(LaporanSubmission.submission_code == code)
        )
        return result.scalar_one_or_none() is not None

    async def get_all_filtered(
        self,
        filters: SubmissionFilterParams,
        owner_id: Optional[str] = None
    ) -> Tuple[List[LaporanSubmission], int]:
        """Daftar laporan dengan filter dan pagination; owner_id membatasi ke milik sendiri."""
        conditions = []
        if owner_id is not None:
            conditions.append(LaporanSubmission.submitted_by == owner_id)
        if filters.status is not None:
            conditions.append(LaporanSubmission.status == filters.status)
        if filters.instansi_id is not None:
            conditions.append(LaporanSubmission.instansi_id == filters.instansi_id)
        if filters.instansi_level_id is not None:
            conditions.append(LaporanSubmission.instansi_level_id == filters.instansi_level_id)
        if filters.report_year is not None:
            conditions.append(LaporanSubmission.report_year == filters.report_year)
        if filters.search:
            search_term = f"%{filters.search}%"
            conditions.append(or_(
                LaporanSubmission.submission_code.ilike(search_term),
                LaporanSubmission.instansi_name.ilike(search_term),
                LaporanSubmission.report_level.ilike(search_term),
            ))

        query = select(LaporanSubmission)
        if conditions:
            query = query.where(and_(*conditions))

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.session.execute(count_query)).scalar() or 0

        offset = (filters.page - 1) * filters.size
        result = await self.session.execute(
            query
            .order_by(LaporanSubmission.submitted_at.desc())
            .offset(offset)
            .limit(filters.size)
        )
        return list(result.scalars().all()), total

    # ===== DELETE OPERATIONS =====

    async def hard_delete(self, submission_id: str) -> bool:
        """Hapus laporan beserta section-nya. Status log tidak ikut dihapus."""
        try:
            await self.session.execute(
                delete(LaporanSubmissionSection).where(
                    LaporanSubmissionSection.laporan_submission_id == submission_id
                )
            )
            result = await self.session.execute(
                delete(LaporanSubmission).where(LaporanSubmission.id == submission_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return result.rowcount > 0
