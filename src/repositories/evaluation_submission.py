"""Repository untuk submission Evaluasi."""

from typing import List, Optional, Tuple
from sqlalchemy import select, and_, or_, func, delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.evaluation_submission import EvaluationSubmission, EvaluationAnswer
from src.models.submission_status_log import SubmissionStatusLog
from src.schemas.filters import SubmissionFilterParams


class EvaluationSubmissionRepository:
    """Repository untuk operasi submission Evaluasi."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ===== CREATE OPERATIONS =====

    async def create_with_answers(
        self,
        submission: EvaluationSubmission,
        answers: List[EvaluationAnswer],
        creation_log: SubmissionStatusLog
    ) -> EvaluationSubmission:
        """Simpan submission, jawaban, dan log awal dalam satu transaksi."""
        try:
            self.session.add(submission)
            await self.session.flush()

            for answer in answers:
                answer.submission_id = submission.id
                self.session.add(answer)

            creation_log.submission_id = submission.id
            self.session.add(creation_log)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(submission)
        return submission

    # ===== READ OPERATIONS =====

    async def get_by_id(self, submission_id: str) -> Optional[EvaluationSubmission]:
        return await self.session.get(EvaluationSubmission, submission_id)

    async def get_answers(self, submission_id: str) -> List[EvaluationAnswer]:
        result = await self.session.execute(
            select(EvaluationAnswer)
            .where(EvaluationAnswer.submission_id == submission_id)
            .order_by(EvaluationAnswer.question_id)
        )
        return list(result.scalars().all())

    async def code_exists(self, code: str) -> bool:
        result = await self.session.execute(
            select(EvaluationSubmission.id).where(EvaluationSubmission.submission_code == code)
        )
        return result.scalar_one_or_none() is not None

    async def get_all_filtered(
        self,
        filters: SubmissionFilterParams,
        owner_id: Optional[str] = None
    ) -> Tuple[List[EvaluationSubmission], int]:
        """
        Daftar submission dengan filter dan pagination.

        owner_id diisi untuk non-reviewer: hanya submission miliknya sendiri.
        """
        conditions = []
        if owner_id is not None:
            conditions.append(EvaluationSubmission.submitted_by == owner_id)
        if filters.status is not None:
            conditions.append(EvaluationSubmission.status == filters.status)
        if filters.instansi_id is not None:
            conditions.append(EvaluationSubmission.instansi_id == filters.instansi_id)
        if filters.instansi_level_id is not None:
            conditions.append(EvaluationSubmission.instansi_level_id == filters.instansi_level_id)
        if filters.report_year is not None:
            conditions.append(EvaluationSubmission.report_year == filters.report_year)
        if filters.search:
            search_term = f"%{filters.search}%"
            conditions.append(or_(
                EvaluationSubmission.submission_code.ilike(search_term),
                EvaluationSubmission.instansi_name.ilike(search_term),
                EvaluationSubmission.pejabat_nama.ilike(search_term),
            ))

        query = select(EvaluationSubmission)
        if conditions:
            query = query.where(and_(*conditions))

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.session.execute(count_query)).scalar() or 0

        offset = (filters.page - 1) * filters.size
        result = await self.session.execute(
            query
            .order_by(EvaluationSubmission.submission_date.desc())
            .offset(offset)
            .limit(filters.size)
        )
        return list(result.scalars().all()), total

    # ===== DELETE OPERATIONS =====

    async def hard_delete(self, submission_id: str) -> bool:
        """Hapus submission beserta jawabannya. Status log tidak ikut dihapus."""
        try:
            await self.session.execute(
                delete(EvaluationAnswer).where(EvaluationAnswer.submission_id == submission_id)
            )
            result = await self.session.execute(
                delete(EvaluationSubmission).where(EvaluationSubmission.id == submission_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return result.rowcount > 0
