"""Repository untuk audit trail status submission (append-only)."""

from typing import List, Optional, Union
from datetime import datetime
from sqlalchemy import select, and_, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.exceptions import ConflictError
from src.models.enums import SubmissionStatus, SubmissionType
from src.models.evaluation_submission import EvaluationSubmission
from src.models.laporan_submission import LaporanSubmission
from src.models.submission_status_log import SubmissionStatusLog

Submission = Union[EvaluationSubmission, LaporanSubmission]


class SubmissionStatusLogRepository:
    """Log hanya pernah ditambah; tidak ada operasi update/delete."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def build_log(
        self,
        submission_type: SubmissionType,
        submission: Submission,
        previous_status: Optional[SubmissionStatus],
        new_status: SubmissionStatus,
        remarks: Optional[str],
        actor: Optional[dict]
    ) -> SubmissionStatusLog:
        """Build baris log tanpa menyimpan (dipakai di dalam transaksi pemanggil)."""
        return SubmissionStatusLog(
            submission_type=submission_type,
            submission_id=submission.id,
            previous_status=previous_status,
            new_status=new_status,
            remarks=remarks,
            instansi_id=submission.instansi_id,
            changed_by=actor.get("id") if actor else None,
            changed_by_name=actor.get("nama") if actor else None,
        )

    async def record_transition(
        self,
        submission_type: SubmissionType,
        submission: Submission,
        new_status: SubmissionStatus,
        note_field: str,
        note: Optional[str],
        actor: dict
    ) -> SubmissionStatusLog:
        """
        Update status submission dan tambah satu log dalam SATU commit.

        UPDATE bersyarat pada status yang dibaca pemanggil: jika reviewer lain
        sudah mengubah status lebih dulu, tidak ada baris yang ter-update dan
        ConflictError dilempar. Jika salah satu gagal, keduanya di-rollback.
        """
        now = datetime.utcnow()
        model = type(submission)
        previous_status = SubmissionStatus(submission.status)
        values = {
            "status": new_status,
            "verified_by": actor.get("id"),
            "verified_at": now,
            "updated_at": now,
        }
        if note is not None:
            values[note_field] = note

        try:
            result = await self.session.execute(
                update(model)
                .where(and_(model.id == submission.id, model.status == previous_status))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise ConflictError(
                    "Status submission sudah diubah oleh reviewer lain",
                    details={"requested_status": SubmissionStatus(new_status).value},
                )

            log = self.build_log(submission_type, submission, previous_status, new_status, note, actor)
            self.session.add(log)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(submission)
        return log

    async def list_for_submission(
        self,
        submission_type: SubmissionType,
        submission_id: str
    ) -> List[SubmissionStatusLog]:
        """Log terbaru di atas."""
        result = await self.session.execute(
            select(SubmissionStatusLog)
            .where(and_(
                SubmissionStatusLog.submission_type == submission_type,
                SubmissionStatusLog.submission_id == submission_id
            ))
            .order_by(SubmissionStatusLog.created_at.desc())
        )
        return list(result.scalars().all())

    async def count_for_submission(self, submission_type: SubmissionType, submission_id: str) -> int:
        result = await self.session.execute(
            select(func.count(SubmissionStatusLog.id)).where(and_(
                SubmissionStatusLog.submission_type == submission_type,
                SubmissionStatusLog.submission_id == submission_id
            ))
        )
        return result.scalar() or 0
