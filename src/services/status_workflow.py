"""Aturan transisi status submission (Evaluasi & Laporan)."""

from typing import Dict, FrozenSet

from src.core.exceptions import ConflictError
from src.models.enums import SubmissionStatus

# Hanya pending yang boleh berpindah; verified/rejected adalah status final
ALLOWED_TRANSITIONS: Dict[SubmissionStatus, FrozenSet[SubmissionStatus]] = {
    SubmissionStatus.PENDING: frozenset({SubmissionStatus.VERIFIED, SubmissionStatus.REJECTED}),
    SubmissionStatus.VERIFIED: frozenset(),
    SubmissionStatus.REJECTED: frozenset(),
}


def can_transition(current: SubmissionStatus, target: SubmissionStatus) -> bool:
    return SubmissionStatus(target) in ALLOWED_TRANSITIONS[SubmissionStatus(current)]


def ensure_transition_allowed(current: SubmissionStatus, target: SubmissionStatus) -> None:
    """
    Raise ConflictError jika transisi tidak diizinkan.

    Tidak ada yang ditulis ke database sebelum pengecekan ini lolos.
    """
    current = SubmissionStatus(current)
    target = SubmissionStatus(target)
    if can_transition(current, target):
        return

    if current.value in SubmissionStatus.terminal_values():
        message = (
            f"Submission sudah berstatus {SubmissionStatus.get_display_name(current.value)} "
            f"dan tidak dapat diubah lagi"
        )
    else:
        message = (
            f"Transisi status dari {current.value} ke {target.value} tidak diizinkan"
        )
    raise ConflictError(message, details={"current_status": current.value, "requested_status": target.value})
