"""Tests untuk aturan transisi status."""

import pytest

from src.core.exceptions import ConflictError
from src.models.enums import SubmissionStatus
from src.services.status_workflow import can_transition, ensure_transition_allowed


@pytest.mark.parametrize("target", [SubmissionStatus.VERIFIED, SubmissionStatus.REJECTED])
def test_pending_can_be_finalized(target):
    assert can_transition(SubmissionStatus.PENDING, target)
    ensure_transition_allowed(SubmissionStatus.PENDING, target)


def test_pending_to_pending_rejected():
    with pytest.raises(ConflictError):
        ensure_transition_allowed(SubmissionStatus.PENDING, SubmissionStatus.PENDING)


@pytest.mark.parametrize("current", [SubmissionStatus.VERIFIED, SubmissionStatus.REJECTED])
@pytest.mark.parametrize("target", list(SubmissionStatus))
def test_terminal_states_are_final(current, target):
    assert not can_transition(current, target)
    with pytest.raises(ConflictError) as exc_info:
        ensure_transition_allowed(current, target)
    assert exc_info.value.status_code == 409
    assert exc_info.value.details["current_status"] == current.value


def test_accepts_plain_strings():
    ensure_transition_allowed("pending", "verified")
