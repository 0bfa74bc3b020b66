"""Tests untuk penentuan keterlambatan dan kode submission."""

from datetime import date, datetime

import pytest

from src.models.reporting_setting import ReportingSetting
from src.utils.reporting_period import _is_deadline_passed_wib, is_submission_late
from src.utils.submission_code import build_submission_code, generate_unique_code


class TestDeadline:

    def test_deadline_is_end_of_day_wib(self):
        deadline = date(2025, 1, 31)
        # 23:59:59 WIB = 16:59:59 UTC
        assert not _is_deadline_passed_wib(deadline, now_utc=datetime(2025, 1, 31, 16, 59, 59))
        assert _is_deadline_passed_wib(deadline, now_utc=datetime(2025, 1, 31, 17, 0, 0))

    def test_no_setting_never_late(self):
        assert not is_submission_late(None, 2025)

    def test_only_active_year_is_late(self):
        setting = ReportingSetting(reporting_year=2025, reporting_deadline=date(2025, 1, 31))
        after = datetime(2025, 3, 1)
        assert is_submission_late(setting, 2025, now_utc=after)
        assert not is_submission_late(setting, 2024, now_utc=after)

    def test_setting_without_deadline(self):
        setting = ReportingSetting(reporting_year=2025, reporting_deadline=None)
        assert not is_submission_late(setting, 2025, now_utc=datetime(2030, 1, 1))


class TestSubmissionCode:

    def test_format(self):
        assert build_submission_code("EVL", now=datetime(2025, 1, 14), number=42) == "EVL-250114-0042"

    async def test_retries_until_unique(self):
        seen = []

        async def exists(code):
            seen.append(code)
            return len(seen) < 3

        code = await generate_unique_code("LPR", exists)
        assert code.startswith("LPR-")
        assert len(seen) == 3

    async def test_gives_up(self):
        async def exists(code):
            return True

        with pytest.raises(RuntimeError):
            await generate_unique_code("EVL", exists)
