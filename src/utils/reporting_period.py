"""Utility untuk menentukan keterlambatan submission terhadap periode pelaporan."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from src.models.reporting_setting import ReportingSetting


def _is_deadline_passed_wib(deadline: date, now_utc: Optional[datetime] = None) -> bool:
    """
    Check apakah deadline sudah terlewat berdasarkan jam 23:59 WIB.

    Args:
        deadline: Tanggal batas pelaporan
        now_utc: Waktu pembanding (UTC), default sekarang

    Returns:
        bool: True jika sudah terlewat
    """
    deadline_wib = datetime.combine(deadline, time(23, 59, 59))

    # WIB = UTC+7
    deadline_utc = deadline_wib - timedelta(hours=7)

    current_utc = now_utc or datetime.utcnow()
    return current_utc > deadline_utc


def is_submission_late(
    setting: Optional[ReportingSetting],
    report_year: int,
    now_utc: Optional[datetime] = None
) -> bool:
    """Submission terlambat jika untuk tahun pelaporan aktif dan dikirim setelah deadline."""
    if setting is None or not setting.applies_to(report_year):
        return False
    return _is_deadline_passed_wib(setting.reporting_deadline, now_utc)
