"""Generator kode submission: PREFIX-yymmdd-NNNN."""

import random
from datetime import datetime
from typing import Awaitable, Callable, Optional

EVALUASI_PREFIX = "EVL"
LAPORAN_PREFIX = "LPR"
MAX_ATTEMPTS = 20


def build_submission_code(prefix: str, now: Optional[datetime] = None, number: Optional[int] = None) -> str:
    """Build satu kandidat kode, contoh: EVL-250114-0042."""
    now = now or datetime.utcnow()
    if number is None:
        number = random.randint(1, 9999)
    return f"{prefix}-{now.strftime('%y%m%d')}-{number:04d}"


async def generate_unique_code(prefix: str, exists: Callable[[str], Awaitable[bool]]) -> str:
    """
    Generate kode yang belum dipakai.

    Args:
        prefix: EVL atau LPR
        exists: async callable yang mengecek kode di database

    Raises:
        RuntimeError: Jika tidak menemukan kode unik setelah MAX_ATTEMPTS percobaan
    """
    for _ in range(MAX_ATTEMPTS):
        code = build_submission_code(prefix)
        if not await exists(code):
            return code
    raise RuntimeError(f"Gagal membuat kode submission unik untuk prefix {prefix}")
