"""Exception taxonomy untuk domain pelaporan."""

from typing import Any, Dict, List, Optional


class PortalError(Exception):
    """Base class untuk semua error domain."""

    status_code: int = 500
    default_message: str = "Terjadi kesalahan pada server"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class SubmissionValidationError(PortalError):
    """Payload tidak valid. Memuat SEMUA field yang bermasalah, bukan hanya yang pertama."""

    status_code = 422
    default_message = "Validasi data gagal"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)


class ConfigurationError(PortalError):
    """Konfigurasi admin tidak lengkap (band kategori bolong, template tidak ada)."""

    status_code = 500
    default_message = "Konfigurasi sistem tidak lengkap"


class NotFoundError(PortalError):
    """Template, submission, atau referensi lain tidak ditemukan."""

    status_code = 404
    default_message = "Data tidak ditemukan"


class ConflictError(PortalError):
    """Operasi bertentangan dengan state saat ini (mis. transisi dari status final)."""

    status_code = 409
    default_message = "Operasi tidak dapat dilakukan pada status saat ini"
