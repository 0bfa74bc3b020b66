"""Enums untuk domain pelaporan."""

from enum import Enum


class UserRole(str, Enum):
    """Role dari token. SUPER_ADMIN & ADMIN adalah reviewer."""
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    ADMIN_PROVINSI = "ADMIN_PROVINSI"
    ADMIN_KABKOTA = "ADMIN_KABKOTA"
    ADMIN_KECAMATAN = "ADMIN_KECAMATAN"
    ADMIN_KELURAHAN = "ADMIN_KELURAHAN"
    ADMIN_DESA = "ADMIN_DESA"

    @classmethod
    def reviewer_values(cls):
        """Role yang boleh verifikasi/tolak submission dan kelola template."""
        return [cls.SUPER_ADMIN.value, cls.ADMIN.value]


class SubmissionStatus(str, Enum):
    """Status workflow submission."""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

    @classmethod
    def terminal_values(cls):
        return [cls.VERIFIED.value, cls.REJECTED.value]

    @classmethod
    def get_display_name(cls, status: str) -> str:
        """Get display name untuk status."""
        display_map = {
            cls.PENDING.value: "Menunggu Verifikasi",
            cls.VERIFIED.value: "Terverifikasi",
            cls.REJECTED.value: "Ditolak",
        }
        return display_map.get(status, status)


class SubmissionType(str, Enum):
    """Jenis submission untuk status log."""
    EVALUASI = "evaluasi"
    LAPORAN = "laporan"


class InstansiLevelCode(str, Enum):
    """Tingkat instansi."""
    PROVINSI = "provinsi"
    KAB_KOTA = "kab_kota"
    KECAMATAN = "kecamatan"
    KELURAHAN_DESA = "kelurahan_desa"
    PERUSAHAAN = "perusahaan"

    @classmethod
    def get_display_name(cls, code: str) -> str:
        display_map = {
            cls.PROVINSI.value: "Instansi Tingkat Provinsi",
            cls.KAB_KOTA.value: "Instansi Tingkat Kabupaten/Kota",
            cls.KECAMATAN.value: "Instansi Tingkat Kecamatan",
            cls.KELURAHAN_DESA.value: "Instansi Tingkat Kelurahan/Desa",
            cls.PERUSAHAAN.value: "Instansi Tingkat Perusahaan",
        }
        return display_map.get(code, code)


class RegencyType(str, Enum):
    """Jenis kabupaten/kota."""
    KABUPATEN = "kabupaten"
    KOTA = "kota"


class TemplateSource(str, Enum):
    """Asal data template hasil resolusi."""
    SERVER = "server"      # dari database
    BUILTIN = "builtin"    # bank pertanyaan bawaan (fallback)
    YEAR = "year"          # template laporan tahun spesifik
    BASE = "base"          # template laporan dasar (year = null)
    NONE = "none"          # tidak ada konfigurasi
