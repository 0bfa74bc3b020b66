"""Calculator untuk skor Evaluasi dan pencarian kategori nilai."""

from typing import Any, Iterable, List, Optional, Sequence

from src.core.exceptions import ConfigurationError

MIN_SCORE = 0
MAX_SCORE = 100


class EvaluasiCalculator:
    """Scoring deterministik: fungsi murni dari jawaban dan band kategori."""

    @staticmethod
    def calculate_score(answer_values: Iterable[int]) -> int:
        """
        Skor = round(100 * jumlah jawaban "ya" / jumlah jawaban), dibulatkan ke atas pada .5.

        Hanya jawaban yang ada di submission yang dihitung; tidak mengasumsikan
        ukuran bank pertanyaan tetap.

        Raises:
            ValueError: Jika tidak ada jawaban
        """
        values = list(answer_values)
        total = len(values)
        if total == 0:
            raise ValueError("Tidak ada jawaban untuk dihitung")

        yes_count = sum(1 for value in values if value == 1)
        # Integer half-up: round() bawaan Python memakai banker's rounding
        return (200 * yes_count + total) // (2 * total)

    @staticmethod
    def find_category(score: int, categories: Sequence[Any]) -> Optional[Any]:
        """Cari band pertama (urut min_score) yang memuat score. None jika tidak ada."""
        for category in sorted(categories, key=lambda c: c.min_score):
            if category.min_score <= score <= category.max_score:
                return category
        return None

    @staticmethod
    def validate_category_bands(categories: Sequence[Any]) -> List[str]:
        """
        Validasi set band kategori terhadap rentang 0..100.

        Returns:
            List pesan error (kosong jika valid): batas di luar rentang,
            min > max, overlap, dan gap antar band.
        """
        errors: List[str] = []
        if not categories:
            return ["Minimal satu kategori harus didefinisikan"]

        for category in categories:
            label = getattr(category, "label", "?")
            if category.min_score < MIN_SCORE or category.max_score > MAX_SCORE:
                errors.append(f"Kategori '{label}' di luar rentang {MIN_SCORE}-{MAX_SCORE}")
            if category.min_score > category.max_score:
                errors.append(f"Kategori '{label}': min_score lebih besar dari max_score")

        ordered = sorted(categories, key=lambda c: (c.min_score, c.max_score))

        if ordered[0].min_score > MIN_SCORE:
            errors.append(f"Skor {MIN_SCORE}-{ordered[0].min_score - 1} tidak memiliki kategori")

        for previous, current in zip(ordered, ordered[1:]):
            if current.min_score <= previous.max_score:
                errors.append(
                    f"Kategori '{previous.label}' dan '{current.label}' tumpang tindih"
                )
            elif current.min_score > previous.max_score + 1:
                errors.append(
                    f"Skor {previous.max_score + 1}-{current.min_score - 1} tidak memiliki kategori"
                )

        highest = max(c.max_score for c in ordered)
        if highest < MAX_SCORE:
            errors.append(f"Skor {highest + 1}-{MAX_SCORE} tidak memiliki kategori")

        return errors


def calculate_score(answer_values: Iterable[int]) -> int:
    return EvaluasiCalculator.calculate_score(answer_values)


def find_category(score: int, categories: Sequence[Any]) -> Optional[Any]:
    return EvaluasiCalculator.find_category(score, categories)


def require_category(score: int, categories: Sequence[Any]) -> Any:
    """
    Seperti find_category, tetapi band yang tidak ditemukan adalah error konfigurasi.

    Raises:
        ConfigurationError: Jika tidak ada band yang memuat score
    """
    category = EvaluasiCalculator.find_category(score, categories)
    if category is None:
        raise ConfigurationError(
            f"Tidak ada kategori nilai untuk skor {score}",
            details={"score": score, "bands": len(categories)},
        )
    return category


def validate_category_bands(categories: Sequence[Any]) -> List[str]:
    return EvaluasiCalculator.validate_category_bands(categories)
