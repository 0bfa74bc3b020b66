"""Tests untuk scoring Evaluasi dan validasi band kategori."""

from types import SimpleNamespace

import pytest

from src.core.exceptions import ConfigurationError
from src.templates.default_evaluasi import DEFAULT_EVALUATION_CATEGORIES
from src.utils.evaluasi_calculator import (
    EvaluasiCalculator, calculate_score, find_category, require_category, validate_category_bands
)


def _bands(*ranges):
    return [
        SimpleNamespace(label=f"band-{index}", min_score=low, max_score=high)
        for index, (low, high) in enumerate(ranges)
    ]


@pytest.fixture
def default_categories():
    return [SimpleNamespace(**category) for category in DEFAULT_EVALUATION_CATEGORIES]


class TestCalculateScore:

    def test_twelve_of_sixteen_is_75(self):
        assert calculate_score([1] * 12 + [0] * 4) == 75

    def test_half_rounds_up(self):
        # 1/8 = 12.5
        assert calculate_score([1] + [0] * 7) == 13

    @pytest.mark.parametrize("values, expected", [
        ([0, 0, 0], 0),
        ([1, 1, 1], 100),
        ([1, 0, 0], 33),
        ([1, 1, 0], 67),
    ])
    def test_known_ratios(self, values, expected):
        assert calculate_score(values) == expected

    def test_counts_only_answers_present(self):
        assert calculate_score([1, 1]) == 100

    def test_idempotent(self):
        values = [1, 0, 1, 1, 0]
        assert calculate_score(values) == calculate_score(values)

    def test_empty_answers_rejected(self):
        with pytest.raises(ValueError):
            EvaluasiCalculator.calculate_score([])


class TestFindCategory:

    @pytest.mark.parametrize("score, label", [
        (0, "Kurang"), (49, "Kurang"), (50, "Cukup"), (75, "Cukup"), (76, "Baik"), (100, "Baik"),
    ])
    def test_default_bands(self, default_categories, score, label):
        assert find_category(score, default_categories).label == label

    def test_uncovered_score_returns_none(self):
        assert find_category(60, _bands((0, 49), (76, 100))) is None

    def test_require_category_raises_configuration_error(self, default_categories):
        assert require_category(75, default_categories).label == "Cukup"
        with pytest.raises(ConfigurationError) as exc_info:
            require_category(60, _bands((0, 49), (76, 100)))
        assert exc_info.value.status_code == 500
        assert exc_info.value.details["score"] == 60


class TestValidateCategoryBands:

    def test_default_bands_are_valid(self, default_categories):
        assert validate_category_bands(default_categories) == []

    def test_gap_reported(self):
        errors = validate_category_bands(_bands((0, 49), (60, 100)))
        assert any("50-59" in error for error in errors)

    def test_overlap_reported(self):
        errors = validate_category_bands(_bands((0, 50), (50, 100)))
        assert any("tumpang tindih" in error for error in errors)

    def test_missing_bounds_reported(self):
        errors = validate_category_bands(_bands((10, 90)))
        assert any("0-9" in error for error in errors)
        assert any("91-100" in error for error in errors)

    def test_out_of_range_and_inverted(self):
        errors = validate_category_bands(_bands((0, 120), (80, 70)))
        assert any("di luar rentang" in error for error in errors)
        assert any("min_score lebih besar" in error for error in errors)

    def test_empty_set_rejected(self):
        assert validate_category_bands([]) != []
