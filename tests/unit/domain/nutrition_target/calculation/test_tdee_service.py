"""Unit tests for TDEEService."""

import pytest

from domain.nutrition_target.calculation.tdee_service import TDEEService
from domain.nutrition_target.core.exceptions.domain_errors import (
    InvalidInputError,
)
from domain.nutrition_target.core.value_objects import BMR, ActivityLevel


class TestTDEEService:
    """Test TDEE = BMR x PAL."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    @pytest.mark.parametrize(
        "activity_level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHT, 1.375),
            (ActivityLevel.MODERATE, 1.55),
            (ActivityLevel.ACTIVE, 1.725),
            (ActivityLevel.EXTREME, 1.9),
        ],
    )
    def test_calculate_applies_multiplier(self, activity_level, multiplier):
        """Test each activity level uses its PAL multiplier."""
        tdee = self.service.calculate(BMR(value=1780.0), activity_level)

        assert tdee.value == pytest.approx(1780.0 * multiplier)
        assert tdee.activity_level is activity_level

    def test_calculate_canonical_female(self):
        """Test TDEE for the 70 kg / 165 cm / 30 y female reference."""
        tdee = self.service.calculate(BMR(value=1420.25), ActivityLevel.MODERATE)

        # 1420.25 * 1.55 = 2201.3875
        assert tdee.value == pytest.approx(2201.3875)

    def test_calculate_accepts_string_level(self):
        """Test raw string activity level is coerced."""
        tdee = self.service.calculate(BMR(value=1000.0), "active")

        assert tdee.activity_level is ActivityLevel.ACTIVE
        assert tdee.value == pytest.approx(1725.0)

    def test_unknown_activity_level_raises(self):
        """Test unrecognized activity level is a configuration error."""
        with pytest.raises(InvalidInputError, match="activity_level"):
            self.service.calculate(BMR(value=1500.0), "couch")

    def test_compute_raw_value(self):
        """Test compute works on a raw float."""
        assert self.service.compute(1000.0, ActivityLevel.SEDENTARY) == pytest.approx(1200.0)

    def test_tdee_increases_with_activity(self):
        """Test TDEE is monotonic in activity level."""
        values = [
            self.service.calculate(BMR(value=1600.0), level).value
            for level in ActivityLevel
        ]

        assert values == sorted(values)
