"""Unit tests for TDEEService."""

import pytest

from domain.health_metrics.calculation.tdee_service import TDEEService
from domain.health_metrics.core.value_objects import BMR, ActivityLevel


class TestTDEEService:
    """Test TDEE calculation with PAL multipliers."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    @pytest.mark.parametrize(
        "activity_level, expected",
        [
            (ActivityLevel.SEDENTARY, 1200.0),
            (ActivityLevel.LIGHT, 1375.0),
            (ActivityLevel.MODERATE, 1550.0),
            (ActivityLevel.ACTIVE, 1725.0),
            (ActivityLevel.VERY_ACTIVE, 1900.0),
        ],
    )
    def test_calculate_tdee_multipliers(self, activity_level, expected):
        """Test each activity level multiplier."""
        tdee = self.service.calculate(BMR(value=1000.0), activity_level)

        assert tdee.value == pytest.approx(expected)

    def test_calculate_tdee_uses_unrounded_bmr(self):
        """Test TDEE keeps BMR precision."""
        tdee = self.service.calculate(BMR(value=1617.5), ActivityLevel.MODERATE)

        # 1617.5 × 1.55 = 2507.125
        assert tdee.value == pytest.approx(2507.125)
        assert tdee.rounded() == 2507

    def test_calculate_tdee_missing_activity_defaults_to_sedentary(self):
        """Test None activity level uses 1.2."""
        tdee = self.service.calculate(BMR(value=1617.5), None)

        assert tdee.value == pytest.approx(1941.0)

    def test_calculate_tdee_higher_activity_higher_tdee(self):
        """Test TDEE increases with activity."""
        bmr = BMR(value=1500.0)
        values = [self.service.calculate(bmr, level).value for level in ActivityLevel]

        assert values == sorted(values)
