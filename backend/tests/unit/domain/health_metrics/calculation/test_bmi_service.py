"""Unit tests for BMIService."""

import pytest

from domain.health_metrics.calculation.bmi_service import BMIService


class TestBMIService:
    """Test BMI and ideal weight calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMIService()

    def test_calculate_bmi(self):
        """Test BMI = weight / height(m)²."""
        bmi = self.service.calculate(height_cm=170.0, weight_kg=70.0)

        # 70 / 1.7² = 24.221
        assert bmi == pytest.approx(24.2215, abs=1e-4)

    def test_calculate_bmi_is_unrounded(self):
        """Test calculate keeps full precision."""
        bmi = self.service.calculate(height_cm=170.0, weight_kg=70.0)

        assert bmi != round(bmi, 1)

    def test_bmi_scales_with_weight(self):
        """Test doubling weight doubles BMI."""
        single = self.service.calculate(180.0, 60.0)
        double = self.service.calculate(180.0, 120.0)

        assert double == pytest.approx(2 * single)

    def test_ideal_weight_range(self):
        """Test ideal range for 170 cm."""
        # 18.5 × 2.89 = 53.465, 24.9 × 2.89 = 71.961
        assert self.service.ideal_weight_range(170.0) == (53, 72)

    def test_ideal_weight_range_tall(self):
        """Test ideal range for 180 cm."""
        # 18.5 × 3.24 = 59.94, 24.9 × 3.24 = 80.676
        assert self.service.ideal_weight_range(180.0) == (60, 81)

    def test_ideal_weight_range_rounds_half_up(self):
        """Test 18.5 kg rounds to 19, not to even 18."""
        assert self.service.ideal_weight_range(100.0) == (19, 25)

    def test_ideal_weight_range_returns_ints(self):
        """Test both bounds are whole kilograms."""
        low, high = self.service.ideal_weight_range(165.0)

        assert isinstance(low, int)
        assert isinstance(high, int)
        assert low < high
