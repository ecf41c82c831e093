"""Unit tests for MetricsService and compute_metrics."""

from unittest.mock import Mock

import pytest

from domain.health_metrics.calculation.metrics_service import (
    MetricsService,
    compute_metrics,
)
from domain.health_metrics.core.value_objects import (
    BMR,
    TDEE,
    ActivityLevel,
    BMICategory,
    BodyMeasurement,
    HealthMetrics,
    Sex,
)


class TestMetricsService:
    """Test the full anthropometric calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MetricsService()

    def test_compute_reference_case(self, reference_measurement):
        """Test 170 cm / 70 kg / 30 y / male / moderate."""
        metrics = self.service.compute(reference_measurement)

        assert isinstance(metrics, HealthMetrics)
        assert metrics.bmi == 24.2
        assert metrics.bmr == 1618  # 1617.5 rounded half up
        assert metrics.daily_calories == 2507  # 1617.5 × 1.55 = 2507.125
        assert metrics.ideal_weight_range == (53, 72)
        assert metrics.category == BMICategory.NORMAL
        assert metrics.color_tag == "text-green-600"

    def test_compute_tdee_from_unrounded_bmr(self):
        """Test TDEE is not derived from the rounded BMR."""
        measurement = BodyMeasurement(165.0, 60.0, 25, Sex.FEMALE, ActivityLevel.VERY_ACTIVE)

        metrics = self.service.compute(measurement)

        # BMR 1345.25 → 1345; TDEE 1345.25 × 1.9 = 2555.975 → 2556
        assert metrics.bmr == 1345
        assert metrics.daily_calories == 2556

    def test_compute_missing_activity_is_sedentary(self):
        """Test None activity level uses the 1.2 multiplier."""
        measurement = BodyMeasurement(170.0, 70.0, 30, Sex.MALE, None)

        metrics = self.service.compute(measurement)

        assert metrics.daily_calories == 1941  # 1617.5 × 1.2

    def test_compute_category_uses_unrounded_bmi(self):
        """Test a BMI shown as 30.0 can still classify through the gap."""
        # 119.9 / 2.0² = 29.975 → shown as 30.0, classified in [29.9, 30)
        measurement = BodyMeasurement(200.0, 119.9, 40, Sex.MALE, ActivityLevel.LIGHT)

        metrics = self.service.compute(measurement)

        assert metrics.bmi == 30.0
        assert metrics.category == BMICategory.NORMAL

    @pytest.mark.parametrize(
        "weight, expected",
        [
            (50.0, BMICategory.UNDERWEIGHT),
            (70.0, BMICategory.NORMAL),
            (80.0, BMICategory.OVERWEIGHT),
            (100.0, BMICategory.OBESE),
        ],
    )
    def test_compute_categories(self, weight, expected):
        """Test category for a 170 cm person at several weights."""
        measurement = BodyMeasurement(170.0, weight, 30, Sex.FEMALE, ActivityLevel.LIGHT)

        assert self.service.compute(measurement).category == expected

    def test_compute_uses_injected_services(self, reference_measurement):
        """Test the service delegates to its collaborators."""
        bmr_service = Mock()
        bmr_service.calculate.return_value = BMR(value=1000.0)
        tdee_service = Mock()
        tdee_service.calculate.return_value = TDEE(value=1500.4)

        service = MetricsService(bmr_service=bmr_service, tdee_service=tdee_service)
        metrics = service.compute(reference_measurement)

        bmr_service.calculate.assert_called_once_with(reference_measurement)
        tdee_service.calculate.assert_called_once_with(
            BMR(value=1000.0), ActivityLevel.MODERATE
        )
        assert metrics.bmr == 1000
        assert metrics.daily_calories == 1500

    def test_compute_is_pure(self, reference_measurement):
        """Test repeated calls give identical results."""
        assert self.service.compute(reference_measurement) == self.service.compute(
            reference_measurement
        )


class TestComputeMetricsFunction:
    """Test the module-level entry point with raw values."""

    def test_accepts_raw_strings(self):
        """Test sex and activity level given as strings."""
        metrics = compute_metrics(170, 70, 30, "male", "moderate")

        assert (metrics.bmi, metrics.bmr, metrics.daily_calories) == (24.2, 1618, 2507)

    def test_accepts_enums(self):
        """Test sex and activity level given as enums."""
        metrics = compute_metrics(170, 70, 30, Sex.MALE, ActivityLevel.MODERATE)

        assert metrics.daily_calories == 2507

    def test_unknown_activity_defaults_to_sedentary(self):
        """Test an unrecognised activity level is not an error."""
        unknown = compute_metrics(170, 70, 30, "male", "extremely-active")
        missing = compute_metrics(170, 70, 30, "male", None)

        assert unknown.daily_calories == 1941
        assert missing.daily_calories == 1941

    def test_non_male_uses_female_constant(self):
        """Test 'other' and unknown values use the -161 constant."""
        other = compute_metrics(170, 70, 30, "other", "moderate")
        unknown = compute_metrics(170, 70, 30, "unspecified", "moderate")

        # 1617.5 - 166 = 1451.5 → 1452
        assert other.bmr == 1452
        assert unknown.bmr == 1452

    def test_enum_strings_are_case_sensitive(self):
        """Test differently cased values take the fallbacks."""
        metrics = compute_metrics(170, 70, 30, "MALE", "MODERATE")

        # -161 constant and sedentary 1.2: 1451.5 × 1.2 = 1741.8
        assert (metrics.bmr, metrics.daily_calories) == (1452, 1742)
