"""MetricsService - full anthropometric calculation pipeline."""

from typing import Optional, Union

import structlog

from domain.shared.rounding import round_half_up

from ..core.ports.calculators import (
    IBMICalculator,
    IBMIClassifier,
    IBMRCalculator,
    ITDEECalculator,
)
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.body_measurement import BodyMeasurement
from ..core.value_objects.health_metrics import HealthMetrics
from ..core.value_objects.sex import Sex
from .bmi_service import BMIService
from .bmr_service import BMRService
from .category_service import CategoryService
from .tdee_service import TDEEService

logger = structlog.get_logger(__name__)


class MetricsService:
    """Derive BMI, BMR, TDEE, ideal weight and category from measurements.

    Flow:
    1. BMI from height and weight
    2. BMR (Mifflin-St Jeor) from weight, height, age and sex
    3. TDEE from the unrounded BMR and activity level
    4. Category from the unrounded BMI
    5. Ideal weight range from height

    Reported BMI is rounded to 1 decimal, BMR and TDEE to whole kcal,
    all half up.
    """

    def __init__(
        self,
        bmi_service: Optional[IBMICalculator] = None,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        category_service: Optional[IBMIClassifier] = None,
    ) -> None:
        self._bmi_service = bmi_service or BMIService()
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._category_service = category_service or CategoryService()

    def compute(self, measurement: BodyMeasurement) -> HealthMetrics:
        """Compute health metrics for one set of measurements.

        Args:
            measurement: Pre-validated body measurements

        Returns:
            HealthMetrics: Rounded metrics with category and color tag
        """
        bmi = self._bmi_service.calculate(measurement.height_cm, measurement.weight_kg)
        bmr = self._bmr_service.calculate(measurement)
        tdee = self._tdee_service.calculate(bmr, measurement.activity_level)
        definition = self._category_service.classify(bmi)

        metrics = HealthMetrics(
            bmi=round_half_up(bmi, 1),
            bmr=bmr.rounded(),
            daily_calories=tdee.rounded(),
            ideal_weight_range=self._bmi_service.ideal_weight_range(measurement.height_cm),
            category=definition.category,
            color_tag=definition.color_tag,
        )

        logger.debug(
            "Health metrics computed",
            bmi=metrics.bmi,
            bmr=metrics.bmr,
            daily_calories=metrics.daily_calories,
            category=metrics.category.value,
        )
        return metrics


_default_service = MetricsService()


def compute_metrics(
    height_cm: float,
    weight_kg: float,
    age_years: int,
    sex: Union[Sex, str],
    activity_level: Union[ActivityLevel, str, None] = None,
) -> HealthMetrics:
    """Compute health metrics from raw values.

    Raw strings are accepted for ``sex`` and ``activity_level``: anything
    other than ``male`` uses the female constant, and a missing or unknown
    activity level counts as sedentary.

    Example:
        >>> metrics = compute_metrics(170, 70, 30, "male", "moderate")
        >>> (metrics.bmi, metrics.bmr, metrics.daily_calories)
        (24.2, 1618, 2507)
    """
    level = ActivityLevel.parse(activity_level)
    if level is None and activity_level is not None:
        logger.debug("Unknown activity level, using sedentary", activity_level=activity_level)

    measurement = BodyMeasurement(
        height_cm=height_cm,
        weight_kg=weight_kg,
        age_years=age_years,
        sex=Sex.parse(sex),
        activity_level=level,
    )
    return _default_service.compute(measurement)
