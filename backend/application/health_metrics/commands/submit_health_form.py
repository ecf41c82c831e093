"""SubmitHealthFormCommand - validate a health form and assess it."""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple

import structlog

from domain.health_metrics.core.exceptions import InvalidHealthFormError
from domain.health_metrics.core.value_objects.bmi_category import (
    BMICategoryDefinition,
)
from domain.health_metrics.core.value_objects.diet_recommendation import (
    DietRecommendation,
)
from domain.health_metrics.core.value_objects.health_metrics import HealthMetrics
from infrastructure.config import EngineSettings, get_engine_settings

from ..forms.health_form import HealthForm
from ..orchestrators.assessment_orchestrator import HealthAssessmentOrchestrator

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SubmitHealthFormCommand:
    """Command to assess a submitted health form.

    Attributes:
        form_data: Raw form fields as received from the client
        user_id: Optional submitter identifier, used for logging only
    """

    form_data: Mapping[str, Any] = field(default_factory=dict)
    user_id: Optional[str] = None


@dataclass(frozen=True)
class SubmitHealthFormResult:
    """Result of a health form submission.

    Attributes:
        form: Validated form
        metrics: Health metrics
        category: Category row with description and advice
        diet: Diet recommendation with storage floors applied
        medical_recommendations: Guidance for the medical conditions
        clamped: True when any storage floor changed the diet target
    """

    form: HealthForm
    metrics: HealthMetrics
    category: BMICategoryDefinition
    diet: DietRecommendation
    medical_recommendations: Tuple[str, ...]
    clamped: bool = False


class SubmitHealthFormHandler:
    """Handler for SubmitHealthFormCommand.

    Processes a submission by:
    1. Validating the raw form (all errors reported together)
    2. Running the full assessment via orchestrator
    3. Flooring the diet target for storage (calories >= minimum,
       macro grams >= 0)
    """

    def __init__(
        self,
        orchestrator: HealthAssessmentOrchestrator,
        settings: Optional[EngineSettings] = None,
    ):
        self._orchestrator = orchestrator
        self._settings = settings or get_engine_settings()

    def handle(self, command: SubmitHealthFormCommand) -> SubmitHealthFormResult:
        """
        Handle health form submission.

        Args:
            command: SubmitHealthFormCommand with raw form data

        Returns:
            SubmitHealthFormResult with metrics and clamped diet targets

        Raises:
            InvalidHealthFormError: If form validation fails
        """
        # Step 1: Validate form
        try:
            form = HealthForm.from_mapping(command.form_data)
        except InvalidHealthFormError as e:
            logger.warning(
                "Health form rejected",
                user_id=command.user_id,
                errors=e.errors,
            )
            raise

        # Step 2: Run assessment
        assessment = self._orchestrator.assess(
            measurement=form.to_measurement(),
            conditions=form.medical_conditions,
            restrictions=form.dietary_restrictions,
        )

        # Step 3: Apply storage floors
        raw_target = assessment.diet.target
        safe_target = raw_target.clamped(self._settings.min_daily_calories)
        clamped = safe_target != raw_target
        if clamped:
            logger.info(
                "Diet target clamped for storage",
                user_id=command.user_id,
                raw_calories=raw_target.daily_calories,
                stored_calories=safe_target.daily_calories,
            )

        logger.info(
            "Health assessment completed",
            user_id=command.user_id,
            bmi=assessment.metrics.bmi,
            category=assessment.metrics.category.value,
            daily_calories=safe_target.daily_calories,
            medical_recommendations=len(assessment.medical_recommendations),
        )

        return SubmitHealthFormResult(
            form=form,
            metrics=assessment.metrics,
            category=assessment.category,
            diet=replace(assessment.diet, target=safe_target),
            medical_recommendations=assessment.medical_recommendations,
            clamped=clamped,
        )
