"""CalculateBMIQuery - health metrics without diet targets."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from domain.health_metrics.core.value_objects.health_metrics import HealthMetrics

from ..forms.health_form import HealthForm
from ..orchestrators.assessment_orchestrator import HealthAssessmentOrchestrator


@dataclass(frozen=True)
class CalculateBMIQuery:
    """Query for real-time BMI/BMR/TDEE calculation.

    Attributes:
        form_data: Raw form fields
    """

    form_data: Mapping[str, Any] = field(default_factory=dict)


class CalculateBMIQueryHandler:
    """Handler for CalculateBMIQuery.

    Validates the form the same way a full submission does, then computes
    metrics only.
    """

    def __init__(self, orchestrator: HealthAssessmentOrchestrator):
        self._orchestrator = orchestrator

    def handle(self, query: CalculateBMIQuery) -> HealthMetrics:
        """
        Handle the query.

        Raises:
            InvalidHealthFormError: If form validation fails
        """
        form = HealthForm.from_mapping(query.form_data)
        return self._orchestrator.compute_metrics(form.to_measurement())
