"""ConditionRecommendationService - dietary guidance for medical conditions."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.ports.calculators import IConditionRecommender


@dataclass(frozen=True)
class ConditionGuidance:
    """Keyword group mapping condition names to guidance lines.

    Attributes:
        name: Group name
        triggers: Lowercase substrings that activate the group
        recommendations: Lines appended when the group is triggered
    """

    name: str
    triggers: Tuple[str, ...]
    recommendations: Tuple[str, ...]

    def matches(self, condition: str) -> bool:
        """Check whether a lowercased condition contains any trigger."""
        return any(trigger in condition for trigger in self.triggers)


CONDITION_GUIDANCE: Tuple[ConditionGuidance, ...] = (
    ConditionGuidance(
        name="diabetes",
        triggers=("diabetes",),
        recommendations=(
            "Focus on low glycemic index foods",
            "Monitor carbohydrate intake",
            "Eat frequent, smaller meals",
        ),
    ),
    ConditionGuidance(
        name="hypertension",
        triggers=("hypertension", "high blood pressure"),
        recommendations=(
            "Reduce sodium intake",
            "Increase potassium-rich foods",
            "Follow DASH diet principles",
        ),
    ),
    ConditionGuidance(
        name="cholesterol",
        triggers=("cholesterol",),
        recommendations=(
            "Increase fiber intake",
            "Choose lean proteins",
            "Include omega-3 rich foods",
        ),
    ),
)


class ConditionRecommendationService(IConditionRecommender):
    """Append guidance for each keyword group any condition triggers.

    Matching is a case-insensitive substring test. Groups are emitted in
    fixed order (diabetes, hypertension, cholesterol), each at most once,
    however many conditions trigger it.
    """

    def recommend(self, conditions: Optional[Iterable[str]]) -> List[str]:
        """Build guidance lines for free-text medical conditions.

        Example:
            >>> ConditionRecommendationService().recommend(["Type 2 Diabetes"])
            ['Focus on low glycemic index foods', 'Monitor carbohydrate intake', 'Eat frequent, smaller meals']
        """
        lowered = [str(condition).lower() for condition in conditions or ()]

        recommendations: List[str] = []
        for group in CONDITION_GUIDANCE:
            if any(group.matches(condition) for condition in lowered):
                recommendations.extend(group.recommendations)
        return recommendations


_default_service = ConditionRecommendationService()


def recommend_for_conditions(conditions: Optional[Iterable[str]]) -> List[str]:
    """Module-level shortcut for ``ConditionRecommendationService().recommend``."""
    return _default_service.recommend(conditions)
