"""GetBMICategoriesQuery - BMI category catalogue."""

from dataclasses import dataclass
from typing import Tuple

from domain.health_metrics.calculation.category_service import CategoryService
from domain.health_metrics.core.value_objects.bmi_category import (
    BMICategoryDefinition,
)


@dataclass(frozen=True)
class GetBMICategoriesQuery:
    """Query for the BMI category table."""

    pass


class GetBMICategoriesQueryHandler:
    """Handler for GetBMICategoriesQuery."""

    def __init__(self, category_service: CategoryService):
        self._category_service = category_service

    def handle(self, query: GetBMICategoriesQuery) -> Tuple[BMICategoryDefinition, ...]:
        """Return every category row in classification order."""
        return self._category_service.categories()
