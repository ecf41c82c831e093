"""CategoryService - BMI to weight status classification."""

from typing import Tuple

from ..core.ports.calculators import IBMIClassifier
from ..core.value_objects.bmi_category import (
    BMI_CATEGORIES,
    DEFAULT_BMI_CATEGORY,
    BMICategory,
    BMICategoryDefinition,
)


class CategoryService(IBMIClassifier):
    """Classify BMI against the ordered category table.

    The first row with ``lower <= bmi < upper`` wins. A BMI that matches no
    row (the 24.9-25 and 29.9-30 gaps, negative values, NaN) gets the
    Normal row.
    """

    def classify(self, bmi: float) -> BMICategoryDefinition:
        """Map a BMI value to its category row.

        Example:
            >>> CategoryService().classify(24.2).category
            <BMICategory.NORMAL: 'Normal'>
            >>> CategoryService().classify(29.9).category
            <BMICategory.NORMAL: 'Normal'>
        """
        for definition in BMI_CATEGORIES:
            if definition.contains(bmi):
                return definition
        return DEFAULT_BMI_CATEGORY

    def definition_for(self, category: BMICategory) -> BMICategoryDefinition:
        """Look up the table row of a category."""
        for definition in BMI_CATEGORIES:
            if definition.category == category:
                return definition
        return DEFAULT_BMI_CATEGORY

    def categories(self) -> Tuple[BMICategoryDefinition, ...]:
        """Return the full table in classification order."""
        return BMI_CATEGORIES


_default_service = CategoryService()


def classify(bmi: float) -> BMICategoryDefinition:
    """Module-level shortcut for ``CategoryService().classify``."""
    return _default_service.classify(bmi)


def list_categories() -> Tuple[BMICategoryDefinition, ...]:
    """Return the BMI category table in classification order."""
    return _default_service.categories()
