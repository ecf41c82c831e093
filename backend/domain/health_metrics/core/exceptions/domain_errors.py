"""Domain exceptions for health metrics."""

from typing import List, Sequence


class HealthMetricsDomainError(Exception):
    """Base exception for health metrics domain errors."""

    pass


class InvalidHealthFormError(HealthMetricsDomainError):
    """Raised when a submitted health form fails validation.

    Carries every validation message, not only the first one.
    """

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__(f"Validation failed: {', '.join(self.errors)}")
