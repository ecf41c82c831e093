"""Domain exceptions for health metrics."""

from .domain_errors import HealthMetricsDomainError, InvalidHealthFormError

__all__ = [
    "HealthMetricsDomainError",
    "InvalidHealthFormError",
]
