"""Ports for health metrics domain."""

from .calculators import (
    IBMICalculator,
    IBMIClassifier,
    IBMRCalculator,
    IConditionRecommender,
    IDietTargetCalculator,
    IMealPlanGenerator,
    ITDEECalculator,
)

__all__ = [
    "IBMICalculator",
    "IBMRCalculator",
    "ITDEECalculator",
    "IBMIClassifier",
    "IDietTargetCalculator",
    "IConditionRecommender",
    "IMealPlanGenerator",
]
