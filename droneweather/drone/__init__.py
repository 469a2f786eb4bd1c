"""
Drone flight-condition module.

This module provides:
- Flight-condition evaluation against a drone profile
- Template-driven narrative for the verdict
- Presentation mappings (colours, icons, labels)
"""

from .evaluator import evaluate, aggregate_severity
from .narrative import format_narrative
from .models import (
    Severity,
    FactorType,
    DroneLimits,
    ConditionFactor,
    FlightAnalysis,
    NarrativeReport,
    FlightReport,
    ForecastVerdict,
    FlightOutlook,
)

__all__ = [
    "evaluate",
    "aggregate_severity",
    "format_narrative",
    "Severity",
    "FactorType",
    "DroneLimits",
    "ConditionFactor",
    "FlightAnalysis",
    "NarrativeReport",
    "FlightReport",
    "ForecastVerdict",
    "FlightOutlook",
]
