"""CLI module for the Drone Weather Advisor."""
import logging
from droneweather.cli.main import app_cli
from droneweather.cli.utils_cli import (
    display_flight_report_rich,
    display_outlook_rich,
    display_analysis_rich,
)

logger = logging.getLogger(__name__)

__all__ = [
    "app_cli",
    "display_flight_report_rich",
    "display_outlook_rich",
    "display_analysis_rich",
]
