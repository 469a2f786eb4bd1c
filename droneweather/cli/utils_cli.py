"""Utility functions for the Drone Weather Advisor CLI."""
import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from droneweather.core.models_shared import WeatherSnapshot
from droneweather.core.utils import _format_temperature_rich, format_number
from droneweather.drone.display import (
    factor_icon,
    status_color_name,
    status_text,
    weather_icon,
    wind_status_color,
)
from droneweather.drone.models import (
    DroneLimits,
    FlightAnalysis,
    FlightOutlook,
    FlightReport,
    NarrativeReport,
)

logger = logging.getLogger(__name__)
console = Console()

FACTOR_LABELS = {
    "wind": "Wind",
    "temperature": "Temperature",
    "precipitation_visibility": "Precip / Visibility",
}

def _severity_text(analysis: FlightAnalysis) -> Text:
    color = status_color_name(analysis.overall_severity)
    return Text(status_text(analysis.overall_severity), style=f"bold {color}")

def display_analysis_rich(analysis: FlightAnalysis, title: str = "Flight Status") -> None:
    """Show the per-factor classifications and the overall verdict."""
    table = Table(title=title, expand=False)
    table.add_column("Factor", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for condition in analysis.conditions:
        color = status_color_name(condition.severity)
        table.add_row(
            f"{FACTOR_LABELS.get(condition.factor_type.value, condition.factor_type.value)} "
            f"({factor_icon(condition.factor_type, condition.severity)})",
            Text(condition.severity.value.title(), style=color),
            condition.message,
        )
    console.print(table)
    console.print(Panel(_severity_text(analysis), title="Overall", expand=False,
                        border_style=status_color_name(analysis.overall_severity)))

def display_current_weather_rich(snapshot: WeatherSnapshot) -> None:
    """Show the current reading."""
    current_table = Table(title="Current Conditions", show_header=False, box=None)
    current_table.add_column(style="cyan")
    current_table.add_column()

    current_table.add_row("Temperature:", _format_temperature_rich(snapshot.temperature_c).append(" °C"))
    current_table.add_row("Wind Speed:", Text(f"{format_number(snapshot.wind_speed_ms)} m/s"))
    current_table.add_row("Wind Gust:", Text(f"{format_number(snapshot.wind_gust_ms)} m/s"))
    current_table.add_row("Visibility:", Text(f"{snapshot.visibility_m / 1000:.1f} km"))
    if snapshot.humidity_pct is not None:
        current_table.add_row("Humidity:", Text(f"{format_number(snapshot.humidity_pct)}%"))
    if snapshot.pressure_hpa is not None:
        current_table.add_row("Pressure:", Text(f"{format_number(snapshot.pressure_hpa)} hPa"))
    current_table.add_row("Conditions:", Text(f"{snapshot.weather_main} ({weather_icon(snapshot.weather_main)})"))
    console.print(current_table)

def display_narrative_rich(narrative: NarrativeReport, is_demo: bool = False) -> None:
    """Show the summary and recommendation."""
    title = "Weather Analysis [DEMO]" if is_demo else "Weather Analysis"
    console.print(Panel(
        f"{narrative.summary}\n\n[dim]{narrative.confidence} - {narrative.timestamp}[/dim]",
        title=title,
        border_style="magenta",
    ))
    console.print(Panel(narrative.recommendation, title="Flight Recommendation", border_style="blue"))

def display_flight_report_rich(report: FlightReport, narrative: Optional[NarrativeReport] = None) -> None:
    """Show a complete flight report for one location."""
    location = report.weather.location
    header = Text(f"{location.name if location else 'Unknown location'}\n", style="bold white on blue")
    if location:
        header.append(f"Lat: {location.coordinates.latitude:.4f}, Lon: {location.coordinates.longitude:.4f}\n")
    header.append(f"Source: OpenWeatherMap {report.weather.api_version}")
    if report.demo_mode:
        header.append(" | DEMO MODE", style="bold yellow")
    console.print(Panel(header, title="Location", expand=False))

    display_current_weather_rich(report.weather.current)
    display_analysis_rich(report.flight_analysis)
    if narrative:
        display_narrative_rich(narrative, is_demo=report.demo_mode)

def display_outlook_rich(outlook: FlightOutlook, limits: DroneLimits) -> None:
    """Show verdicts for hourly and daily forecast points."""
    hourly_table = Table(title="Hourly Flight Outlook", expand=True)
    hourly_table.add_column("Time", style="magenta")
    hourly_table.add_column("Temp (°C)", justify="right")
    hourly_table.add_column("Wind (m/s)", justify="right")
    hourly_table.add_column("Conditions", style="green")
    hourly_table.add_column("Status")

    for verdict in outlook.hourly:
        analysis = verdict.analysis
        hourly_table.add_row(
            verdict.observed_at.strftime("%H:00") if verdict.observed_at else "-",
            _format_temperature_rich(analysis.temperature_c),
            Text(f"{analysis.wind_speed_ms:.1f}", style=wind_status_color(analysis.wind_speed_ms, limits)),
            analysis.weather_main,
            _severity_text(analysis),
        )
    console.print(hourly_table)

    daily_table = Table(title="Daily Flight Outlook", expand=True)
    daily_table.add_column("Day", style="magenta")
    daily_table.add_column("Max Temp (°C)", justify="right")
    daily_table.add_column("Wind (m/s)", justify="right")
    daily_table.add_column("Conditions", style="green")
    daily_table.add_column("Status")

    for verdict in outlook.daily:
        analysis = verdict.analysis
        daily_table.add_row(
            verdict.observed_at.strftime("%a") if verdict.observed_at else "-",
            _format_temperature_rich(analysis.temperature_c),
            f"{analysis.wind_speed_ms:.1f}",
            analysis.weather_main,
            _severity_text(analysis),
        )
    console.print(daily_table)

    if outlook.next_flyable_hour:
        console.print(f"[green]Next flyable hour: {outlook.next_flyable_hour.strftime('%Y-%m-%d %H:%M UTC')}[/green]")
    else:
        console.print("[red]No flyable hour in the forecast window.[/red]")

def display_drone_specs_rich(limits: DroneLimits) -> None:
    """Show the drone profile."""
    table = Table(title=f"{limits.model_name} Specifications", show_header=False)
    table.add_column(style="cyan")
    table.add_column()
    table.add_row("Max Wind Speed", f"{format_number(limits.max_wind_speed_ms)} m/s "
                                    f"({format_number(round(limits.max_wind_speed_ms * 3.6, 1))} km/h)")
    table.add_row("Operating Temp", f"{format_number(limits.min_operating_temp_c)}°C to "
                                    f"{format_number(limits.max_operating_temp_c)}°C")
    table.add_row("Max Altitude", f"{format_number(limits.max_altitude_m)}m")
    table.add_row("Water Resistance", limits.ip_rating.title())
    console.print(table)
