"""Main CLI application for the Drone Weather Advisor using Typer."""
import asyncio
import json
import logging
from typing import Optional
from typing_extensions import Annotated

import typer
import uvicorn
from rich import print as rprint
from rich.panel import Panel

from droneweather import __version__ as app_version
from droneweather.core.config import settings
from droneweather.core.models_shared import KNOWN_WEATHER_MAIN, WeatherSnapshot
from droneweather.core.utils import parse_location_string
from droneweather.data.data_loader import WeatherDataOrchestrator
from droneweather.data.openweathermap_client import WeatherSourceError
from droneweather.drone.evaluator import evaluate
from droneweather.drone.models import DroneLimits
from droneweather.drone.narrative import format_narrative
from droneweather.services.flight_service import FlightAdvisorService
from droneweather.cli.utils_cli import (
    console,
    display_analysis_rich,
    display_drone_specs_rich,
    display_flight_report_rich,
    display_narrative_rich,
    display_outlook_rich,
)

logger = logging.getLogger(__name__)

app_cli = typer.Typer(
    name="droneweather",
    help="Weather-based flight conditions for consumer drones",
    rich_markup_mode="rich"
)

_flight_service: Optional[FlightAdvisorService] = None

def get_services() -> FlightAdvisorService:
    """Initialize and return the flight advisor service (singleton pattern)."""
    global _flight_service

    if _flight_service is None:
        _flight_service = FlightAdvisorService(
            WeatherDataOrchestrator(),
            DroneLimits.from_settings(settings),
        )

    return _flight_service

async def close_services() -> None:
    """Close the upstream HTTP client and forget the service so the next command starts fresh."""
    global _flight_service

    if _flight_service is not None:
        await _flight_service.data_orchestrator.close()
        _flight_service = None

def _run_and_close(fetch):
    """Run a service coroutine, closing the services once it finishes or fails."""
    async def _run():
        try:
            return await fetch
        finally:
            await close_services()
    return asyncio.run(_run())

LocationArgument = Annotated[
    Optional[str],
    typer.Argument(help="City name or lat,lon coordinates (e.g. \"Fuengirola\" or \"36.54,-4.62\"). Defaults to the configured location."),
]

# --- CLI Commands ---

@app_cli.command(name="status", help="Show current weather and flight status for a location.")
def status_command(
    location: LocationArgument = None,
    raw: Annotated[bool, typer.Option("--json", help="Display raw JSON output.")] = False,
):
    """Fetches weather for a location and evaluates the current reading."""
    service = get_services()
    lat, lon, name = parse_location_string(location)

    try:
        report = _run_and_close(service.get_flight_report(lat, lon, location_name=name))
    except WeatherSourceError as e:
        logger.exception("Status command failed")
        console.print(f"[red]Error getting weather data: {str(e)}[/red]")
        raise typer.Exit(1)

    narrative = service.analyze(report.weather, location_name=name)
    if raw:
        output = {"report": report.model_dump(mode="json"), "analysis": narrative.model_dump(mode="json")}
        typer.echo(json.dumps(output, indent=2))
        return

    display_flight_report_rich(report, narrative)

@app_cli.command(name="forecast", help="Show flight verdicts for the hourly and daily forecast.")
def forecast_command(
    location: LocationArgument = None,
    raw: Annotated[bool, typer.Option("--json", help="Display raw JSON output.")] = False,
):
    """Fetches the forecast for a location and evaluates every point."""
    service = get_services()
    lat, lon, name = parse_location_string(location)

    try:
        outlook = _run_and_close(service.get_flight_outlook(lat, lon, location_name=name))
    except WeatherSourceError as e:
        logger.exception("Forecast command failed")
        console.print(f"[red]Error getting forecast: {str(e)}[/red]")
        raise typer.Exit(1)

    if raw:
        typer.echo(outlook.model_dump_json(indent=2))
        return

    rprint(Panel(f"Flight outlook for [bold]{name}[/bold]", expand=False))
    if outlook.demo_mode:
        console.print("[yellow]Demo mode: forecast is simulated.[/yellow]")
    display_outlook_rich(outlook, service.limits)

@app_cli.command(name="evaluate", help="Evaluate a manually entered weather reading (offline).")
def evaluate_command(
    temp: Annotated[float, typer.Option("--temp", "-t", help="Temperature in °C.")],
    wind: Annotated[float, typer.Option("--wind", "-w", min=0, help="Wind speed in m/s.")],
    weather: Annotated[str, typer.Option("--weather", help="Condition group, e.g. Clear, Clouds, Rain.")] = "Clear",
    gust: Annotated[Optional[float], typer.Option("--gust", min=0, help="Gust speed in m/s.")] = None,
    humidity: Annotated[Optional[float], typer.Option("--humidity", min=0, max=100, help="Relative humidity %.")] = None,
    visibility: Annotated[float, typer.Option("--visibility", min=0, help="Visibility in meters.")] = 10000.0,
    raw: Annotated[bool, typer.Option("--json", help="Display raw JSON output.")] = False,
):
    """Runs the evaluator and narrative on a reading given on the command line."""
    if weather not in KNOWN_WEATHER_MAIN and not raw:
        console.print(f"[yellow]Unknown condition group '{weather}', evaluated as clear. "
                      f"Known groups: {', '.join(KNOWN_WEATHER_MAIN)}[/yellow]")

    limits = DroneLimits.from_settings(settings)
    snapshot = WeatherSnapshot(
        temperature_c=temp,
        wind_speed_ms=wind,
        wind_gust_ms=gust,
        humidity_pct=humidity,
        visibility_m=visibility,
        weather_main=weather,
    )
    analysis = evaluate(snapshot, limits)
    narrative = format_narrative(snapshot, analysis, limits)

    if raw:
        output = {"flight_analysis": analysis.model_dump(mode="json"), "analysis": narrative.model_dump(mode="json")}
        typer.echo(json.dumps(output, indent=2))
        return

    display_analysis_rich(analysis)
    display_narrative_rich(narrative)

@app_cli.command(name="specs", help="Show the configured drone profile.")
def specs_command():
    display_drone_specs_rich(DroneLimits.from_settings(settings))

@app_cli.command(name="api", help="Run the Drone Weather Advisor REST API server.")
def run_api_server_command(
    host: Annotated[str, typer.Option(help="Host to bind the API server to.")] = settings.API_HOST,
    port: Annotated[int, typer.Option(help="Port to run the API server on.")] = settings.API_PORT,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload for development.")] = (settings.ENVIRONMENT == "development")
):
    """Starts the FastAPI application server using Uvicorn."""
    rprint(Panel(f"Starting Drone Weather Advisor API on [bold green]{host}:{port}[/bold green]...", expand=False))
    rprint(f"Auto-reload: {'Enabled' if reload else 'Disabled'}")
    rprint(f"Access OpenAPI docs at http://{host}:{port}/api/docs")

    uvicorn.run(
        "droneweather.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower()
    )

# --- Version Callback ---
def version_callback(value: bool):
    if value:
        rprint(f"Drone Weather Advisor CLI Version: {app_version}")
        raise typer.Exit()

@app_cli.callback()
def main_callback(
    version: Annotated[Optional[bool], typer.Option("--version", callback=version_callback, is_eager=True, help="Show application version and exit.")] = None,
):
    """Drone Weather Advisor CLI main application entry point."""
    pass
