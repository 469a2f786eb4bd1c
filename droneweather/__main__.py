"""Main entry point for the Drone Weather Advisor CLI."""
import logging
import sys
from typing import NoReturn

from droneweather.core.config import settings
from droneweather.core.utils import configure_locale, setup_logging

logger = logging.getLogger(__name__)

def run_application_cli() -> NoReturn:
    """Main entry point for CLI application."""
    try:
        setup_logging(settings.LOG_LEVEL)
        configure_locale()

        from droneweather.cli.main import app_cli
        app_cli()

    except ImportError as e:
        logger.critical(
            "Failed to start application: %s - Check dependencies and PYTHONPATH",
            str(e)
        )
        sys.exit(2)
    except Exception as e:
        logger.exception("Critical error during application startup: %s", str(e))
        sys.exit(1)

if __name__ == "__main__":
    run_application_cli()
