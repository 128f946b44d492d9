"""Terminal host for the weather screen: each Enter press is one trigger."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console

from .config import Settings, load_settings
from .exceptions import ConfigError
from .location.provider import LocationProvider
from .location.services import build_location_service
from .log_setup import setup_logger
from .pipeline import WeatherFetchPipeline
from .ui.terminal_screen import TerminalWeatherScreen
from .weather.client import OpenWeatherClient

QUIT_WORDS = {"q", "quit", "exit"}


def parse_args() -> argparse.Namespace:
    """Parse weather screen CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show current weather for this machine's location (OpenWeather)."
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch once and exit instead of waiting for Enter presses.",
    )
    return parser.parse_args()


async def _read_trigger() -> str:
    return await asyncio.to_thread(sys.stdin.readline)


async def run_screen(
    args: argparse.Namespace,
    settings: Settings,
    logger: logging.Logger,
    console: Console,
) -> int:
    """Wire the stages to a terminal screen and serve triggers."""
    screen = TerminalWeatherScreen(console=console)
    location_service = build_location_service(settings, logger)
    provider = LocationProvider(
        location_service,
        logger,
        accuracy=settings.location_accuracy,
        timeout_seconds=settings.location_timeout_seconds,
    )
    try:
        async with OpenWeatherClient(settings=settings, logger=logger) as client:
            pipeline = WeatherFetchPipeline(
                location_provider=provider,
                weather_client=client,
                screen=screen,
                logger=logger,
            )
            if args.once:
                state = await pipeline.run()
                return 4 if state is None or state.error_visible else 0

            while True:
                console.print(
                    f"[bold]\\[Enter][/bold] {pipeline.state.trigger_text}  "
                    "[dim](q to quit)[/dim]"
                )
                line = await _read_trigger()
                if not line or line.strip().lower() in QUIT_WORDS:
                    return 0
                await pipeline.run()
    finally:
        await location_service.aclose()


def main() -> int:
    """Run the weather screen."""
    args = parse_args()
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    logger.setLevel(settings.log_level)
    logger.info("Weather screen startup: %s", settings.safe_summary())
    try:
        return asyncio.run(run_screen(args, settings, logger, console))
    except KeyboardInterrupt:
        logger.info("Interrupted; shutting down.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
