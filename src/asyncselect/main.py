import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from asyncselect.application.session import AsyncSelectSession
from asyncselect.config import SelectConfig, load_select_config
from asyncselect.infrastructure.providers import StaticOptionsProvider
from asyncselect.logger import get_logger, setup_logger
from asyncselect.presentation.tui import SelectDemoApp

load_dotenv()

cli = typer.Typer(
    name="asyncselect",
    help="Asynchronous option loading for search-driven select controls",
    epilog="""
    Examples:
    $ asyncselect demo countries.json --latency 0.4
    $ asyncselect demo countries.json --config select.json --page-size 10
    """,
    add_completion=False,
)


def read_options(options_file: Path) -> list:
    """Read a JSON list of options (strings or objects with a "label")."""
    with open(options_file, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise typer.BadParameter(f"{options_file} must contain a JSON list", param_hint="OPTIONS_FILE")
    return data


@cli.command()
def demo(
    options_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON list of options"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help="JSON select configuration"),
    page_size: int = typer.Option(20, "--page-size", min=1, help="Options per page when pagination is enabled"),
    latency: float = typer.Option(
        float(os.getenv("ASYNCSELECT_LATENCY", "0.3")), "--latency", min=0.0, help="Simulated provider latency in seconds"
    ),
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
):
    """Run an interactive select backed by an in-memory provider."""
    setup_logger(log_level="DEBUG" if debug else "INFO")
    logger = get_logger("main")

    select_config = load_select_config(config) if config else SelectConfig()
    options = read_options(options_file)
    logger.info(f"Loaded {len(options)} option(s) from {options_file}")
    logger.info(
        f"Select config: pagination={select_config.pagination}, multi={select_config.multi}, "
        f"page_size={page_size}, latency={latency}"
    )

    provider = StaticOptionsProvider(options, page_size=page_size, latency=latency)
    session = AsyncSelectSession(provider, select_config)
    SelectDemoApp(session).run()


@cli.callback()
def main() -> None:
    """asyncselect command line."""


if __name__ == "__main__":
    cli()
