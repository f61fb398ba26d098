"""Entry point that prints the demo results."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from numeric_adder import __version__
from numeric_adder.demo import render_results, run_demo
from numeric_adder.errors import InvalidNumericInput
from numeric_adder.logging_setup import setup_logging
from numeric_adder.schemas.config import DEFAULT_CONFIG_PATH, AdderConfig

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to config file (may be absent)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each conversion")
def main(config: str, verbose: bool) -> None:
    """Print the sums of the demo calls back-to-back."""
    try:
        cfg = AdderConfig.load(Path(config))
    except (ValidationError, yaml.YAMLError) as e:
        err_console.print(f"[red]✗[/red] Invalid config {escape(config)}: {escape(str(e))}")
        sys.exit(1)

    setup_logging(logging.DEBUG if verbose else cfg.logging.level, force=True)
    logger.debug("Coercion mode: %s", cfg.coercion.mode.value)

    try:
        results = run_demo(cfg.coercion.mode)
    except InvalidNumericInput as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    click.echo(render_results(results, cfg.output.separator), nl=False)


if __name__ == "__main__":
    main()
