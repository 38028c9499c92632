"""Command-line entry point for glyphrun."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from glyphrun import __version__
from glyphrun.cli.commands import kern, layout, shape
from glyphrun.config import VALID_LOG_LEVELS, Config
from glyphrun.exceptions import ConfigError
from glyphrun.log import setup_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="glyphrun")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides the config file)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Shape, kern and lay out runs of glyphs."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = config.log_level


cli.add_command(shape)
cli.add_command(layout)
cli.add_command(kern)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
