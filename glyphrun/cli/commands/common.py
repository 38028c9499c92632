"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from glyphrun.config import Config
from glyphrun.exceptions import GlyphRunError
from glyphrun.sources import FontSource, load_source

source_option = click.option(
    "--source",
    "-s",
    "source_path",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Font source (.yaml, .ufo, .ttf, .otf, .woff)",
)


def get_config(ctx: click.Context) -> Config:
    obj = ctx.obj or {}
    config = obj.get("config")
    return config if config is not None else Config()


def open_source(path: Path, console: Console, show_warnings: bool = True) -> FontSource:
    """Load a font source or exit with status 1."""
    try:
        source = load_source(path)
    except GlyphRunError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if show_warnings and source.warnings:
        console.print(f"[yellow]{len(source.warnings)} warning(s) while loading {path.name}[/yellow]")
    return source
