"""Shape command - show positional forms and resolved glyphs for a string."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from glyphrun.cli.commands.common import get_config, open_source, source_option
from glyphrun.shaping import ArabicShaper, joining_type

console = Console()


@click.command()
@click.argument("text")
@source_option
@click.pass_context
def shape(ctx: click.Context, text: str, source_path: Path) -> None:
    """Shape TEXT against a font source.

    TEXT: Characters in logical order.
    """
    config = get_config(ctx)
    source = open_source(source_path, console)
    shaper = ArabicShaper(config.default_advance_width)

    table = Table(title=f"Shaping {text!r}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Char", style="cyan")
    table.add_column("Code", style="dim")
    table.add_column("Joining", style="magenta")
    table.add_column("Form", style="green")
    table.add_column("Glyph", style="yellow")
    table.add_column("Advance", justify="right")

    unresolved = 0
    for index, char in enumerate(text):
        glyph = shaper.shape_char_at(text, index, source.catalog)
        code = f"U+{ord(char):04X}"
        jt = joining_type(char).value
        if glyph is None:
            unresolved += 1
            table.add_row(str(index), char, code, jt, "-", "[red](unmapped)[/red]", "-")
            continue
        table.add_row(
            str(index),
            char,
            code,
            jt,
            glyph.form.value,
            glyph.glyph_name,
            f"{glyph.advance_width:g}",
        )

    console.print(table)
    if unresolved:
        console.print(f"[yellow]{unresolved} character(s) have no glyph[/yellow]")
