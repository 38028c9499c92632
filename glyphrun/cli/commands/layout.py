"""Layout command - place a shaped, kerned run and report the caret."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from glyphrun.cli.commands.common import get_config, open_source, source_option
from glyphrun.layout import Layout
from glyphrun.session import TextSession

console = Console()


@click.command()
@click.argument("text")
@source_option
@click.option("--ltr", "direction", flag_value="ltr", help="Left-to-right layout")
@click.option("--rtl", "direction", flag_value="rtl", help="Right-to-left layout")
@click.option("--auto", "direction", flag_value="auto", help="Direction from the first strong character")
@click.option("--cursor", type=int, help="Logical cursor index (default: end of text)")
@click.option("--json", "as_json", is_flag=True, help="Print placements as JSON")
@click.pass_context
def layout(
    ctx: click.Context,
    text: str,
    source_path: Path,
    direction: str | None,
    cursor: int | None,
    as_json: bool,
) -> None:
    """Lay out TEXT and print glyph positions.

    TEXT: Characters in logical order; "\\n" starts a new line.
    """
    config = get_config(ctx)
    source = open_source(source_path, console, show_warnings=not as_json)

    # No direction flag leaves the choice to the config
    session = TextSession(source.catalog, source.kerning, direction=direction or None, config=config)
    session.insert_text(text.replace("\\n", "\n"))
    if cursor is not None:
        session.set_cursor(cursor)
    result = session.layout()

    if as_json:
        click.echo(json.dumps(_to_json(result, session.buffer.cursor), indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Layout ({session.direction.short_name})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Glyph", style="yellow")
    table.add_column("x", justify="right", style="cyan")
    table.add_column("y", justify="right", style="cyan")
    table.add_column("Width", justify="right")
    table.add_column("Line", justify="right", style="dim")

    for placement in result:
        name = placement.sort.glyph_name or "[dim]<line break>[/dim]"
        table.add_row(
            str(placement.index),
            name,
            f"{placement.origin.x:g}",
            f"{placement.origin.y:g}",
            f"{placement.rect.width:g}",
            str(placement.line),
        )

    console.print(table)
    console.print(f"[bold]Caret:[/bold] ({result.caret.x:g}, {result.caret.y:g}) at index {session.buffer.cursor}")
    console.print(f"[bold]Width:[/bold] {result.width:g}")


def _to_json(result: Layout, cursor: int) -> dict:
    return {
        "direction": result.direction.value,
        "cursor": cursor,
        "caret": [result.caret.x, result.caret.y],
        "pen": [result.pen.x, result.pen.y],
        "width": result.width,
        "placements": [
            {
                "index": placement.index,
                "glyph": placement.sort.glyph_name,
                "line_break": placement.sort.is_line_break,
                "x": placement.origin.x,
                "y": placement.origin.y,
                "width": placement.rect.width,
                "line": placement.line,
            }
            for placement in result
        ],
    }
