"""Kern command - look up the kerning between two glyphs."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from glyphrun.cli.commands.common import open_source, source_option

console = Console()


@click.command()
@click.argument("left")
@click.argument("right")
@source_option
@click.option("--groups", "show_groups", is_flag=True, help="Also list the groups of both glyphs")
def kern(left: str, right: str, source_path: Path, show_groups: bool) -> None:
    """Show the kerning value for the pair LEFT RIGHT (logical order)."""
    source = open_source(source_path, console)
    table = source.kerning

    for name in (left, right):
        if not source.catalog.has_glyph(name):
            console.print(f"[yellow]Warning:[/yellow] {name} is not in {source_path.name}")

    match = table.resolve_glyphs(left, right)
    if match is None:
        console.print(f"[bold]{left} {right}:[/bold] 0 [dim](no matching pair)[/dim]")
    else:
        console.print(
            f"[bold]{left} {right}:[/bold] {match.value:g} "
            f"[dim]({match.rule.value}: {match.first} {match.second})[/dim]"
        )

    if show_groups:
        first = ", ".join(table.groups.first_groups(left)) or "-"
        second = ", ".join(table.groups.second_groups(right)) or "-"
        console.print(f"  [cyan]{left}[/cyan] first-side groups: {first}")
        console.print(f"  [cyan]{right}[/cyan] second-side groups: {second}")
