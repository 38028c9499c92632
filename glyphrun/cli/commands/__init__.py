"""CLI commands for glyphrun."""

from glyphrun.cli.commands.kern import kern
from glyphrun.cli.commands.layout import layout
from glyphrun.cli.commands.shape import shape

__all__ = ["kern", "layout", "shape"]
