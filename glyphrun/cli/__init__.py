"""Command-line interface for glyphrun."""
