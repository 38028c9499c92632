"""Non-fatal load-time diagnostics."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class LoadWarning:
    """A problem found while loading tables, reported instead of raised."""

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


def record_warning(
    warnings: list[LoadWarning],
    source: str,
    message: str,
    logger: logging.Logger,
) -> None:
    """Append a warning to ``warnings`` and log it once."""
    warning = LoadWarning(source, message)
    warnings.append(warning)
    logger.warning("%s", warning)
