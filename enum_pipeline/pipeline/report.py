"""Result of one pipeline run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RunReport:
    """Outcome of a completed execution run."""

    completed: int = 0
    results: tuple[Any, ...] = ()


__all__ = ["RunReport"]
