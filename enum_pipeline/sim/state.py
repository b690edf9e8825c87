"""Grid world state shared across world operations."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..config.models import WorldConfig


@dataclass(frozen=True)
class Tick:
    """Per-call data for one world update."""

    index: int
    dt_s: float


@dataclass
class World:
    """In-memory world state mutated by world operations."""

    grid: np.ndarray
    time_s: float = 0.0
    ticks: int = 0
    events: list[str] = field(default_factory=list)

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self.grid.shape[0]), int(self.grid.shape[1]))


def build_initial_world(config: WorldConfig) -> World:
    """Construct an empty world sized by ``config``."""
    return World(grid=np.zeros((config.Ny, config.Nx), dtype=float))
