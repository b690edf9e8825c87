"""World metrics."""

from __future__ import annotations

import numpy as np

from .state import World


def total_amount(world: World) -> float:
    return float(np.sum(world.grid))


def peak(world: World) -> tuple[float, tuple[int, int]]:
    """Return peak value and its (y, x) cell."""
    idx = np.unravel_index(int(np.argmax(world.grid)), world.grid.shape)
    y, x = int(idx[0]), int(idx[1])
    return float(world.grid[y, x]), (y, x)
