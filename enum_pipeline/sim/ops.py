"""World operation catalogue."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..catalogue import Catalogue
from ..execute import ExecuteWithPair, unhandled
from .state import Tick, World

# Explicit 5-point stencil is stable for rate * dt <= 1/4.
MAX_DIFFUSION_NUMBER = 0.25


class WorldOp(Catalogue, ExecuteWithPair, root=True):
    """Operations applied to a :class:`World` once per tick."""

    def execute(self, world: World, tick: Tick) -> None:
        if isinstance(self, Deposit):
            world.grid[self.y, self.x] += self.amount
        elif isinstance(self, Diffuse):
            world.grid = diffuse(world.grid, self.rate * tick.dt_s)
        elif isinstance(self, Decay):
            world.grid = world.grid * 0.5 ** (tick.dt_s / self.half_life_s)
        elif isinstance(self, Clear):
            world.grid = np.zeros_like(world.grid)
        elif isinstance(self, Advance):
            world.time_s += tick.dt_s
            world.ticks += 1
        else:
            unhandled(self)
        world.events.append(f"{self.variant_name}@{tick.index}")


@dataclass(frozen=True)
class Deposit(WorldOp):
    x: int
    y: int
    amount: float


@dataclass(frozen=True)
class Diffuse(WorldOp):
    rate: float


@dataclass(frozen=True)
class Decay(WorldOp):
    half_life_s: float


@dataclass(frozen=True)
class Clear(WorldOp):
    pass


@dataclass(frozen=True)
class Advance(WorldOp):
    pass


def diffuse(values: np.ndarray, number: float) -> np.ndarray:
    """One explicit diffusion update with zero-flux edges."""
    if number < 0.0:
        raise ValueError(f"diffusion number must be >= 0, got {number}.")
    if number > MAX_DIFFUSION_NUMBER:
        raise ValueError(
            f"diffusion number {number:g} exceeds stability limit {MAX_DIFFUSION_NUMBER}."
        )
    padded = np.pad(values, 1, mode="edge")
    lap = (
        padded[:-2, 1:-1]
        + padded[2:, 1:-1]
        + padded[1:-1, :-2]
        + padded[1:-1, 2:]
        - 4.0 * values
    )
    return values + number * lap
