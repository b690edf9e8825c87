"""Tick-by-tick world runner."""

from __future__ import annotations

import logging

from ..config.models import WorldConfig
from ..pipeline import into_pipeline
from .ops import Advance, Decay, Deposit, Diffuse, WorldOp
from .state import Tick, World, build_initial_world

logger = logging.getLogger(__name__)


def build_tick_ops(config: WorldConfig) -> list[WorldOp]:
    """Operations applied on every tick, in order."""
    ops: list[WorldOp] = [Deposit(x=s.x, y=s.y, amount=s.amount) for s in config.sources]
    if config.diffusivity > 0.0:
        ops.append(Diffuse(rate=config.diffusivity))
    if config.half_life_s is not None:
        ops.append(Decay(half_life_s=config.half_life_s))
    ops.append(Advance())
    return ops


def run_world(config: WorldConfig, ticks: int, world: World | None = None) -> World:
    """Advance ``world`` (or a fresh one) by ``ticks`` ticks."""
    if ticks < 0:
        raise ValueError(f"ticks must be >= 0, got {ticks}.")
    state = build_initial_world(config) if world is None else world

    for _ in range(ticks):
        tick = Tick(index=state.ticks, dt_s=config.dt_s)
        into_pipeline(build_tick_ops(config)).execute(state, tick)
        logger.debug("Tick %d done, t=%g s", tick.index, state.time_s)

    return state
