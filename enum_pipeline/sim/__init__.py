"""Demo grid world driven by operation pipelines."""

from .metrics import peak, total_amount
from .ops import Advance, Clear, Decay, Deposit, Diffuse, WorldOp, diffuse
from .runner import build_tick_ops, run_world
from .state import Tick, World, build_initial_world

__all__ = [
    "Advance",
    "Clear",
    "Decay",
    "Deposit",
    "Diffuse",
    "Tick",
    "World",
    "WorldOp",
    "build_initial_world",
    "build_tick_ops",
    "diffuse",
    "peak",
    "run_world",
    "total_amount",
]
