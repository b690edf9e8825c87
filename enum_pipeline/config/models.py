"""Typed models for demo world configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceConfig:
    """Amount deposited into one grid cell on every tick."""

    x: int
    y: int
    amount: float


@dataclass(frozen=True)
class WorldConfig:
    """Grid world configuration."""

    Nx: int
    Ny: int
    dt_s: float = 1.0
    diffusivity: float = 0.0
    half_life_s: float | None = None
    sources: list[SourceConfig] = field(default_factory=list)
