"""World config parsing and loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..errors import ConfigError
from .models import SourceConfig, WorldConfig
from .validators import as_mapping, ensure_nonnegative, required, to_float, to_int


def _parse_sources(raw: Any, Nx: int, Ny: int) -> list[SourceConfig]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError("world.sources must be a list.")

    sources: list[SourceConfig] = []
    for idx, item in enumerate(raw):
        context = f"world.sources[{idx}]"
        src = as_mapping(item, context)
        x = to_int(required(src, "x", context), "x", context)
        y = to_int(required(src, "y", context), "y", context)
        amount = to_float(required(src, "amount", context), "amount", context)
        if not (0 <= x < Nx and 0 <= y < Ny):
            raise ValueError(f"{context} ({x}, {y}) lies outside the {Nx}x{Ny} grid.")
        ensure_nonnegative(f"{context}.amount", amount)
        sources.append(SourceConfig(x=x, y=y, amount=amount))
    return sources


def parse_world_config(payload: Mapping[str, Any]) -> WorldConfig:
    """Extract strongly typed world config from a mapping payload."""
    try:
        world = as_mapping(required(payload, "world", "config"), "config.world")

        Nx = to_int(required(world, "Nx", "world"), "Nx", "world")
        Ny = to_int(required(world, "Ny", "world"), "Ny", "world")
        ensure_nonnegative("world.Nx", Nx, allow_zero=False)
        ensure_nonnegative("world.Ny", Ny, allow_zero=False)

        dt_s = ensure_nonnegative("world.dt_s", to_float(world.get("dt_s", 1.0), "dt_s", "world"), allow_zero=False)
        diffusivity = ensure_nonnegative(
            "world.diffusivity", to_float(world.get("diffusivity", 0.0), "diffusivity", "world")
        )

        half_life_s: float | None = None
        if world.get("half_life_s") is not None:
            half_life_s = ensure_nonnegative(
                "world.half_life_s",
                to_float(world["half_life_s"], "half_life_s", "world"),
                allow_zero=False,
            )

        sources = _parse_sources(world.get("sources"), Nx, Ny)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    return WorldConfig(
        Nx=Nx,
        Ny=Ny,
        dt_s=dt_s,
        diffusivity=diffusivity,
        half_life_s=half_life_s,
        sources=sources,
    )


def load_world_config(path: str | Path) -> WorldConfig:
    """Load and parse a YAML world config file."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML config: {config_path}") from exc

    if payload is None:
        raise ConfigError(f"Config is empty: {config_path}")
    if not isinstance(payload, dict):
        raise ConfigError("config must be a mapping.")
    return parse_world_config(payload)
