"""Typed config models and parsers."""

from .models import SourceConfig, WorldConfig
from .parser import load_world_config, parse_world_config
from .validators import as_mapping, ensure_nonnegative, required, to_float, to_int

__all__ = [
    "SourceConfig",
    "WorldConfig",
    "as_mapping",
    "ensure_nonnegative",
    "load_world_config",
    "parse_world_config",
    "required",
    "to_float",
    "to_int",
]
