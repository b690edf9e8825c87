"""Pipeline primitives for ordered operation execution."""

from .container import Pipeline, resolve_shape
from .convert import into_pipeline
from .engine import run
from .report import RunReport

__all__ = [
    "Pipeline",
    "RunReport",
    "into_pipeline",
    "resolve_shape",
    "run",
]
