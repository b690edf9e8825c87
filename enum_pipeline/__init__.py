"""Ordered execution of closed operation catalogues."""

from .catalogue import Catalogue
from .errors import (
    ConfigError,
    PipelineConsumedError,
    PipelineError,
    ShapeError,
    StepExecutionError,
    UnhandledVariantError,
)
from .execute import Execute, ExecuteWith, ExecuteWithPair, Shape, shape_of, unhandled
from .pipeline import Pipeline, RunReport, into_pipeline

__version__ = "0.1.0"

__all__ = [
    "Catalogue",
    "ConfigError",
    "Execute",
    "ExecuteWith",
    "ExecuteWithPair",
    "Pipeline",
    "PipelineConsumedError",
    "PipelineError",
    "RunReport",
    "Shape",
    "ShapeError",
    "StepExecutionError",
    "UnhandledVariantError",
    "into_pipeline",
    "shape_of",
    "unhandled",
]
