"""Conversion of ordered sequences into pipelines."""

from __future__ import annotations

from typing import Iterable, TypeVar

from ..execute import Shape
from .container import Pipeline

StepT = TypeVar("StepT")


def into_pipeline(steps: Iterable[StepT], shape: Shape | None = None) -> Pipeline[StepT]:
    """Wrap an ordered sequence of operations as a pipeline, keeping its order.

    Iterators are consumed. All items must implement the same executable
    shape; ``shape`` pins it, which also types an empty pipeline.
    """
    return Pipeline(steps, shape=shape)
