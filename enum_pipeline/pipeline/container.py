"""Ordered, single-use container of executable operations."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Generic, Iterable, Iterator, TypeVar

from ..errors import PipelineConsumedError, ShapeError
from ..execute import Shape, shape_of
from .engine import run
from .report import RunReport

logger = logging.getLogger(__name__)

StepT = TypeVar("StepT")


def resolve_shape(steps: Iterable[Any], shape: Shape | None = None) -> Shape | None:
    """Return the one shape shared by all steps, checked against ``shape`` if given."""
    resolved = shape
    for idx, step in enumerate(steps):
        if isinstance(step, type):
            raise ShapeError(f"steps[{idx}]: {step.__name__} is a class, not an operation value.")
        try:
            step_shape = shape_of(step)
        except ShapeError as exc:
            raise ShapeError(f"steps[{idx}]: {exc}") from exc
        if resolved is None:
            resolved = step_shape
        elif step_shape is not resolved:
            raise ShapeError(
                f"steps[{idx}] ({type(step).__name__}) has shape {step_shape.name}, "
                f"expected {resolved.name}."
            )
    return resolved


class Pipeline(Generic[StepT]):
    """Operations executed once, in insertion order.

    A pipeline holds its operations until :meth:`execute` runs them, after
    which it is consumed and cannot run again. Items cannot be added or
    removed; build a new pipeline from a new sequence instead.
    """

    def __init__(self, steps: Iterable[StepT] = (), shape: Shape | None = None) -> None:
        items: deque[StepT] = deque(steps)
        self._shape = resolve_shape(items, shape)
        self._steps = items
        self._consumed = False

    @property
    def shape(self) -> Shape | None:
        """Shape shared by the operations, ``None`` for an untyped empty pipeline."""
        return self._shape

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"holding {len(self._steps)}"
        shape = self._shape.name if self._shape is not None else None
        return f"Pipeline({state}, shape={shape})"

    def _check_arity(self, context: tuple[Any, ...]) -> None:
        if self._shape is None:
            if len(context) > Shape.WITH_PAIR.arity:
                raise ShapeError(f"Pipeline accepts at most 2 context objects, got {len(context)}.")
            return
        if len(context) != self._shape.arity:
            raise ShapeError(
                f"Pipeline of shape {self._shape.name} expects {self._shape.arity} "
                f"context object(s), got {len(context)}."
            )

    def _drain(self) -> Iterator[StepT]:
        while self._steps:
            yield self._steps.popleft()

    def execute(self, *context: Any) -> RunReport:
        """Run every operation in order, passing ``context`` to each, and consume the pipeline."""
        if self._consumed:
            raise PipelineConsumedError("Pipeline has already been executed.")
        self._check_arity(context)
        self._consumed = True

        logger.debug("Executing %d step(s) with %d context object(s)", len(self._steps), len(context))
        try:
            report = run(self._drain(), context)
        finally:
            self._steps.clear()
        logger.debug("Pipeline completed %d step(s)", report.completed)
        return report
