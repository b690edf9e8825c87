"""Pipeline execution engine."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..errors import StepExecutionError, describe_step
from .report import RunReport

logger = logging.getLogger(__name__)


def run(steps: Iterable[Any], context: tuple[Any, ...] = ()) -> RunReport:
    """Run operations sequentially, passing the same context to each.

    Stops at the first operation that raises and reports it as a
    :class:`StepExecutionError` chained to the original exception.
    """
    results: list[Any] = []
    for idx, step in enumerate(steps):
        logger.debug("Running step %d (%s)", idx, describe_step(step))
        try:
            results.append(step.execute(*context))
        except Exception as exc:
            logger.warning(
                "Step %d (%s) failed after %d completed step(s): %s",
                idx,
                describe_step(step),
                len(results),
                exc,
            )
            raise StepExecutionError(idx, step, tuple(results)) from exc

    return RunReport(completed=len(results), results=tuple(results))
