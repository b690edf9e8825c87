"""Shared error types for enum_pipeline."""

from __future__ import annotations

from typing import Any


class PipelineError(RuntimeError):
    """Raised when a pipeline run cannot complete."""


class PipelineConsumedError(PipelineError):
    """Raised when an already executed pipeline is executed again."""


class StepExecutionError(PipelineError):
    """Raised when one operation of a pipeline run fails.

    The run stops at the failing operation. ``index`` is its position in the
    pipeline, ``completed`` is how many operations finished before it and
    ``results`` holds their return values. The original exception is chained
    as ``__cause__``.
    """

    def __init__(self, index: int, step: Any, results: tuple[Any, ...] = ()) -> None:
        self.index = index
        self.step = step
        self.results = tuple(results)
        super().__init__(f"Step {index} ({describe_step(step)}) failed.")

    @property
    def completed(self) -> int:
        return len(self.results)

    def __str__(self) -> str:
        base = super().__str__()
        if self.__cause__ is None:
            return base
        return f"{base[:-1]}: {self.__cause__}"


class ShapeError(TypeError):
    """Raised when operations or context do not fit an executable shape."""


class UnhandledVariantError(TypeError):
    """Raised when an exhaustive dispatch meets a variant it does not handle."""


class ConfigError(ValueError):
    """Raised when a world configuration is invalid."""


def describe_step(step: Any) -> str:
    """Short label for an operation value in messages and logs."""
    name = getattr(step, "variant_name", None)
    if isinstance(name, str):
        return name
    return type(step).__name__
