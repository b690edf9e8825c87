"""Executable contracts for pipeline operations.

An operation type commits to exactly one of three calling shapes:

``Execute``
    ``execute(self)`` - no shared context.
``ExecuteWith``
    ``execute(self, context)`` - one shared context object.
``ExecuteWithPair``
    ``execute(self, context_a, context_b)`` - two independent context objects,
    e.g. long-lived world state plus per-call data such as elapsed time.

By convention the operation type is a closed catalogue and ``execute`` is one
exhaustive dispatch over its variants that ends in :func:`unhandled`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, NoReturn

from .errors import ShapeError, UnhandledVariantError


class Shape(Enum):
    """Calling shape of an executable operation."""

    NONE = 0
    WITH = 1
    WITH_PAIR = 2

    @property
    def arity(self) -> int:
        """Number of context objects passed to ``execute``."""
        return self.value


class Execute(ABC):
    """Operation executed without shared context."""

    __shape__ = Shape.NONE

    @abstractmethod
    def execute(self) -> Any:
        """Perform this operation."""


class ExecuteWith(ABC):
    """Operation executed with one shared context object."""

    __shape__ = Shape.WITH

    @abstractmethod
    def execute(self, context: Any) -> Any:
        """Perform this operation against ``context``."""


class ExecuteWithPair(ABC):
    """Operation executed with two shared context objects."""

    __shape__ = Shape.WITH_PAIR

    @abstractmethod
    def execute(self, context_a: Any, context_b: Any) -> Any:
        """Perform this operation against ``context_a`` and ``context_b``."""


SHAPE_CONTRACTS: dict[Shape, type] = {
    Shape.NONE: Execute,
    Shape.WITH: ExecuteWith,
    Shape.WITH_PAIR: ExecuteWithPair,
}


def shape_of(obj: Any) -> Shape:
    """Return the single shape implemented by an operation or operation type."""
    cls = obj if isinstance(obj, type) else type(obj)
    shapes = [shape for shape, contract in SHAPE_CONTRACTS.items() if issubclass(cls, contract)]
    if not shapes:
        raise ShapeError(
            f"{cls.__name__} does not implement Execute, ExecuteWith or ExecuteWithPair."
        )
    if len(shapes) > 1:
        names = ", ".join(SHAPE_CONTRACTS[shape].__name__ for shape in shapes)
        raise ShapeError(f"{cls.__name__} implements more than one shape: {names}.")
    return shapes[0]


def unhandled(variant: Any) -> NoReturn:
    """Fail an exhaustive dispatch that reached an unknown variant."""
    raise UnhandledVariantError(f"Unhandled variant {type(variant).__qualname__}: {variant!r}")


__all__ = [
    "Execute",
    "ExecuteWith",
    "ExecuteWithPair",
    "SHAPE_CONTRACTS",
    "Shape",
    "shape_of",
    "unhandled",
]
