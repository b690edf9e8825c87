"""Closed operation catalogues.

A catalogue root declares the executable shape and the exhaustive dispatch;
its direct subclasses are the variants, usually frozen dataclasses carrying
the per-operation payload::

    class Op(Catalogue, ExecuteWith, root=True):
        def execute(self, context):
            if isinstance(self, Push):
                context.append(self.value)
            elif isinstance(self, Pop):
                context.pop()
            else:
                unhandled(self)

    @dataclass(frozen=True)
    class Push(Op):
        value: int

    @dataclass(frozen=True)
    class Pop(Op):
        pass
"""

from __future__ import annotations

from typing import Any, ClassVar

from .execute import shape_of


class Catalogue:
    """Base for closed catalogues of operation variants."""

    _catalogue_root: ClassVar[type | None] = None
    _variants: ClassVar[tuple[type, ...]] = ()

    def __init_subclass__(cls, root: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if root:
            shape_of(cls)
            cls._catalogue_root = cls
            cls._variants = ()
            return

        parent = cls._catalogue_root
        if parent is None:
            raise TypeError(f"{cls.__name__} must declare a catalogue root with root=True.")
        if parent not in cls.__bases__:
            raise TypeError(
                f"{cls.__name__} cannot extend variant of {parent.__name__}; variants are leaves."
            )
        # dataclass(slots=True) rebuilds the class, so replace by qualified name.
        kept = tuple(
            v for v in parent._variants if (v.__module__, v.__qualname__) != (cls.__module__, cls.__qualname__)
        )
        parent._variants = kept + (cls,)

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        if cls is cls._catalogue_root:
            raise TypeError(f"{cls.__name__} is a catalogue root; instantiate one of its variants.")
        return super().__new__(cls)

    @classmethod
    def variants(cls) -> tuple[type, ...]:
        """Variants of this catalogue in declaration order."""
        root = cls._catalogue_root
        if root is None:
            return ()
        return root._variants

    @property
    def variant_name(self) -> str:
        return type(self).__name__


__all__ = ["Catalogue"]
