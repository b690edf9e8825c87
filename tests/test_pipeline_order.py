"""Unit tests for pipeline conversion, ordering and consumption."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from enum_pipeline import (
    Execute,
    ExecuteWith,
    ExecuteWithPair,
    Pipeline,
    PipelineConsumedError,
    RunReport,
    Shape,
    ShapeError,
    into_pipeline,
)


pytestmark = pytest.mark.unit


@dataclass(frozen=True)
class Record(ExecuteWith):
    name: str

    def execute(self, context: list[str]) -> str:
        context.append(self.name)
        return self.name.upper()


@dataclass(frozen=True)
class Say(Execute):
    log: list
    word: str

    def execute(self) -> None:
        self.log.append(self.word)


@dataclass(frozen=True)
class Pair(ExecuteWithPair):
    def execute(self, context_a: list, context_b: list) -> None:
        context_a.append(len(context_b))


def test_execution_order_matches_insertion_order() -> None:
    names = ["c", "a", "b", "a", "d"]
    log: list[str] = []
    report = into_pipeline([Record(n) for n in names]).execute(log)
    assert log == names
    assert report == RunReport(completed=5, results=("C", "A", "B", "A", "D"))


def test_generator_input_is_consumed_in_order() -> None:
    log: list[str] = []
    source = (Say(log, w) for w in ("one", "two", "three"))
    pipeline = into_pipeline(source)
    assert list(source) == []
    assert len(pipeline) == 3
    pipeline.execute()
    assert log == ["one", "two", "three"]


def test_caller_sequence_is_not_modified() -> None:
    steps = [Record("x"), Record("y")]
    into_pipeline(steps).execute([])
    assert steps == [Record("x"), Record("y")]


def test_shape_is_inferred_or_pinned() -> None:
    assert into_pipeline([Record("a")]).shape is Shape.WITH
    assert into_pipeline([]).shape is None
    assert into_pipeline([], shape=Shape.WITH_PAIR).shape is Shape.WITH_PAIR


@pytest.mark.parametrize("context", [(), (object(),), (object(), object())])
def test_empty_pipeline_is_noop_for_any_shape(context: tuple) -> None:
    report = into_pipeline([]).execute(*context)
    assert report == RunReport(completed=0, results=())


def test_empty_pipeline_does_not_touch_context() -> None:
    ctx_a: list[int] = [1]
    ctx_b = {"k": 2}
    into_pipeline([], shape=Shape.WITH_PAIR).execute(ctx_a, ctx_b)
    assert ctx_a == [1]
    assert ctx_b == {"k": 2}


def test_mixed_shapes_rejected_at_conversion() -> None:
    with pytest.raises(ShapeError, match=r"steps\[1\]"):
        into_pipeline([Record("a"), Say([], "b")])


def test_pinned_shape_mismatch_rejected() -> None:
    with pytest.raises(ShapeError, match="expected WITH_PAIR"):
        into_pipeline([Record("a")], shape=Shape.WITH_PAIR)


def test_non_executable_item_rejected() -> None:
    with pytest.raises(ShapeError, match=r"steps\[0\]"):
        into_pipeline(["not an operation"])


def test_operation_class_rejected_at_conversion() -> None:
    with pytest.raises(ShapeError, match=r"steps\[1\]: Record is a class, not an operation value"):
        into_pipeline([Record("a"), Record])


def test_context_arity_must_match_shape() -> None:
    with pytest.raises(ShapeError, match="expects 1 context"):
        into_pipeline([Record("a")]).execute()
    with pytest.raises(ShapeError, match="expects 2 context"):
        into_pipeline([Pair()]).execute([])
    with pytest.raises(ShapeError, match="at most 2"):
        into_pipeline([]).execute(1, 2, 3)


def test_arity_error_leaves_pipeline_runnable() -> None:
    log: list[str] = []
    pipeline = into_pipeline([Record("a")])
    with pytest.raises(ShapeError):
        pipeline.execute()
    assert not pipeline.consumed
    pipeline.execute(log)
    assert log == ["a"]


def test_pipeline_is_consumed_by_execute() -> None:
    log: list[str] = []
    pipeline = into_pipeline([Record("a"), Record("b")])
    assert repr(pipeline) == "Pipeline(holding 2, shape=WITH)"

    pipeline.execute(log)

    assert pipeline.consumed
    assert len(pipeline) == 0
    assert repr(pipeline) == "Pipeline(consumed, shape=WITH)"
    with pytest.raises(PipelineConsumedError):
        pipeline.execute(log)
    assert log == ["a", "b"]


def test_pipeline_constructor_matches_conversion() -> None:
    log: list[str] = []
    Pipeline([Record("z")]).execute(log)
    assert log == ["z"]
