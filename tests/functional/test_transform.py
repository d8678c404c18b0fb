import logging

import numpy as np
import pytest

from seqflow.core import config
from seqflow.functional.transform import (
    flat_transform,
    flatten,
    identity,
    keep,
    transform,
)


@pytest.fixture
def names():
    return ["Amir", "Neela", "Dean"]


@pytest.fixture
def nested():
    return [[1, 2], [3, 4, 5], [6, 7]]


def is_even(x):
    return x % 2 == 0


# --- transform ---


def test_transform_uppercases_names(names):
    assert transform(names, str.upper) == ["AMIR", "NEELA", "DEAN"]


def test_transform_doubles_numbers():
    assert transform([6, -2, 7, 20], lambda x: x * 2) == [12, -4, 14, 40]


@pytest.mark.parametrize(
    "sequence, func",
    [
        ([], str),
        ([1, 2, 3], str),
        ((0.5, 1.5), round),
        (range(5), lambda x: x**2),
        (["a", "bb", ""], len),
    ],
)
def test_transform_is_positionwise(sequence, func):
    result = transform(sequence, func)
    expected_input = list(sequence)
    assert len(result) == len(expected_input)
    for i, element in enumerate(expected_input):
        assert result[i] == func(element)


def test_transform_extracts_object_fields():
    people = [{"name": "Amir", "age": 31}, {"name": "Dean", "age": 27}]
    assert transform(people, lambda p: p["name"]) == ["Amir", "Dean"]


def test_transform_does_not_mutate_input(names):
    snapshot = list(names)
    result = transform(names, str.upper)
    assert names == snapshot
    assert result is not names


def test_transform_returns_new_list_for_identity(names):
    result = transform(names, identity)
    assert result == names
    assert result is not names


def test_transform_accepts_generators_and_arrays():
    assert transform((x for x in range(3)), lambda x: x + 1) == [1, 2, 3]
    assert transform(np.array([1, 2, 3]), int) == [1, 2, 3]


def test_transform_propagates_function_error():
    calls = []

    def fragile(x):
        calls.append(x)
        if x == 2:
            raise ValueError("boom")
        return x

    with pytest.raises(ValueError, match="boom"):
        transform([1, 2, 3], fragile)

    # Fail fast: nothing after the failing element is visited
    assert calls == [1, 2]


def test_transform_logs_failing_position(seqflow_caplog):
    with pytest.raises(ZeroDivisionError):
        transform([1, 0, 2], lambda x: 1 / x)

    errors = [r for r in seqflow_caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "position 1" in errors[0].getMessage()


def test_transform_logs_count_at_debug(seqflow_caplog, names):
    transform(names, str.upper)
    assert any(
        "Transformed 3 elements" in r.getMessage() for r in seqflow_caplog.records
    )


def test_transform_rejects_non_callable():
    with pytest.raises(TypeError, match="callable"):
        transform([1, 2], "upper")


@pytest.mark.parametrize("bad", [None, 42])
def test_transform_rejects_non_iterable(bad):
    with pytest.raises(TypeError):
        transform(bad, str)


# --- flat_transform / flatten ---


def test_flatten_concatenates_in_order(nested):
    assert flatten(nested) == [1, 2, 3, 4, 5, 6, 7]
    assert flat_transform(nested, identity) == [1, 2, 3, 4, 5, 6, 7]


def test_flatten_then_filter_keeps_evens(nested):
    assert keep(flatten(nested), is_even) == [2, 4, 6]


def test_flatten_skips_empty_groups():
    assert flatten([[1, 2], [], [3]]) == [1, 2, 3]
    assert flatten([[], []]) == []
    assert flatten([]) == []


def test_flat_transform_expands_elements():
    assert flat_transform([1, 2, 3], lambda x: [x] * x) == [1, 2, 2, 3, 3, 3]


def test_flat_transform_accepts_any_iterable_group():
    result = flat_transform(["ab", "c"], lambda s: (ch.upper() for ch in s))
    assert result == ["A", "B", "C"]


def test_flat_transform_does_not_mutate_input(nested):
    snapshot = [list(group) for group in nested]
    result = flatten(nested)
    result.append(99)
    assert nested == snapshot


def test_flat_transform_propagates_function_error():
    calls = []

    def explode(x):
        calls.append(x)
        if x == "bad":
            raise KeyError(x)
        return [x]

    with pytest.raises(KeyError):
        flat_transform(["ok", "bad", "never"], explode)

    assert calls == ["ok", "bad"]


def test_flat_transform_logs_failing_position(seqflow_caplog):
    def explode(x):
        if x == 3:
            raise RuntimeError("no group")
        return [x]

    with pytest.raises(RuntimeError):
        flat_transform([1, 2, 3], explode)

    errors = [r for r in seqflow_caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "position 2" in errors[0].getMessage()


def test_flat_transform_rejects_non_iterable_group():
    with pytest.raises(TypeError, match="position 1"):
        flat_transform([[1], 2], identity)


def test_flat_transform_rejects_strings_in_strict_mode():
    with pytest.raises(TypeError, match="str"):
        flat_transform(["ab", "cd"], identity, strict=True)


def test_flat_transform_splits_strings_when_not_strict():
    assert flat_transform(["ab", "cd"], identity, strict=False) == ["a", "b", "c", "d"]


def test_flat_transform_uses_configured_strictness(monkeypatch):
    relaxed = config.Settings(STRICT_FLATTEN=False)
    monkeypatch.setattr(config, "settings", relaxed)
    assert flatten(["ab"]) == ["a", "b"]

    monkeypatch.setattr(config, "settings", config.Settings(STRICT_FLATTEN=True))
    with pytest.raises(TypeError):
        flatten(["ab"])


def test_flat_transform_rejects_non_callable():
    with pytest.raises(TypeError, match="callable"):
        flat_transform([[1]], None)


# --- keep ---


def test_keep_preserves_order():
    assert keep([5, 4, 3, 2, 1], lambda x: x > 2) == [5, 4, 3]


def test_keep_on_nested_sees_whole_groups(nested):
    # The predicate receives groups, not their elements
    assert keep(nested, lambda group: len(group) == 2) == [[1, 2], [6, 7]]


def test_keep_propagates_predicate_error():
    with pytest.raises(TypeError):
        keep([1, "a", 2], lambda x: x > 0)


def test_keep_rejects_non_callable():
    with pytest.raises(TypeError, match="predicate"):
        keep([1], 1)


def test_keep_does_not_mutate_input():
    numbers = [5, 4, 3, 2, 1]
    result = keep(numbers, is_even)
    result.append(0)
    assert numbers == [5, 4, 3, 2, 1]


def test_keep_stops_at_failing_predicate(seqflow_caplog):
    calls = []

    def positive(x):
        calls.append(x)
        return x > 0

    with pytest.raises(TypeError):
        keep([1, "a", 2], positive)

    assert calls == [1, "a"]
    errors = [r for r in seqflow_caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "position 1" in errors[0].getMessage()
