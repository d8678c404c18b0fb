"""Reusable type definitions for the seqflow package.

This module provides the type aliases shared by the functional primitives and
the pipeline model, together with the validators that guard their inputs.

Type Aliases:
    MappingFunction: A callable turning one element into another value.
    FlatteningFunction: A callable turning one element into a nested sequence.
    Predicate: A callable deciding whether an element is kept.
    StepFunction: Any of the above, validated to be callable.
"""

from typing import Annotated, Any, Callable, Iterable, TypeVar

from pydantic.functional_validators import BeforeValidator

__all__ = [
    "T",
    "R",
    "MappingFunction",
    "FlatteningFunction",
    "Predicate",
    "StepFunction",
    "ensure_callable",
    "ensure_iterable",
]

T = TypeVar("T")
R = TypeVar("R")

MappingFunction = Callable[[T], R]
FlatteningFunction = Callable[[T], Iterable[R]]
Predicate = Callable[[T], bool]


def ensure_callable(func: Any, name: str = "func") -> Any:
    """Validator to ensure a step function can be called.

    Args:
        func: The object supplied as a mapping, flattening or filter function.
        name: Argument name used in the error message.
    Returns:
        The original object if validation passes.
    Raises:
        TypeError: If ``func`` is not callable.
    """
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")
    return func


def ensure_iterable(sequence: Any, name: str = "sequence") -> Any:
    """Validator to ensure an input sequence can be iterated.

    Raises:
        TypeError: If ``sequence`` is None or not iterable.
    """
    if sequence is None:
        raise TypeError(f"{name} must be a sequence, got None")
    try:
        iter(sequence)
    except TypeError:
        raise TypeError(
            f"{name} must be iterable, got {type(sequence).__name__}"
        ) from None
    return sequence


def _validate_step_function(func: Any) -> Any:
    try:
        return ensure_callable(func, name="step function")
    except TypeError as exc:
        raise ValueError(str(exc)) from None


StepFunction = Annotated[Callable[..., Any], BeforeValidator(_validate_step_function)]
