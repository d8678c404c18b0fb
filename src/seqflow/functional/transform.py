"""Element-wise sequence transformations.

This module implements the two stream operations the rest of the package is
built from, plus the filter step they are usually chained with:

    - **transform** (``map``): apply a mapping function to every element,
      producing a list of the same length.
    - **flat_transform** (``flatMap``): apply a flattening function to every
      element and concatenate the nested sequences it returns, in order.
    - **flatten**: ``flat_transform`` with the identity function.
    - **keep** (``filter``): retain the elements a predicate accepts.

All operations are synchronous, single pass and never mutate their input. The
result is always a new ``list``. If the supplied function raises, the exception
propagates unchanged and no partial result is returned.

Note:
    Nested input has to be flattened before it is filtered: ``keep`` applied to
    a sequence of sequences hands whole groups to the predicate, not their
    elements.

Examples:
    >>> from seqflow.functional.transform import transform, flatten, keep
    >>>
    >>> transform(["Amir", "Neela", "Dean"], str.upper)
    ['AMIR', 'NEELA', 'DEAN']
    >>>
    >>> keep(flatten([[1, 2], [3, 4, 5], [6, 7]]), lambda x: x % 2 == 0)
    [2, 4, 6]
"""

import typing as tp

from seqflow.core import config
from seqflow.core.types import (
    FlatteningFunction,
    MappingFunction,
    Predicate,
    R,
    T,
    ensure_callable,
    ensure_iterable,
)
from seqflow.logger.logger import get_logger

__all__ = [
    "transform",
    "flat_transform",
    "flatten",
    "keep",
    "identity",
]

logger = get_logger(__name__)


def identity(value: T) -> T:
    """Return ``value`` unchanged."""
    return value


def _describe(func: tp.Callable) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def transform(sequence: tp.Iterable[T], func: MappingFunction) -> tp.List[R]:
    """Apply a mapping function to every element of a sequence.

    Args:
        sequence: Ordered, finite input. Left unmodified.
        func: Pure function ``T -> R``.

    Returns:
        A new list where element ``i`` equals ``func(sequence[i])``.

    Raises:
        TypeError: If ``func`` is not callable or ``sequence`` is not iterable.
        Exception: Whatever ``func`` raises, re-raised unchanged.

    Example:
        >>> transform([6, -2, 7, 20], lambda x: x * 2)
        [12, -4, 14, 40]
    """
    ensure_callable(func)
    ensure_iterable(sequence)

    result = []
    for index, element in enumerate(sequence):
        try:
            result.append(func(element))
        except Exception:
            logger.error(
                f"Mapping function {_describe(func)} failed at position {index}"
            )
            raise

    logger.debug(f"Transformed {len(result)} elements with {_describe(func)}")
    return result


def flat_transform(
    sequence: tp.Iterable[T],
    func: FlatteningFunction,
    strict: tp.Optional[bool] = None,
) -> tp.List[R]:
    """Apply a flattening function to every element and concatenate the results.

    Groups are concatenated in input order and the order inside each group is
    kept. An element whose group is empty contributes nothing.

    Args:
        sequence: Ordered, finite input. Left unmodified.
        func: Pure function ``T -> Sequence[R]``.
        strict: Reject ``str``/``bytes`` groups, which would otherwise be
            split into characters. ``None`` uses ``settings.STRICT_FLATTEN``.

    Returns:
        A new flat list of every group's elements.

    Raises:
        TypeError: If ``func`` is not callable, ``sequence`` is not iterable,
            or a group is not iterable (or is a string in strict mode).
        Exception: Whatever ``func`` raises, re-raised unchanged.

    Example:
        >>> flat_transform([1, 2, 3], lambda x: [x] * x)
        [1, 2, 2, 3, 3, 3]
    """
    ensure_callable(func)
    ensure_iterable(sequence)
    if strict is None:
        strict = config.settings.STRICT_FLATTEN

    result = []
    groups = 0
    for index, element in enumerate(sequence):
        try:
            group = func(element)
        except Exception:
            logger.error(
                f"Flattening function {_describe(func)} failed at position {index}"
            )
            raise

        if strict and isinstance(group, (str, bytes, bytearray)):
            raise TypeError(
                f"Flattening function returned {type(group).__name__} at position "
                f"{index}; return a list of items or disable strict mode"
            )
        try:
            items = iter(group)
        except TypeError:
            raise TypeError(
                f"Flattening function must return a sequence, got "
                f"{type(group).__name__} at position {index}"
            ) from None
        result.extend(items)
        groups += 1

    logger.debug(f"Flattened {groups} groups into {len(result)} elements")
    return result


def flatten(
    sequence: tp.Iterable[tp.Iterable[T]], strict: tp.Optional[bool] = None
) -> tp.List[T]:
    """Concatenate the inner sequences of a sequence of sequences, in order.

    Example:
        >>> flatten([[1, 2], [], [3]])
        [1, 2, 3]
    """
    return flat_transform(sequence, identity, strict=strict)


def keep(sequence: tp.Iterable[T], predicate: Predicate) -> tp.List[T]:
    """Retain the elements for which ``predicate`` is truthy, order preserved.

    Args:
        sequence: Ordered, finite input. Left unmodified.
        predicate: Pure function ``T -> bool``.

    Returns:
        A new list with the accepted elements.
    """
    ensure_callable(predicate, name="predicate")
    ensure_iterable(sequence)

    result = []
    for index, element in enumerate(sequence):
        try:
            accepted = predicate(element)
        except Exception:
            logger.error(f"Predicate {_describe(predicate)} failed at position {index}")
            raise
        if accepted:
            result.append(element)

    logger.debug(f"Kept {len(result)} elements with {_describe(predicate)}")
    return result
