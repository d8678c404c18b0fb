"""Functional primitives for seqflow.

This module provides the sequence operations of the package: ``transform``
(map), ``flat_transform`` (flatMap), ``flatten`` and ``keep`` (filter), and the
``Pipeline`` model that composes them. Utilities are stateless and
side-effect-free so they can be composed into pipelines.
"""

from seqflow.functional.transform import (
    flat_transform,
    flatten,
    identity,
    keep,
    transform,
)
from seqflow.functional.pipeline import Pipeline, Step

__all__ = [
    "transform",
    "flat_transform",
    "flatten",
    "keep",
    "identity",
    "Pipeline",
    "Step",
]
