"""Composable pipelines of transform, flat transform and keep steps.

A :class:`Pipeline` is an ordered list of :class:`Step` models applied left to
right. Builders never modify the receiver, they return a new pipeline, so a
partially built pipeline can be shared and extended in several directions.

Example:
    >>> from seqflow.functional.pipeline import Pipeline
    >>>
    >>> evens = Pipeline().flat_map(lambda group: group).filter(lambda x: x % 2 == 0)
    >>> evens([[1, 2], [3, 4, 5], [6, 7]])
    [2, 4, 6]
"""

import typing as tp

from pydantic import BaseModel, ConfigDict, Field

from seqflow.core.enums import StepKind
from seqflow.core.types import StepFunction
from seqflow.functional.transform import flat_transform, identity, keep, transform
from seqflow.logger.logger import get_logger

__all__ = [
    "Step",
    "Pipeline",
]

logger = get_logger(__name__)


class Step(BaseModel):
    """A single operation of a pipeline.

    Attributes:
        kind: Which primitive runs the step.
        func: Mapping function, flattening function or predicate.
        strict: String handling of a flat transform step, see
            :func:`seqflow.functional.transform.flat_transform`.
    """

    kind: StepKind = Field(..., description="Operation performed by this step.")
    func: StepFunction = Field(
        ..., description="Function handed to the operation for every element."
    )
    strict: tp.Optional[bool] = Field(
        None,
        description="Strictness of a flat transform step. None uses the configured default.",
    )

    model_config = ConfigDict(frozen=True)

    def run(self, sequence: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
        """Run this step over ``sequence`` and return the new list."""
        if self.kind is StepKind.MAP:
            return transform(sequence, self.func)
        if self.kind is StepKind.FLAT_MAP:
            return flat_transform(sequence, self.func, strict=self.strict)
        return keep(sequence, self.func)


class Pipeline(BaseModel):
    """Ordered composition of :class:`Step` objects.

    Applying an empty pipeline returns a new list with the input elements.
    """

    steps: tp.Tuple[Step, ...] = Field(
        default=(), description="Steps applied left to right."
    )

    model_config = ConfigDict(frozen=True)

    def _append(self, kind: StepKind, func: tp.Callable, **options) -> "Pipeline":
        return Pipeline(steps=self.steps + (Step(kind=kind, func=func, **options),))

    def map(self, func: tp.Callable[[tp.Any], tp.Any]) -> "Pipeline":
        """Return a new pipeline ending with a transform step."""
        return self._append(StepKind.MAP, func)

    def flat_map(
        self,
        func: tp.Callable[[tp.Any], tp.Iterable[tp.Any]],
        strict: tp.Optional[bool] = None,
    ) -> "Pipeline":
        """Return a new pipeline ending with a flat transform step.

        Args:
            func: Flattening function.
            strict: Passed to :func:`flat_transform` for this step only.
        """
        return self._append(StepKind.FLAT_MAP, func, strict=strict)

    def filter(self, predicate: tp.Callable[[tp.Any], bool]) -> "Pipeline":
        """Return a new pipeline ending with a keep step."""
        return self._append(StepKind.FILTER, predicate)

    def then(self, other: "Pipeline") -> "Pipeline":
        """Return a pipeline running this one followed by ``other``."""
        return Pipeline(steps=self.steps + other.steps)

    def apply(self, sequence: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
        """Run every step in order.

        Args:
            sequence: Input sequence. Left unmodified.

        Returns:
            The list produced by the last step.

        Raises:
            Exception: The first failure of any step function, unchanged.
        """
        result = transform(sequence, identity)
        for position, step in enumerate(self.steps):
            logger.debug(f"Step {position}: {step.kind.describe()}")
            result = step.run(result)
        return result

    def __call__(self, sequence: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
        return self.apply(sequence)

    def __len__(self) -> int:
        return len(self.steps)
