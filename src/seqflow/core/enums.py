"""Enumerations for pipeline steps."""

from enum import Enum


class StepKind(Enum):
    """Kind of operation a pipeline step performs."""

    MAP = "map"
    FLAT_MAP = "flat_map"
    FILTER = "filter"

    def describe(self) -> str:
        """Human readable name used in log messages.

        Returns:
            Short description of the step kind.
        """
        mapping = {
            StepKind.MAP: "transform",
            StepKind.FLAT_MAP: "flat transform",
            StepKind.FILTER: "keep",
        }
        return mapping[self]
