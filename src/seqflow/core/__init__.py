"""Core configuration and type definitions."""

from seqflow.core.config import Settings, settings
from seqflow.core.enums import StepKind

__all__ = [
    "Settings",
    "settings",
    "StepKind",
]
