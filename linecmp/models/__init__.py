"""Models module - Pydantic data models"""

from .lines import LabeledLineSet, ComparisonResult
from .display import CompareMode, DisplayConfig, DEFAULT_MAX_LINES
from .api import (
    SourceContent,
    CompareRequest,
    CompareResponse,
    DisplayDefaults,
    DisplayDefaultsUpdate,
)

__all__ = [
    # Line set models
    "LabeledLineSet",
    "ComparisonResult",
    # Display models
    "CompareMode",
    "DisplayConfig",
    "DEFAULT_MAX_LINES",
    # API models
    "SourceContent",
    "CompareRequest",
    "CompareResponse",
    "DisplayDefaults",
    "DisplayDefaultsUpdate",
]
