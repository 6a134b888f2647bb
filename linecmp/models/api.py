"""HTTP request/response models"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .display import DisplayConfig
from .lines import ComparisonResult


class SourceContent(BaseModel):
    """One input source sent inline"""

    label: str
    content: str  # raw text, split into lines server-side


class CompareRequest(BaseModel):
    """Request to compare two or more sources"""

    sources: list[SourceContent]
    display: DisplayConfig | None = None  # falls back to configured defaults


class CompareResponse(BaseModel):
    """Computed result plus the rendered text report"""

    result: ComparisonResult
    report: str


class DisplayDefaults(BaseModel):
    """Stored display defaults"""

    max_lines: int = Field(gt=0)
    show_full: bool


class DisplayDefaultsUpdate(BaseModel):
    """Partial update of display defaults"""

    max_lines: int | None = Field(default=None, gt=0)
    show_full: bool | None = None
