"""Display configuration models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_LINES = 20


class CompareMode(str, Enum):
    """Which report to produce"""

    COMMON = "common"
    DIFFERENT = "different"


class DisplayConfig(BaseModel):
    """Per-run display settings"""

    model_config = ConfigDict(frozen=True)

    mode: CompareMode = CompareMode.COMMON
    show_full: bool = False
    max_lines: int = Field(default=DEFAULT_MAX_LINES, gt=0)
