"""Line set data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class LabeledLineSet(BaseModel):
    """Deduplicated non-empty lines of one source, tagged with its label"""

    model_config = ConfigDict(frozen=True)

    label: str  # source identifier, usually the file path
    lines: frozenset[str]

    @field_validator("lines")
    @classmethod
    def no_empty_lines(cls, value: frozenset[str]) -> frozenset[str]:
        if "" in value:
            raise ValueError("line sets must not contain empty lines")
        return value

    def __len__(self) -> int:
        return len(self.lines)

    def __contains__(self, line: object) -> bool:
        return line in self.lines


class ComparisonResult(BaseModel):
    """Common, unique and partially shared lines of one comparison run"""

    labels: list[str]
    common: list[str] = []
    unique: list[list[str]] = []  # indexed by input position
    partial: dict[str, list[int]] = {}  # line -> ascending input indices

    @property
    def total_unique(self) -> int:
        return sum(len(lines) for lines in self.unique)
