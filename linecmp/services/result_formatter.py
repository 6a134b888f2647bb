"""
Result Formatter - Render comparison results as text reports
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from linecmp.models.display import CompareMode, DisplayConfig
from linecmp.models.lines import ComparisonResult


class ResultFormatter:
    """Turn a ComparisonResult into a human-readable report"""

    def render(self, result: ComparisonResult, config: DisplayConfig) -> str:
        """Render the report for the configured mode"""
        report = _Report(config)

        if config.mode == CompareMode.DIFFERENT:
            self._render_different(report, result)
        else:
            self._render_common(report, result)

        if report.truncated:
            report.lines.append("")
            report.lines.append(
                f"Showing at most {config.max_lines} lines per section. "
                "Use --full to see everything or --limit N to change the limit."
            )

        return "\n".join(report.lines) + "\n"

    def to_json(self, result: ComparisonResult) -> str:
        """Serialize the full (never truncated) result"""
        # json.dumps keeps surrogate-escaped lines intact
        return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"

    def _render_common(self, report: _Report, result: ComparisonResult):
        n_files = len(result.labels)

        if not result.common:
            report.lines.append(f"No common lines found across all {n_files} files")
            return

        report.lines.append(f"Lines common to all {n_files} files:")
        for i, label in enumerate(result.labels):
            separator = "," if i < n_files - 1 else ""
            report.lines.append(f"  {label}{separator}")
        report.lines.append("")
        report.lines.append(f"Found {len(result.common)} common lines:")
        report.lines.append("")
        report.add_section(result.common)

    def _render_different(self, report: _Report, result: ComparisonResult):
        total_unique = result.total_unique

        if total_unique == 0 and not result.partial:
            report.lines.append("No unique lines found - all files have identical content")
            return

        report.lines.append(f"Lines unique to each file (total: {total_unique} unique lines):")
        report.lines.append("")

        for label, unique in zip(result.labels, result.unique):
            if unique:
                report.lines.append(f"Lines only in {label} ({len(unique)} lines):")
                report.add_section(unique, indent="  ")
            else:
                report.lines.append(f"No unique lines in {label}")
            report.lines.append("")

        # Only meaningful from three files up
        if len(result.labels) > 2 and result.partial:
            report.lines.append(f"Lines shared by some files (but not all) ({len(result.partial)} lines):")
            report.add_section(
                [
                    f'"{line}" appears in: {" ".join(result.labels[i] for i in indices)}'
                    for line, indices in result.partial.items()
                ],
                indent="  ",
            )

        # Drop the trailing separator left by the last section
        while report.lines and report.lines[-1] == "":
            report.lines.pop()


class _Report:
    """Accumulates output lines and remembers whether anything was cut"""

    def __init__(self, config: DisplayConfig):
        self.config = config
        self.lines: list[str] = []
        self.truncated = False

    def add_section(self, items: Sequence[str], indent: str = ""):
        shown, remaining = truncate(items, self.config)
        self.lines.extend(f"{indent}{item}" for item in shown)
        if remaining:
            self.truncated = True
            self.lines.append(f"{indent}... and {remaining} more lines (use --full to show all)")


def truncate(items: Sequence[str], config: DisplayConfig) -> tuple[list[str], int]:
    """Apply the truncation policy: (items to show, count left out)"""
    if config.show_full or len(items) <= config.max_lines:
        return list(items), 0
    return list(items[: config.max_lines]), len(items) - config.max_lines
