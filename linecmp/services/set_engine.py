"""
Set Engine - Intersection, exclusivity and partial overlap of line sets
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from linecmp.models.lines import ComparisonResult, LabeledLineSet


class SetEngine:
    """Compute set-algebra views over an ordered collection of line sets"""

    def intersect_all(self, sets: Sequence[LabeledLineSet]) -> list[str]:
        """Lines present in every set, sorted"""
        if not sets:
            return []

        common = set(sets[0].lines)
        for line_set in sets[1:]:
            if not common:
                break
            common.intersection_update(line_set.lines)

        return sorted(common)

    def exclusive_of(self, sets: Sequence[LabeledLineSet]) -> list[list[str]]:
        """Per input position, the sorted lines found in no other set"""
        counts = self._membership_counts(sets)
        return [sorted(line for line in line_set.lines if counts[line] == 1) for line_set in sets]

    def partial_overlap(self, sets: Sequence[LabeledLineSet]) -> dict[str, list[int]]:
        """Lines held by more than one but not all sets, mapped to their set indices"""
        total = len(sets)
        line_to_sets: dict[str, list[int]] = {}

        for index, line_set in enumerate(sets):
            for line in line_set.lines:
                line_to_sets.setdefault(line, []).append(index)

        return {
            line: line_to_sets[line]
            for line in sorted(line_to_sets)
            if 1 < len(line_to_sets[line]) < total
        }

    def compare(self, sets: Sequence[LabeledLineSet]) -> ComparisonResult:
        """Run all three computations over the same input"""
        return ComparisonResult(
            labels=[line_set.label for line_set in sets],
            common=self.intersect_all(sets),
            unique=self.exclusive_of(sets),
            partial=self.partial_overlap(sets),
        )

    def _membership_counts(self, sets: Sequence[LabeledLineSet]) -> Counter[str]:
        counts: Counter[str] = Counter()
        for line_set in sets:
            counts.update(line_set.lines)
        return counts
