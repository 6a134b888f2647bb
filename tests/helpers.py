from __future__ import annotations

from linecmp.models.lines import LabeledLineSet


def make_sets(*contents) -> list[LabeledLineSet]:
    """One LabeledLineSet per iterable of lines, labelled file1.txt, file2.txt, ..."""
    return [LabeledLineSet(label=f"file{i + 1}.txt", lines=frozenset(lines)) for i, lines in enumerate(contents)]
