"""
Line Loader - Read sources into deduplicated line sets
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Iterable

from linecmp.errors import ReadError
from linecmp.models.lines import LabeledLineSet


class LineLoader:
    """Load files (or in-memory text) into LabeledLineSets"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: str | os.PathLike) -> LabeledLineSet:
        """
        Read a file into a set of its non-empty lines.

        Lines end at "\\n" only; a "\\r" directly before it (or at the very end
        of the file) is part of the terminator. Undecodable bytes are kept as
        surrogate escapes so every readable file loads without loss.
        """
        label = os.fspath(path)
        try:
            with open(path, encoding=self.encoding, errors="surrogateescape", newline="\n") as f:
                lines = self._collect(f)
        except (OSError, UnicodeError) as e:
            raise ReadError(label, e) from e
        return LabeledLineSet(label=label, lines=lines)

    def load_text(self, label: str, content: str) -> LabeledLineSet:
        """Split already-read text with the same rules as load()"""
        return LabeledLineSet(label=label, lines=self._collect(io.StringIO(content, newline="\n")))

    def load_all(
        self,
        paths: Iterable[str | os.PathLike],
        on_load: Callable[[LabeledLineSet], None] | None = None,
    ) -> list[LabeledLineSet]:
        """Load every path in order, stopping at the first failure"""
        sets = []
        for path in paths:
            line_set = self.load(path)
            if on_load is not None:
                on_load(line_set)
            sets.append(line_set)
        return sets

    @staticmethod
    def _collect(stream: Iterable[str]) -> frozenset[str]:
        lines = set()
        for line in stream:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            if line:
                lines.add(line)
        return frozenset(lines)
