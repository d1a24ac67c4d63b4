"""Reading text input files as a list of lines."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _base_name(path: str) -> str:
    """File name of ``path`` without directories or its last extension.

    Both ``/`` and ``\\`` count as directory separators.
    """
    base = path[max(path.rfind("/"), path.rfind("\\")) + 1 :]
    dot = base.rfind(".")
    return base[:dot] if dot >= 0 else base


@dataclass
class SourceFile:
    """The lines of a text file, without newlines, and its bare name."""

    name: str
    lines: list[str] = field(default_factory=list)

    @classmethod
    def read(cls, path: str | os.PathLike[str]) -> SourceFile:
        """Read every line of the file at ``path``.

        Only the trailing ``\\n`` of each line is removed. Raises OSError
        when the file cannot be opened.
        """
        path = os.fspath(path)
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(name=_base_name(path), lines=lines)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def read_file(path: str | os.PathLike[str]) -> SourceFile:
    """Read the file at ``path`` into a SourceFile."""
    return SourceFile.read(path)