from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path


@dataclass(frozen=True)
class Line:
    """One physical line. ``content`` excludes the line terminator."""

    index: int
    start: int
    content: str

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def end(self) -> int:
        return self.start + len(self.content)

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()

    @property
    def first_character_offset(self) -> int:
        return self.start + len(self.content) - len(self.content.lstrip())


def split_lines(text: str) -> tuple[Line, ...]:
    lines: list[Line] = []
    start = 0
    for index, raw in enumerate(text.split("\n")):
        content = raw[:-1] if raw.endswith("\r") else raw
        lines.append(Line(index, start, content))
        start += len(raw) + 1
    # "a\n" is one line, not a line followed by an empty one.
    if len(lines) > 1 and text.endswith("\n"):
        lines.pop()
    return tuple(lines)


class SourceFile:
    """File contents plus the derived line table."""

    def __init__(self, contents: str, path: Path | None = None) -> None:
        self.contents = contents
        self.path = path

    @classmethod
    def from_path(cls, path: Path) -> "SourceFile":
        with path.open(encoding="utf-8", newline="") as fh:
            return cls(fh.read(), path)

    @cached_property
    def lines(self) -> tuple[Line, ...]:
        if not self.contents:
            return ()
        return split_lines(self.contents)

    @cached_property
    def _starts(self) -> list[int]:
        return [line.start for line in self.lines]

    @property
    def newline(self) -> str:
        return "\r\n" if "\r\n" in self.contents else "\n"

    def line_for_offset(self, offset: int) -> Line:
        if not self.lines or offset < 0 or offset > len(self.contents):
            raise IndexError(f"offset {offset} outside file")
        return self.lines[bisect_right(self._starts, offset) - 1]

    def line_and_character(self, offset: int) -> tuple[int, int]:
        line = self.line_for_offset(offset)
        return line.number, offset - line.start + 1

    def update(self, contents: str) -> None:
        self.contents = contents
        self.__dict__.pop("lines", None)
        self.__dict__.pop("_starts", None)

    def write(self, contents: str, path: Path | None = None) -> None:
        """Write ``contents`` to ``path`` (default: this file).

        In-memory files without a path are only updated.
        """
        target = path or self.path
        if target is not None:
            with target.open("w", encoding="utf-8", newline="") as fh:
                fh.write(contents)
        if path is None or path == self.path:
            self.update(contents)
