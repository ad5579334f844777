"""Find import lines and split them into independent sections.

A section ends wherever a non-blank line that is not an import sits
between two imports: comments, ``#if``/``#else``/``#endif`` directives or
any other statement. Blank lines never split a section.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from grouped_imports.source import Line, SourceFile
from grouped_imports.tokens import Span

Section = tuple[Line, ...]


def import_lines(file: SourceFile, ranges: Iterable[Span]) -> list[Line]:
    """Map keyword ranges to their lines, keeping each line once."""
    seen: set[int] = set()
    result: list[Line] = []
    for start, _ in ranges:
        line = file.line_for_offset(start)
        if line.index not in seen:
            seen.add(line.index)
            result.append(line)
    return result


def interrupting_lines(imports: Sequence[Line], lines: Sequence[Line]) -> list[Line]:
    if len(imports) < 2:
        return []
    first, last = imports[0].index, imports[-1].index
    indexes = {line.index for line in imports}
    return [
        line
        for line in lines[first : last + 1]
        if line.index not in indexes and not line.is_blank
    ]


def split_sections(imports: Sequence[Line], lines: Sequence[Line]) -> list[Section]:
    if not imports:
        return []
    interrupts = interrupting_lines(imports, lines)
    if not interrupts:
        return [tuple(imports)]

    def next_interrupt(after: int) -> int | None:
        for line in interrupts:
            if line.index > after:
                return line.index
        return None

    sections: list[Section] = []
    current: list[Line] = []
    cursor = next_interrupt(imports[0].index)
    for line in imports:
        if cursor is None or line.index < cursor:
            current.append(line)
            continue
        if current:
            sections.append(tuple(current))
        cursor = next_interrupt(line.index)
        current = [line]
    if current:
        sections.append(tuple(current))
    return sections


def import_sections(file: SourceFile, ranges: Sequence[Span]) -> list[Section]:
    return split_sections(import_lines(file, ranges), file.lines)
