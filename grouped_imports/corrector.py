from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from grouped_imports.grouping import Groups, should_separate
from grouped_imports.source import Line


@dataclass(frozen=True)
class TextEdit:
    start: int
    end: int
    text: str


def section_span(section: Sequence[Line]) -> tuple[int, int]:
    return min(line.start for line in section), max(line.end for line in section)


def render_groups(groups: Groups, minimum_group_size: int, newline: str = "\n") -> str:
    separator = newline * 2 if should_separate(groups, minimum_group_size) else newline
    return separator.join(
        newline.join(line.content for line in group) for group in groups
    )


def section_edit(
    section: Sequence[Line],
    groups: Groups,
    minimum_group_size: int,
    newline: str = "\n",
) -> TextEdit | None:
    if len(groups) <= 1:
        return None
    start, end = section_span(section)
    return TextEdit(start, end, render_groups(groups, minimum_group_size, newline))


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits in one pass.

    Edits are applied from the end of the buffer backwards so earlier
    offsets stay valid.
    """
    ordered = sorted(edits, key=lambda edit: edit.start, reverse=True)
    boundary = len(text)
    for edit in ordered:
        if not 0 <= edit.start <= edit.end <= boundary:
            raise ValueError(f"overlapping or out of range edit at {edit.start}-{edit.end}")
        text = text[: edit.start] + edit.text + text[edit.end :]
        boundary = edit.start
    return text
