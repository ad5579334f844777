from __future__ import annotations

from typing import Sequence

from grouped_imports.grouping import Groups, should_separate
from grouped_imports.source import Line


def violating_offsets(
    section: Sequence[Line],
    groups: Groups,
    minimum_group_size: int,
    line_count: int,
) -> list[int]:
    """Offsets of the lines whose position disagrees with ``groups``.

    Positions are compared against the layout the corrector would write,
    including the blank line between groups when one is required.
    """
    if len(groups) <= 1:
        return []
    separate = should_separate(groups, minimum_group_size)
    offsets: list[int] = []
    expected = section[0].index
    for group in groups:
        for line in group:
            if line.index != expected and expected < line_count:
                offsets.append(line.first_character_offset)
            expected += 1
        if separate:
            expected += 1
    return offsets
