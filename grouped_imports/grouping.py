from __future__ import annotations

import logging
import re
from typing import Sequence

from grouped_imports.config import GroupedImportsConfiguration, ModuleGroup
from grouped_imports.errors import ImportExtractionError
from grouped_imports.source import Line

logger = logging.getLogger(__name__)

_MODULE_RE = re.compile(r"\bimport\s+(\S+)")

Groups = list[list[Line]]


def module_name(line: Line) -> str:
    """Return the first whitespace-delimited token after ``import``.

    Anchoring on the keyword rather than the line start skips attributes
    such as ``@testable``.
    """
    m = _MODULE_RE.search(line.content)
    if m is None:
        raise ImportExtractionError(
            f"line {line.number} has no import statement: {line.content!r}"
        )
    return m.group(1)


def relevant_groups(
    groups: Sequence[ModuleGroup], modules: set[str]
) -> list[ModuleGroup]:
    return [group for group in groups if not group.modules.isdisjoint(modules)]


def group_section(section: Sequence[Line], config: GroupedImportsConfiguration) -> Groups:
    """Split one section into ordered groups.

    Lines keep their original relative order inside a group. A module is
    claimed by the first configured group that lists it; anything left
    over goes into a trailing catch-all group.
    """
    if len(section) <= 1:
        return [list(section)]

    named = [(line, module_name(line)) for line in section]
    declared = {module for _, module in named}

    result: Groups = []
    claimed: set[str] = set()
    for group in relevant_groups(config.module_groups, declared):
        members = [
            line
            for line, module in named
            if module not in claimed and group.claims(module)
        ]
        claimed |= group.modules & declared
        if members:
            result.append(members)

    rest = [line for line, module in named if module not in claimed]
    if rest:
        result.append(rest)
    logger.debug(
        "section at line %d: %d imports in %d groups",
        section[0].number,
        len(section),
        len(result),
    )
    return result


def should_separate(groups: Groups, minimum_group_size: int) -> bool:
    return any(len(group) >= minimum_group_size for group in groups)
