from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Set

from grouped_imports.comment_controls import parse_controls, rule_enabled_ranges
from grouped_imports.config import GroupedImportsConfiguration
from grouped_imports.corrector import TextEdit, apply_edits, section_edit
from grouped_imports.grouping import group_section
from grouped_imports.models import Correction, Location, RuleDescription, StyleViolation
from grouped_imports.sections import Section, import_sections
from grouped_imports.source import SourceFile
from grouped_imports.tokens import find_import_ranges
from grouped_imports.violations import violating_offsets

logger = logging.getLogger(__name__)

DESCRIPTION = RuleDescription(
    identifier="grouped_imports",
    name="Grouped Imports",
    description="Imports should be separated into groups.",
    kind="style",
    non_triggering_examples=(
        "import UIKit\nimport Foundation\n",
        "import Alamofire\nimport GoogleMaps",
        "import labc\nimport Ldef",
        "import UIKit\nimport Foundation\n\nimport GoogleMaps",
        "import UIKit // ui\nimport Foundation\n\nimport GoogleMaps // maps",
        "@testable import AAA\nimport CCC",
        "import UIKit\n@testable import Foundation",
        "// import UIKit\nimport Alamofire\nimport GoogleMaps",
        'let snippet = "import UIKit"\nimport Alamofire',
        "import EEE.A\nimport FFF.B\n#if os(Linux)\nimport DDD.A\nimport EEE.B\n#else\n"
        "import CCC\nimport DDD.B\n#endif\nimport AAA\nimport BBB",
    ),
    triggering_examples=(
        "import UIKit\nimport GoogleMaps\n↓import Foundation",
        "import UIKit\n↓import GoogleMaps\n↓import Foundation\nimport Alamofire",
        "↓@testable import GoogleMaps\n↓import UIKit",
        "↓import GoogleMaps\n↓@testable import UIKit",
        # imports after the last comment form one section, and GoogleMaps
        # alone does not meet the threshold for a blank separator
        "import UIKit\n// comment\nimport Foundation\n\n↓import GoogleMaps",
        "↓import GoogleMaps\n↓import UIKit\n↓import Foundation\n#if DEBUG\n"
        "↓import DebugPanels\n↓import AVFoundation\n#endif",
    ),
    corrections={
        "import UIKit\nimport GoogleMaps\n↓import Foundation":
            "import UIKit\nimport Foundation\n\nimport GoogleMaps",
        "↓@testable import GoogleMaps\n↓import UIKit":
            "import UIKit\n@testable import GoogleMaps",
        "import UIKit\n// comment\nimport Foundation\n\n↓import GoogleMaps":
            "import UIKit\n// comment\nimport Foundation\nimport GoogleMaps",
        "↓import Alamofire\n↓import UIKit // ui\n\nclass Foo {}\n":
            "import UIKit // ui\nimport Alamofire\n\nclass Foo {}\n",
        "↓import GoogleMaps\n↓import UIKit\n↓import Foundation\n#if DEBUG\n"
        "↓import DebugPanels\n↓import AVFoundation\n#endif":
            "import UIKit\nimport Foundation\n\nimport GoogleMaps\n#if DEBUG\n"
            "import AVFoundation\nimport DebugPanels\n#endif",
    },
)


class GroupedImportsRule:
    """Imports should be split into configured module groups."""

    description = DESCRIPTION

    def __init__(self, configuration: GroupedImportsConfiguration | None = None) -> None:
        self.configuration = configuration or GroupedImportsConfiguration()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "GroupedImportsRule":
        return cls(GroupedImportsConfiguration.from_mapping(data))

    @property
    def identifier(self) -> str:
        return self.description.identifier

    def import_sections(
        self,
        file: SourceFile,
        filter_enabled: bool = False,
        controls: Dict[int, Set[str]] | None = None,
    ) -> list[Section]:
        ranges = find_import_ranges(file.contents)
        if filter_enabled:
            ranges = rule_enabled_ranges(file, ranges, self.identifier, controls)
        return import_sections(file, ranges)

    def violating_offsets(self, sections: list[Section], file: SourceFile) -> list[int]:
        offsets: list[int] = []
        size = self.configuration.minimum_group_size
        for section in sections:
            groups = group_section(section, self.configuration)
            offsets.extend(violating_offsets(section, groups, size, len(file.lines)))
        return offsets

    def _location(self, file: SourceFile, offset: int) -> Location:
        line, character = file.line_and_character(offset)
        return Location(str(file.path) if file.path else None, line, character, offset)

    def validate(self, file: SourceFile) -> list[StyleViolation]:
        sections = self.import_sections(file)
        return [
            StyleViolation(
                rule_description=self.description,
                severity=self.configuration.severity,
                location=self._location(file, offset),
            )
            for offset in self.violating_offsets(sections, file)
        ]

    def correct(
        self,
        file: SourceFile,
        controls: Dict[int, Set[str]] | None = None,
        output: Path | None = None,
    ) -> list[Correction]:
        """Rewrite every section that needs reordering in one pass.

        Nothing is written unless at least one import is out of place.
        """
        if controls is None:
            controls = parse_controls([line.content for line in file.lines])
        sections = self.import_sections(file, filter_enabled=True, controls=controls)
        corrections = [
            Correction(self.description, self._location(file, offset))
            for offset in self.violating_offsets(sections, file)
        ]
        if not corrections:
            return []

        size = self.configuration.minimum_group_size
        edits: list[TextEdit] = []
        for section in sections:
            edit = section_edit(
                section, group_section(section, self.configuration), size, file.newline
            )
            if edit is not None:
                edits.append(edit)
        file.write(apply_edits(file.contents, edits), output)
        logger.debug(
            "%s: rewrote %d import sections", file.path or "<memory>", len(edits)
        )
        return corrections
