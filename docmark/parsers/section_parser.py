"""Find `// MARK:` sections in Swift source text."""

from __future__ import annotations

from docmark.core.models.section import MARK_PREFIX, Section
from docmark.core.types.common import CharOffset, FilePath, LineNumber


def find_sections(file_id: str, text: str) -> list[Section]:
    """Return every MARK section of a file, in source order.

    Only lines starting with the marker at column 0 count. The offset recorded
    for a section is the running total of line lengths through the end of its
    line, line breaks excluded.
    """
    sections: list[Section] = []
    character_index = 0
    for line_number, line in enumerate(text.split("\n")):
        character_index += len(line)
        if not line.startswith(MARK_PREFIX):
            continue
        sections.append(
            Section.from_marker_text(
                FilePath(file_id),
                line[len(MARK_PREFIX) :],
                LineNumber(line_number),
                CharOffset(character_index),
            )
        )
    return sections
