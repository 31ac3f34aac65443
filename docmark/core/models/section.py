"""Section model: one `// MARK:` marker found in a source file."""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape, quoteattr

from docmark.core.types.common import CharOffset, FilePath, LineNumber

MARK_PREFIX = "// MARK: "
SEPARATOR_CHAR = "-"


@dataclass(frozen=True)
class Section:
    """Structural marker in source code.

    `character_index` is the scan counter value at the marker line, i.e. the
    sum of the lengths of all lines up to and including it (line breaks are
    not counted). The merger emits the section once probing passes it.
    """

    file: FilePath
    name: str
    line: LineNumber
    has_separator: bool
    character_index: CharOffset

    @classmethod
    def from_marker_text(
        cls,
        file: FilePath,
        text: str,
        line: LineNumber,
        character_index: CharOffset,
    ) -> Section:
        """Build a section from the text that follows the MARK prefix.

        A leading dash marks a separator; the dash and the character after it
        are dropped from the name.
        """
        has_separator = text.startswith(SEPARATOR_CHAR)
        name = text
        if has_separator:
            name = text[2:] if len(text) > 2 else ""
        return cls(
            file=file,
            name=name,
            line=line,
            has_separator=has_separator,
            character_index=character_index,
        )

    def to_xml(self) -> str:
        separator = "true" if self.has_separator else "false"
        return (
            f"<Section file={quoteattr(self.file)} line=\"{self.line}\" "
            f"hasSeparator=\"{separator}\">{escape(self.name)}</Section>"
        )
