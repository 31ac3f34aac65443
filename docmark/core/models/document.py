"""Accumulated output document for one documentation run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .section import Section

DOCUMENT_ROOT_TAG = "jazzy"


@dataclass
class DocumentationDocument:
    """Ordered documentation entries for a whole run.

    Entries are either serialized section tags or oracle XML blobs passed
    through verbatim. Blobs are unique across the run by exact text; section
    tags are never deduplicated.
    """

    entries: list[str] = field(default_factory=list)
    _blobs: set[str] = field(default_factory=set, repr=False)

    def add_section(self, section: Section) -> None:
        self.entries.append(section.to_xml())

    def has_blob(self, xml: str) -> bool:
        return xml in self._blobs

    def add_blob(self, xml: str) -> None:
        self._blobs.add(xml)
        self.entries.append(xml)

    def render(self) -> str:
        lines = [f"<{DOCUMENT_ROOT_TAG}>", *self.entries, f"</{DOCUMENT_ROOT_TAG}>"]
        return "\n".join(lines)
