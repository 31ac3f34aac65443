"""Documentation service - merges MARK sections with oracle documentation.

# FILE_CONTEXT: Drives the scan→probe→merge loop for every file of a run
# ROLE: Interleaves section tags with documentation blobs in source order
# CONCURRENCY: Strictly sequential, one blocking oracle query at a time
# PERFORMANCE: One query per probed offset; a range stops at its first
#   accepted blob
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import accumulate
from pathlib import Path

from loguru import logger
from rich.progress import Progress

from docmark.core.config.oracle_config import OracleConfig
from docmark.core.exceptions import SourceFileError
from docmark.core.models.candidate_range import CandidateRange
from docmark.core.models.document import DocumentationDocument
from docmark.core.models.section import Section
from docmark.core.types.common import ArgumentList
from docmark.interfaces.oracle_provider import OracleProvider
from docmark.parsers.candidate_ranges import find_candidate_ranges
from docmark.parsers.section_parser import find_sections


@dataclass
class DocumentationStats:
    """Counters for one documentation run."""

    files: int = 0
    ranges: int = 0
    empty_ranges: int = 0
    queries: int = 0
    oracle_errors: int = 0
    accepted: int = 0
    duplicates: int = 0
    foreign: int = 0
    sections: int = 0


@dataclass(frozen=True)
class RangeProbe:
    """Outcome of probing one candidate range."""

    entry: str | None
    queries: int


class _SectionCursor:
    """Pending sections of one file; advancing the index dequeues."""

    def __init__(self, sections: Sequence[Section]):
        self._sections = tuple(sections)
        self._index = 0

    def pop_before(self, offset: int) -> Section | None:
        """Dequeue the head section if probing has moved past it."""
        if self._index >= len(self._sections):
            return None
        head = self._sections[self._index]
        if head.character_index < offset:
            self._index += 1
            return head
        return None

    def drain(self) -> tuple[Section, ...]:
        remaining = self._sections[self._index :]
        self._index = len(self._sections)
        return remaining


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char in "_$"


def _offset_translator(text: str, encoding: str | None) -> Callable[[int], int]:
    """Map string indices of `text` to the oracle's offset unit."""
    if encoding is None or text.isascii():
        return lambda offset: offset
    boundaries = [0, *accumulate(len(char.encode(encoding)) for char in text)]
    return boundaries.__getitem__


def read_source(file: str) -> str:
    """Read a source file without newline translation.

    Raises:
        SourceFileError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(file).read_bytes().decode("utf-8")
    except OSError as e:
        raise SourceFileError(file, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceFileError(file, f"not valid UTF-8 ({e.reason})") from e


class DocumentationService:
    """Produces the documentation document for a list of Swift files."""

    def __init__(
        self,
        oracle: OracleProvider,
        config: OracleConfig | None = None,
        progress: Progress | None = None,
        reader: Callable[[str], str] = read_source,
    ):
        """Initialize the documentation service.

        Args:
            oracle: Documentation oracle, initialized lazily on first use
            config: Oracle settings (probe strategy)
            progress: Optional Rich Progress instance, advanced once per file
            reader: Returns the text of a source file
        """
        self._oracle = oracle
        self._config = config or OracleConfig()
        self.progress = progress
        self._reader = reader
        self._oracle_initialized = False
        self.stats = DocumentationStats()

    def document(self, files: Sequence[str], arguments: Sequence[str]) -> str:
        """Document every file in order and return the serialized document.

        Blobs are deduplicated across all files of the run.
        """
        argument_list: ArgumentList = tuple(arguments)
        self._ensure_oracle_initialized()

        document = DocumentationDocument()
        task = None
        if self.progress is not None:
            task = self.progress.add_task("Documenting files", total=len(files))

        for file in files:
            text = self._reader(file)
            self.document_file(file, text, argument_list, document)
            if self.progress is not None and task is not None:
                self.progress.advance(task, 1)

        stats = self.stats
        logger.debug(
            f"Documentation summary: files={stats.files} ranges={stats.ranges} "
            f"empty_ranges={stats.empty_ranges} queries={stats.queries} "
            f"oracle_errors={stats.oracle_errors} accepted={stats.accepted} "
            f"duplicates={stats.duplicates} foreign={stats.foreign} "
            f"sections={stats.sections}"
        )
        return document.render()

    def document_file(
        self,
        file: str,
        text: str,
        arguments: ArgumentList,
        document: DocumentationDocument,
    ) -> None:
        """Append one file's sections and documentation to `document`."""
        self._ensure_oracle_initialized()
        self.stats.files += 1

        cursor = _SectionCursor(find_sections(file, text))
        ranges = find_candidate_ranges(text)
        to_oracle_offset = _offset_translator(text, self._oracle.offset_encoding)
        logger.debug(f"{file}: {len(ranges)} candidate ranges")

        for candidate in ranges:
            self.stats.ranges += 1
            if candidate.is_empty:
                self.stats.empty_ranges += 1
                continue
            probe = self._probe_range(
                file, text, candidate, arguments, cursor, document, to_oracle_offset
            )
            self.stats.queries += probe.queries
            if probe.entry is not None:
                document.add_blob(probe.entry)
                self.stats.accepted += 1

        for section in cursor.drain():
            document.add_section(section)
            self.stats.sections += 1

    def _probe_range(
        self,
        file: str,
        text: str,
        candidate: CandidateRange,
        arguments: ArgumentList,
        cursor: _SectionCursor,
        document: DocumentationDocument,
        to_oracle_offset: Callable[[int], int],
    ) -> RangeProbe:
        """Query the oracle across a range until one blob is accepted.

        Sections the scan position has passed are emitted before the query at
        that position.
        """
        attribution = f' file="{file}"'
        queries = 0
        for offset in self._probe_offsets(text, candidate):
            section = cursor.pop_before(offset)
            if section is not None:
                document.add_section(section)
                self.stats.sections += 1

            response = self._oracle.query(to_oracle_offset(offset), file, arguments)
            queries += 1

            if response.is_error:
                self.stats.oracle_errors += 1
                continue
            xml = response.xml
            if xml is None:
                continue
            if document.has_blob(xml):
                self.stats.duplicates += 1
                continue
            if attribution not in xml:
                self.stats.foreign += 1
                continue
            return RangeProbe(entry=xml, queries=queries)

        return RangeProbe(entry=None, queries=queries)

    def _probe_offsets(self, text: str, candidate: CandidateRange) -> Sequence[int]:
        if self._config.probe_strategy == "character":
            return candidate.offsets()
        return [
            offset
            for offset in candidate.offsets()
            if _is_identifier_char(text[offset])
            and (offset == candidate.start or not _is_identifier_char(text[offset - 1]))
        ]

    def _ensure_oracle_initialized(self) -> None:
        if not self._oracle_initialized:
            self._oracle.initialize()
            self._oracle_initialized = True
