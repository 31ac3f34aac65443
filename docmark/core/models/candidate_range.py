"""Candidate range model: a span that may hold a documented declaration."""

from __future__ import annotations

from dataclasses import dataclass

from docmark.core.types.common import CharOffset


@dataclass(frozen=True)
class CandidateRange:
    """Character span following a documentation comment.

    A zero length means there is nothing to probe.
    """

    start: CharOffset
    length: int

    @property
    def end(self) -> CharOffset:
        return CharOffset(self.start + self.length)

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def offsets(self) -> range:
        return range(self.start, self.end)
