"""Find character ranges that may hold documented declarations.

A documented declaration follows either a `///` comment line or the `*/`
closing a block comment. The line after such a comment is a candidate range.
"""

from __future__ import annotations

import re

from docmark.core.models.candidate_range import CandidateRange
from docmark.core.types.common import CharOffset

_DOC_COMMENT_RE = re.compile(r"(///.*\n|\*/\n)")

# Tab plus the Unicode space separators (Zs); never a line break
_LEADING_WHITESPACE_RE = re.compile(
    "[\t \u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]*"
)


def find_candidate_ranges(text: str) -> list[CandidateRange]:
    """Return candidate ranges left to right, leading whitespace trimmed."""
    ranges: list[CandidateRange] = []
    for match in _DOC_COMMENT_RE.finditer(text):
        start = match.end()
        end = text.find("\n", start)
        if end == -1:
            end = len(text)

        # Always matches, possibly empty
        start = _LEADING_WHITESPACE_RE.match(text, start, end).end()  # type: ignore[union-attr]

        ranges.append(CandidateRange(start=CharOffset(start), length=end - start))
    return ranges
