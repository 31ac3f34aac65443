"""Data models for docmark."""

from .candidate_range import CandidateRange
from .document import DOCUMENT_ROOT_TAG, DocumentationDocument
from .section import Section

__all__ = [
    "CandidateRange",
    "DOCUMENT_ROOT_TAG",
    "DocumentationDocument",
    "Section",
]
