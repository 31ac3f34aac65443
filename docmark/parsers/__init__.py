"""Text scanners for Swift sources and xcodebuild output."""

from .candidate_ranges import find_candidate_ranges
from .compiler_arguments import extract_compiler_arguments, swift_files_from
from .section_parser import find_sections

__all__ = [
    "extract_compiler_arguments",
    "find_candidate_ranges",
    "find_sections",
    "swift_files_from",
]
