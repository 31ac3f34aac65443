"""Services orchestrating builds and documentation runs."""

from .build_runner import run_xcodebuild
from .documentation_service import (
    DocumentationService,
    DocumentationStats,
    RangeProbe,
)

__all__ = [
    "DocumentationService",
    "DocumentationStats",
    "RangeProbe",
    "run_xcodebuild",
]
