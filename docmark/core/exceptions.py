"""Exception hierarchy for docmark.

Every exception here is fatal: the CLI reports it as a single line on stderr
and exits with status 1. Recoverable conditions (an oracle query that fails,
a blob that belongs to another file) never raise.
"""

from __future__ import annotations


class DocmarkError(Exception):
    """Base exception for all docmark errors."""

    pass


class BuildOutputError(DocmarkError):
    """Raised when xcodebuild could not be run or its output could not be read."""

    pass


class CompilerArgumentsNotFoundError(BuildOutputError):
    """Raised when the build output contains no Swift compiler invocation."""

    def __init__(self, build_output: str):
        self.build_output = build_output
        super().__init__("No Swift compiler invocation found in xcodebuild output")


class SourceFileError(DocmarkError):
    """Raised when a source file to document cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read source file {path}: {reason}")


class OracleUnavailableError(DocmarkError):
    """Raised when the documentation oracle cannot be loaded or initialized."""

    pass


class CliUsageError(DocmarkError):
    """Raised when one of docmark's own command-line options is malformed."""

    pass
