"""Recover Swift compiler arguments from `xcodebuild -dry-run` output."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from docmark.core.types.common import ArgumentList

DEFAULT_COMPILER_PATH = "/usr/bin/swiftc"
DEFAULT_EXCLUDED_FLAGS = ("-parseable-output",)

_ESCAPED_SPACE = "\\ "
# Never present in build output
_ESCAPED_SPACE_PLACEHOLDER = "\0"


def extract_compiler_arguments(
    build_output: str,
    compiler_path: str = DEFAULT_COMPILER_PATH,
    excluded_flags: Iterable[str] = DEFAULT_EXCLUDED_FLAGS,
) -> ArgumentList | None:
    """Parse the arguments of the first compiler invocation in build output.

    Escaped spaces (`\\ `) stay inside their token and come back as plain
    spaces. The executable itself and any excluded flag are dropped.

    Returns:
        The arguments in their original order, or None when no line invokes
        the compiler.
    """
    match = re.search(re.escape(compiler_path) + ".*", build_output)
    if match is None:
        return None

    tokens = (
        match.group(0)
        .replace(_ESCAPED_SPACE, _ESCAPED_SPACE_PLACEHOLDER)
        .split(" ")
    )
    arguments = [
        token.replace(_ESCAPED_SPACE_PLACEHOLDER, " ") for token in tokens[1:]
    ]
    excluded = set(excluded_flags)
    return tuple(argument for argument in arguments if argument not in excluded)


def swift_files_from(arguments: Sequence[str], suffix: str = ".swift") -> list[str]:
    """Return the arguments that name source files, in order."""
    return [argument for argument in arguments if argument.endswith(suffix)]
