"""Common type definitions for docmark."""

from typing import NewType

# Identifier of a source file exactly as it was passed on the command line.
# The oracle echoes this string back inside file="..." attributes.
FilePath = NewType("FilePath", str)

# Index into a file's text, in Python string units
CharOffset = NewType("CharOffset", int)

# 0-based line number
LineNumber = NewType("LineNumber", int)

# Compiler-equivalent arguments shared by every oracle query of a run
ArgumentList = tuple[str, ...]
