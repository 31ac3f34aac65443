"""Shared type aliases."""

from .common import ArgumentList, CharOffset, FilePath, LineNumber

__all__ = ["ArgumentList", "CharOffset", "FilePath", "LineNumber"]
