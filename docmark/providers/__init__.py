"""Providers package for docmark - concrete implementations of abstract interfaces.

Use lazy import so the native oracle is only touched when requested.
"""

__all__ = ["SourceKitdProvider"]


def __getattr__(name: str):
    if name == "SourceKitdProvider":
        from .oracle import SourceKitdProvider  # lazy

        return SourceKitdProvider
    raise AttributeError(name)
