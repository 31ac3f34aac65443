"""Documentation oracle providers."""

from .sourcekitd_provider import SourceKitdProvider, resolve_library_path

__all__ = ["SourceKitdProvider", "resolve_library_path"]
