"""docmark: Swift documentation extraction from MARK sections and SourceKit."""

from .version import __version__

__all__ = ["__version__"]
