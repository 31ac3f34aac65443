"""Version information for docmark."""

__version__ = "0.1.0"
