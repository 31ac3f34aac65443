"""Core models, types, configuration and errors for docmark."""
