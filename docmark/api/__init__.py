"""User-facing entry points for docmark."""
