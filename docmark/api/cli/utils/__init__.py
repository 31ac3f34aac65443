"""Helpers shared by docmark CLI commands."""
