"""Argument parsers for the docmark CLI."""

from .document_parser import create_parser, parse_cli_args

__all__ = ["create_parser", "parse_cli_args"]
