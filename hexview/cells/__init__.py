"""
hexview Cells Module

Parsing of user-supplied cell identifiers.
"""

from hexview.cells.resolver import ResolveResult, parse, resolve_token, resolve_tokens

__all__ = [
    "ResolveResult",
    "parse",
    "resolve_token",
    "resolve_tokens",
]
