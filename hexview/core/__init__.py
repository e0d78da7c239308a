"""
hexview Core Module

Shared records and the exception hierarchy.
"""

from hexview.core.exceptions import (
    ConfigurationError,
    GeometryError,
    HexViewError,
    InvalidCellError,
)
from hexview.core.types import GeoBounds, Viewport

__all__ = [
    # Records
    "GeoBounds",
    "Viewport",
    # Exceptions
    "ConfigurationError",
    "GeometryError",
    "HexViewError",
    "InvalidCellError",
]
