"""API routes package.

This package contains all API route handlers for the application.
"""
from . import board
from . import generate
from . import leveling

__all__ = [
    "board",
    "generate",
    "leveling",
]
