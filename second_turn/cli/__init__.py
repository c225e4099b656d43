"""
Command-line interface for the Second Turn package.

This module provides CLI commands for:
- BGG search, details, expansions and versions
- Local rank index search
- Running the HTTP API
"""

from .main import main

__all__ = [
    "main",
]
