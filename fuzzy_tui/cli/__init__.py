"""Command-line interface for Fuzzy TUI."""

from .main import main

__all__ = ["main"]
