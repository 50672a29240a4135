"""Data models for Fuzzy TUI."""

from .country import Country

__all__ = ["Country"]
