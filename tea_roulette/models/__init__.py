"""Data models for tea preferences."""

from .preference import Preference, describe, summarize

__all__ = [
    "Preference",
    "describe",
    "summarize",
]
