"""Persistent stores for build outputs."""

from .entry_index import Entry, EntryIndex

__all__ = ["Entry", "EntryIndex"]
