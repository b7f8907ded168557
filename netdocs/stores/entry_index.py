"""Persistent index of the entries emitted for rendered pages."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional

_INDEX_VERSION = 1


@dataclass(frozen=True)
class Entry:
    """A searchable entry pointing at a rendered page."""

    name: Optional[str]
    path: str
    type: Optional[str]


class EntryIndex:
    """Collects page entries and writes them as ``index.json``."""

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._entries: List[Entry] = []
        self._dirty = False

    @property
    def entries(self) -> List[Entry]:
        return list(self._entries)

    def add(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            self._entries.append(entry)
            self._dirty = True

    def types(self) -> Dict[str, int]:
        """Return the number of named entries per type group."""
        counts = Counter(entry.type for entry in self._entries if entry.name and entry.type)
        return dict(sorted(counts.items()))

    def persist(self) -> None:
        if not self._dirty or self._path is None:
            return
        payload = {
            "version": _INDEX_VERSION,
            "generated_at": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "entries": [asdict(entry) for entry in self._entries],
            "types": [{"name": name, "count": count} for name, count in self.types().items()],
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        self._dirty = False

    def load(self) -> None:
        """Replace in-memory entries with those of a previously persisted index."""
        if self._path is None:
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return
        if not isinstance(data, dict) or data.get("version") != _INDEX_VERSION:
            return
        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            return
        self._entries = [
            entry for entry in (_entry_from_dict(raw) for raw in raw_entries) if entry is not None
        ]
        self._dirty = False


def _entry_from_dict(payload: object) -> Optional[Entry]:
    if not isinstance(payload, dict):
        return None
    path = payload.get("path")
    name = payload.get("name")
    entry_type = payload.get("type")
    if not isinstance(path, str):
        return None
    if name is not None and not isinstance(name, str):
        return None
    if entry_type is not None and not isinstance(entry_type, str):
        return None
    return Entry(name=name, path=path, type=entry_type)


__all__ = ["Entry", "EntryIndex"]
