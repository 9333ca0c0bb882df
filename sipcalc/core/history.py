"""Bounded history of past projections, optionally persisted as JSON."""

from __future__ import annotations

import json
import logging
import os
import threading
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Deque, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from sipcalc.schemas.history import HistoryEntry
from sipcalc.schemas.sip import ProjectionResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

_entries_adapter = TypeAdapter(List[HistoryEntry])


def make_entry(result: ProjectionResult, when: Optional[datetime] = None) -> HistoryEntry:
    when = when or datetime.now(timezone.utc)
    return HistoryEntry(
        date=when.isoformat(timespec="seconds"),
        totalInvested=result.totalInvested,
        totalValue=result.totalValue,
        result=f"Inv: {result.totalInvested} | Val: {result.totalValue}",
    )


class HistoryStore:
    """Ring buffer of the most recent projections, newest first.

    With a ``path`` the buffer is loaded on construction and rewritten as a
    JSON list after every change.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, limit: int = DEFAULT_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.path = Path(path) if path else None
        self.limit = limit
        self._lock = threading.Lock()
        self._entries: Deque[HistoryEntry] = deque(self._load(), maxlen=limit)

    def _load(self) -> List[HistoryEntry]:
        if self.path is None or not self.path.exists():
            return []
        try:
            raw_text = self.path.read_text(encoding="utf-8").strip()
            if not raw_text:
                return []
            entries = _entries_adapter.validate_python(json.loads(raw_text))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValidationError) as exc:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, exc)
            return []
        logger.debug("Loaded %d history entries from %s", len(entries), self.path)
        return entries[: self.limit]

    def _persist(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        payload = [entry.model_dump() for entry in self._entries]
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        os.replace(tmp_path, self.path)
        logger.debug("Persisted %d history entries to %s", len(payload), self.path)

    def record(self, result: ProjectionResult, when: Optional[datetime] = None) -> HistoryEntry:
        entry = make_entry(result, when)
        with self._lock:
            # maxlen drops the oldest entry from the right
            self._entries.appendleft(entry)
            self._persist()
        return entry

    def entries(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._persist()

    def __len__(self) -> int:
        return len(self._entries)
