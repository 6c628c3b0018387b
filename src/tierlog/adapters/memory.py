"""In-memory recording handler.

Keeps handled records in memory instead of rendering them. Suitable for
tests and for inspecting what a logger emitted.
"""

import threading
from collections import deque
from collections.abc import Sequence

from tierlog.core.models import Attr, Record


class RecordingHandler:
    """Handler that stores every record it handles.

    Handlers derived through ``with_attrs``/``with_group`` append to the same
    store; the attrs they carry are merged into the stored record, with
    group names prefixed to keys as ``group.key``.

    Args:
        level: Minimum level reported by ``enabled``; None enables all levels.
        max_size: Keep only the most recent ``max_size`` records.
    """

    def __init__(self, level: int | None = None, max_size: int | None = None) -> None:
        self._level = level
        self._store: deque[Record] = deque(maxlen=max_size)
        self._lock = threading.Lock()
        self._groups: tuple[str, ...] = ()
        self._attrs: tuple[Attr, ...] = ()

    def _derive(self, groups: tuple[str, ...], attrs: tuple[Attr, ...]) -> "RecordingHandler":
        derived = RecordingHandler.__new__(RecordingHandler)
        derived._level = self._level
        derived._store = self._store
        derived._lock = self._lock
        derived._groups = groups
        derived._attrs = attrs
        return derived

    def _qualify(self, attrs: Sequence[Attr]) -> tuple[Attr, ...]:
        if not self._groups:
            return tuple(attrs)
        prefix = ".".join(self._groups) + "."
        return tuple(Attr(prefix + a.key, a.value) for a in attrs)

    @property
    def records(self) -> list[Record]:
        """Records handled so far, oldest first."""
        with self._lock:
            return list(self._store)

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.records]

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def enabled(self, level: int) -> bool:
        return self._level is None or level >= self._level

    def handle(self, record: Record) -> None:
        """Store the record, merged with this handler's attrs."""
        if self._attrs or (self._groups and record.attrs):
            record = record.with_attrs(self._attrs + self._qualify(record.attrs))
        with self._lock:
            self._store.append(record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "RecordingHandler":
        if not attrs:
            return self
        return self._derive(self._groups, self._attrs + self._qualify(attrs))

    def with_group(self, name: str) -> "RecordingHandler":
        if not name:
            return self
        return self._derive(self._groups + (name,), self._attrs)
