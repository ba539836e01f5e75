"""Snapshot storage backing linear undo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class Snapshot:
    content: str


class SnapshotStore:
    """LIFO history of full-content snapshots.

    There is no redo and no peeking: a popped snapshot is gone.
    """

    def __init__(self) -> None:
        self._entries: List[Snapshot] = []

    def push(self, content: str) -> None:
        self._entries.append(Snapshot(content))

    def pop_latest(self) -> Optional[str]:
        """Remove the newest snapshot and return its content.

        ``None`` means the store was empty and the caller must leave its
        content alone.
        """

        if not self._entries:
            return None
        return self._entries.pop().content

    def clear(self) -> None:
        self._entries.clear()

    def can_undo(self) -> bool:
        return bool(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
