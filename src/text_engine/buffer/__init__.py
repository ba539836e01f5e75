"""Editor session and snapshot-based undo history."""

from .session import EditorSession, Transaction
from .state import SessionState, SessionView
from .undo import Snapshot, SnapshotStore

__all__ = [
    "EditorSession",
    "SessionState",
    "SessionView",
    "Snapshot",
    "SnapshotStore",
    "Transaction",
]
