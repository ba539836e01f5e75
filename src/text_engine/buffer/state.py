"""Session lifecycle state and the host-facing session view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class SessionState(str, Enum):
    UNOPENED = "unopened"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class SessionView:
    """Read-only picture of an editor session for hosts to render."""

    path: Optional[Path]
    content: Optional[str]
    state: SessionState
    history_depth: int
    dirty: bool

    @property
    def title(self) -> str:
        if self.path is None:
            return "[no file]"
        marker = " *" if self.dirty else ""
        return f"{self.path}{marker}"
