# thinktool/runtime/notebook.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

from thinktool.runtime.errors import EmptyState, InvalidInput

ECHO_LIMIT = 50
TRUNCATION_MARKER = "..."


def _now_iso() -> str:
    # local time with offset, e.g. 2025-05-01T10:00:00+02:00
    return datetime.now().astimezone().isoformat(timespec="seconds")


@dataclass(frozen=True)
class Entry:
    content: str
    recorded_at: str

    def render(self, index: int) -> str:
        return f"Thought #{index} at {self.recorded_at}:\n{self.content}\n"


class Notebook:
    """
    In-memory, lock-guarded list of recorded thoughts.
    Lives for the whole process; nothing is written to disk.
    """

    def __init__(self, echo_limit: int = ECHO_LIMIT):
        if echo_limit < 1:
            raise ValueError("echo_limit must be >= 1")
        self.echo_limit = echo_limit
        self._lock = threading.Lock()
        self._entries: List[Entry] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def append(self, content: str) -> str:
        """Record `content` and return a display echo (truncated past echo_limit)."""
        if not isinstance(content, str):
            raise InvalidInput(f"thought must be text, got {type(content).__name__}")
        if not content:
            raise InvalidInput("no thoughts provided")
        echo = self.echo(content)
        with self._lock:
            self._entries.append(Entry(content=content, recorded_at=_now_iso()))
        return echo

    def list_all(self) -> Tuple[Entry, ...]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            if not self._entries:
                raise EmptyState(
                    "no thoughts recorded. Use the think tool to record a thought first."
                )
            return tuple(self._entries)

    def clear_all(self) -> None:
        with self._lock:
            self._entries = []

    def echo(self, content: str) -> str:
        if len(content) > self.echo_limit:
            return content[: self.echo_limit] + TRUNCATION_MARKER
        return content

    @staticmethod
    def render(entries: Tuple[Entry, ...]) -> str:
        return "\n".join(e.render(i) for i, e in enumerate(entries, start=1))
