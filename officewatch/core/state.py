"""
ⒸAngelaMos | 2026
state.py
"""
from __future__ import annotations

import time
from typing import Any

from officewatch.models import StatusSnapshot


class StateStore:
    """
    Holds the current status snapshot
    This is the watcher's memory - lives only as long as the process

    Snapshots are frozen, so a reader holding one never sees a later
    mutation. The engine is the only writer.
    """
    def __init__(self, snapshot: StatusSnapshot | None = None) -> None:
        if snapshot is None:
            snapshot = StatusSnapshot(last_active = int(time.time() * 1000))
        self._current = snapshot

    def get(self) -> StatusSnapshot:
        return self._current

    def replace(self, snapshot: StatusSnapshot) -> StatusSnapshot:
        self._current = snapshot
        return snapshot

    def update(self, **changes: Any) -> StatusSnapshot:
        """
        Swap in a copy of the current snapshot with the given fields changed
        """
        return self.replace(self._current.model_copy(update = changes))
