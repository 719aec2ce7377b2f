"""
HistoryManager - Manages the snapshot history behind undo/redo.

Maintains an ordered sequence of diagram snapshots and a cursor pointing at
the current one, with a configurable capacity limit.
"""

import logging
from typing import Optional

from models.snapshot import HistorySnapshot
from settings.constants import HISTORY_CAPACITY

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Snapshot sequence with a cursor.

    Entry 0 is the initial state. Recording after an undo discards every
    entry past the cursor. When the sequence exceeds its capacity the oldest
    entries are evicted and the cursor shifts with them, so it always points
    at the snapshot just recorded.

    Stored snapshots never leave the manager: ``current``, ``undo`` and
    ``redo`` hand out copies.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY, initial: Optional[HistorySnapshot] = None):
        """
        Initialize the history manager.

        Args:
            capacity: Maximum number of snapshots to keep (default 50, minimum 1)
            initial: Snapshot for entry 0 (default: the empty diagram)
        """
        self.capacity = max(1, capacity)
        self._snapshots: list[HistorySnapshot] = [initial or HistorySnapshot()]
        self._index = 0

    @property
    def index(self) -> int:
        """Position of the current snapshot."""
        return self._index

    @property
    def current(self) -> HistorySnapshot:
        return self._snapshots[self._index].copy()

    def record(self, snapshot: HistorySnapshot) -> None:
        """
        Append a snapshot after the cursor and make it current.

        Any redo history past the cursor is discarded first.
        """
        del self._snapshots[self._index + 1:]
        self._snapshots.append(snapshot)

        overflow = len(self._snapshots) - self.capacity
        if overflow > 0:
            del self._snapshots[:overflow]
            logger.debug("History full, evicted %d oldest snapshot(s)", overflow)

        self._index = len(self._snapshots) - 1

    def undo(self) -> Optional[HistorySnapshot]:
        """
        Step the cursor back.

        Returns:
            The snapshot to restore, or None if already at the oldest entry
        """
        if self._index == 0:
            return None
        self._index -= 1
        return self._snapshots[self._index].copy()

    def redo(self) -> Optional[HistorySnapshot]:
        """
        Step the cursor forward.

        Returns:
            The snapshot to restore, or None if already at the newest entry
        """
        if self._index >= len(self._snapshots) - 1:
            return None
        self._index += 1
        return self._snapshots[self._index].copy()

    def can_undo(self) -> bool:
        """Return whether there is an older snapshot to step back to."""
        return self._index > 0

    def can_redo(self) -> bool:
        """Return whether there is a newer snapshot to step forward to."""
        return self._index < len(self._snapshots) - 1

    def reset(self, initial: Optional[HistorySnapshot] = None) -> None:
        """Drop all history, keeping a single initial snapshot at index 0."""
        self._snapshots = [initial or HistorySnapshot()]
        self._index = 0

    def get_undo_count(self) -> int:
        """Return the number of undo steps available."""
        return self._index

    def get_redo_count(self) -> int:
        """Return the number of redo steps available."""
        return len(self._snapshots) - 1 - self._index

    def __len__(self) -> int:
        return len(self._snapshots)
