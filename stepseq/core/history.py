from __future__ import annotations
from typing import Any, Callable, Optional

from stepseq.utils.logger import logger
from .config import HISTORY_CONFIG
from .types import Arrangement, TrackSequence


class HistoryEntry:
    def __init__(self, description: str, before: Arrangement, after: Arrangement):
        self.description = description
        self.before = before
        self.after = after


class ArrangementHistory:
    """
    Undo/redo over arrangement snapshots.
    Arrangements are immutable values, so undoing only swaps the current reference.
    """
    def __init__(self, initial: TrackSequence = (), max_depth: int = HISTORY_CONFIG.max_depth):
        self.current: Arrangement = tuple(initial)
        self.undo_stack: list[HistoryEntry] = []
        self.redo_stack: list[HistoryEntry] = []
        self.max_depth = max_depth

    def push(self, new_state: TrackSequence, description: str = "Edit") -> Arrangement:
        new_state = tuple(new_state)
        if new_state == self.current:
            logger.debug(f"History push skipped, no change: {description}")
            return self.current

        self.undo_stack.append(HistoryEntry(description, self.current, new_state))
        if len(self.undo_stack) > self.max_depth:
            self.undo_stack.pop(0)
        self.redo_stack.clear()
        self.current = new_state
        logger.debug(f"History action pushed: {description}")
        return self.current

    def apply(
        self,
        op: Callable[..., Arrangement],
        *args: Any,
        description: Optional[str] = None,
    ) -> Arrangement:
        """Run `op(current, *args)` and record the result."""
        return self.push(op(self.current, *args), description or op.__name__)

    def undo(self) -> Optional[Arrangement]:
        if not self.undo_stack:
            logger.debug("Nothing to undo")
            return None

        entry = self.undo_stack.pop()
        self.redo_stack.append(entry)
        self.current = entry.before
        logger.info(f"Undo: {entry.description}")
        return self.current

    def redo(self) -> Optional[Arrangement]:
        if not self.redo_stack:
            logger.debug("Nothing to redo")
            return None

        entry = self.redo_stack.pop()
        self.undo_stack.append(entry)
        self.current = entry.after
        logger.info(f"Redo: {entry.description}")
        return self.current

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    @property
    def undo_description(self) -> Optional[str]:
        return self.undo_stack[-1].description if self.undo_stack else None

    @property
    def redo_description(self) -> Optional[str]:
        return self.redo_stack[-1].description if self.redo_stack else None

    def __len__(self) -> int:
        return len(self.undo_stack)

    def clear(self) -> None:
        """Drop all history; the current arrangement is kept."""
        self.undo_stack.clear()
        self.redo_stack.clear()
        logger.debug("Undo/Redo stacks cleared")
