
"""Notification channels the engine fires for audio/UI collaborators"""
import logging
from typing import Callable, List

logger = logging.getLogger("tetris.events")


class Signal:
    """One channel; listeners run synchronously, in subscription order."""

    def __init__(self, name: str):
        self.name = name
        self._listeners: List[Callable] = []

    def connect(self, fn: Callable) -> Callable:
        self._listeners.append(fn)
        return fn

    def disconnect(self, fn: Callable):
        self._listeners.remove(fn)

    def emit(self, *args):
        logger.debug("emit %s%s", self.name, args)
        for fn in list(self._listeners):
            fn(*args)

    def __len__(self):
        return len(self._listeners)


class GameEvents:
    NAMES = (
        "moved",            # ()
        "rotated",          # ()
        "dropped",          # (rows travelled)
        "held",             # ()
        "lines_cleared",    # (count) for 1-3 rows
        "tetris",           # () for 4 rows
        "level_up",         # (new level)
        "clear_resolved",   # (count) once rows are compacted and scored
        "perfect_clear",    # ()
        "game_over",        # ()
        "paused_changed",   # (paused)
    )

    def __init__(self):
        for n in self.NAMES:
            setattr(self, n, Signal(n))

    def __getitem__(self, name: str) -> Signal:
        if name not in self.NAMES:
            raise KeyError(name)
        return getattr(self, name)
