"""Focus state machine over the wizard's three input regions."""

from __future__ import annotations

from enum import IntEnum


class FocusTarget(IntEnum):
    """Input regions, in tab order."""

    PROJECT_NAME = 0
    TEAM_NAME = 1
    COMPONENT_LIST = 2


_TARGET_COUNT = len(FocusTarget)


class FocusController:
    """Tracks which region has focus and cycles it with wraparound."""

    def __init__(self, start: FocusTarget = FocusTarget.PROJECT_NAME) -> None:
        self._index: int = int(start)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> FocusTarget:
        return FocusTarget(self._index)

    def is_focused(self, target: FocusTarget) -> bool:
        return self._index == target

    def advance(self) -> FocusTarget:
        self._index = (self._index + 1) % _TARGET_COUNT
        return self.current

    def retreat(self) -> FocusTarget:
        self._index = (self._index - 1 + _TARGET_COUNT) % _TARGET_COUNT
        return self.current

    def move_to(self, target: FocusTarget) -> FocusTarget:
        """Jump straight to *target*, e.g. after a mouse click."""
        self._index = int(target)
        return self.current
