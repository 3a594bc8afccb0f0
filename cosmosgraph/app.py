"""Top-level application state and the start menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MenuAction(Enum):
    """Choices on the start menu; the value is the button label."""

    BIG_BANG = "Big Bang"
    TIME_LOG = "Time Log"
    BLACK_HOLE = "Black Hole"
    NONE = ""


class AppState(Enum):
    START_MENU = "start_menu"
    COSMOS = "cosmos"
    TIME_LOG = "time_log"


@dataclass
class CosmosApp:
    """Moves between the start menu, the canvas and the time log."""

    state: AppState = AppState.START_MENU

    def handle_menu(self, action: MenuAction) -> AppState:
        """React to a start-menu choice; Black Hole quits the program."""
        if self.state is not AppState.START_MENU:
            return self.state
        if action is MenuAction.BIG_BANG:
            self.state = AppState.COSMOS
        elif action is MenuAction.TIME_LOG:
            self.state = AppState.TIME_LOG
        elif action is MenuAction.BLACK_HOLE:
            raise SystemExit(0)
        return self.state

    def back(self) -> AppState:
        """Leave the canvas for the start menu."""
        if self.state is AppState.COSMOS:
            self.state = AppState.START_MENU
        return self.state