"""QMainWindow-based host screens for the feedback presenters."""
from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtWidgets import QMainWindow, QWidget

from feedback_client.resources import ResourceStore  # type: ignore
from feedback_client.screens import CurrentTooltipSlot, HostScreen, ScreenKind  # type: ignore


class QtHostScreen(QMainWindow, HostScreen):
    kind = ScreenKind.OTHER

    def __init__(self, resources: ResourceStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._resources = resources
        self.setObjectName(f"{self.kind.value}_screen")

    @property
    def resources(self) -> ResourceStore:
        return self._resources

    def find_view(self, view_id: str) -> Optional[QWidget]:
        return self.findChild(QWidget, view_id)

    def root_content_view(self) -> QWidget:
        central = self.centralWidget()
        return central if central is not None else self

    def get_string(self, key: int, *args: Any) -> str:
        return self._resources.get_string(key, *args)


class QtMainScreen(QtHostScreen, CurrentTooltipSlot):
    kind = ScreenKind.MAIN

    def closeEvent(self, event) -> None:  # noqa: N802
        self.dismiss_current_tooltip()
        super().closeEvent(event)


class QtPageScreen(QtHostScreen):
    kind = ScreenKind.PAGE


class QtRandomScreen(QtHostScreen):
    kind = ScreenKind.RANDOM


class QtReadingListScreen(QtHostScreen):
    kind = ScreenKind.READING_LIST


class QtSuggestionsScreen(QtHostScreen):
    kind = ScreenKind.SUGGESTIONS


class QtFragment(QWidget):
    """Sub-screen widget; presenters resolve it to the window hosting it."""

    def require_screen(self) -> QWidget:
        window = self.window()
        if window is self:
            raise RuntimeError("Fragment is not attached to a host screen")
        return window


SCREEN_CLASSES = {
    ScreenKind.MAIN: QtMainScreen,
    ScreenKind.PAGE: QtPageScreen,
    ScreenKind.RANDOM: QtRandomScreen,
    ScreenKind.READING_LIST: QtReadingListScreen,
    ScreenKind.SUGGESTIONS: QtSuggestionsScreen,
    ScreenKind.OTHER: QtHostScreen,
}


def create_screen(kind: ScreenKind, resources: ResourceStore, parent: Optional[QWidget] = None) -> QtHostScreen:
    return SCREEN_CLASSES[kind](resources, parent)
