"""Host screen contract consumed by the feedback presenters."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional

_LOGGER = logging.getLogger("WikiFeedback.Client.screens")


class ScreenKind(Enum):
    MAIN = "main"
    PAGE = "page"
    RANDOM = "random"
    READING_LIST = "reading_list"
    SUGGESTIONS = "suggestions"
    OTHER = "other"


class HostScreen:
    """Interface a top-level screen exposes to the presenters.

    Qt screens implement it in ``qt_screens``; tests provide recording stubs.
    Fragments (sub-screens) only need ``require_screen()``.
    """

    kind: ScreenKind = ScreenKind.OTHER

    def find_view(self, view_id: str) -> Optional[Any]: ...
    def root_content_view(self) -> Any: ...
    def get_string(self, key: int, *args: Any) -> str: ...


class CurrentTooltipSlot:
    """Single nullable reference to the last non-auto-dismissing tooltip.

    Only the Main screen carries this slot. Replacing the occupant does not
    dismiss it; call ``dismiss_current_tooltip`` before navigating away.
    """

    _current_tooltip: Optional[Any] = None

    @property
    def current_tooltip(self) -> Optional[Any]:
        return self._current_tooltip

    def set_current_tooltip(self, balloon: Optional[Any]) -> None:
        self._current_tooltip = balloon

    def dismiss_current_tooltip(self) -> None:
        balloon = self._current_tooltip
        self._current_tooltip = None
        if balloon is None:
            return
        _LOGGER.debug("Dismissing current tooltip %r", balloon)
        balloon.dismiss()


def screen_kind(screen: Any) -> ScreenKind:
    kind = getattr(screen, "kind", None)
    if isinstance(kind, ScreenKind):
        return kind
    return ScreenKind.OTHER


def resolve_screen(owner: Any) -> Any:
    """Return the top-level screen for a screen or a fragment hosted in one."""
    require = getattr(owner, "require_screen", None)
    if callable(require):
        return require()
    return owner
