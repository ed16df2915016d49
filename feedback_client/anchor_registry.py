"""Pick the container view a banner should be anchored to."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from feedback_client.screens import ScreenKind, screen_kind  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.anchor_registry")

CONTAINER_VIEW_IDS: Mapping[ScreenKind, str] = {
    ScreenKind.MAIN: "fragment_main_coordinator",
    ScreenKind.PAGE: "fragment_page_coordinator",
    ScreenKind.RANDOM: "random_coordinator_layout",
    ScreenKind.READING_LIST: "fragment_reading_list_coordinator",
    ScreenKind.SUGGESTIONS: "suggested_edits_cards_coordinator",
}


def container_view_id(kind: ScreenKind) -> Optional[str]:
    return CONTAINER_VIEW_IDS.get(kind)


def find_best_view(screen: Any) -> Any:
    """Return the preferred banner container, or the root content view."""
    kind = screen_kind(screen)
    view_id = container_view_id(kind)
    if view_id is not None:
        view = screen.find_view(view_id)
        if view is not None:
            return view
        _LOGGER.debug("Container '%s' missing on %s screen; using root content view", view_id, kind.value)
    return screen.root_content_view()
