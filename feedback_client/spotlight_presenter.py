from __future__ import annotations

import logging
from typing import Any, Optional

from feedback_client.screens import resolve_screen  # type: ignore
from feedback_client.theme import ThemeAttr  # type: ignore
from feedback_client.toolkit import FeedbackToolkit, SpotlightListener, SpotlightTarget  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.spotlight_presenter")

SPOTLIGHT_OUTER_ALPHA = 0.9


class SpotlightPresenter:
    """Onboarding overlay that highlights one target view."""

    def __init__(self, toolkit: FeedbackToolkit) -> None:
        self._toolkit = toolkit

    def show_tap_target_view(
        self,
        owner: Any,
        target: Any,
        title_id: int,
        description_id: int,
        listener: Optional[SpotlightListener] = None,
    ) -> Any:
        screen = resolve_screen(owner)
        accent = self._toolkit.themed_color(screen, ThemeAttr.COLOR_ACCENT)
        spotlight = SpotlightTarget(
            view=target,
            title=screen.get_string(title_id),
            description=screen.get_string(description_id),
            target_circle_color=accent,
            outer_circle_color=accent,
            outer_circle_alpha=SPOTLIGHT_OUTER_ALPHA,
            cancelable=True,
            transparent_target=True,
        )
        _LOGGER.debug("Showing spotlight '%s'", spotlight.title)
        return self._toolkit.show_spotlight(screen, spotlight, listener or SpotlightListener())
