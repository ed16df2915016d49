from __future__ import annotations

import logging
from typing import Any

from feedback_client.durations import LENGTH_DEFAULT, coerce_duration  # type: ignore
from feedback_client.toolkit import TOOLTIP_CAPTION_LAYOUT, FeedbackToolkit, Gravity, ToastHandle  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.toast_presenter")


class ToastPresenter:
    """Floating captions pinned to a view's screen position."""

    def __init__(self, toolkit: FeedbackToolkit) -> None:
        self._toolkit = toolkit

    def show_toast_over_view(self, view: Any, text: str, duration: int) -> ToastHandle:
        caption_text = "" if text is None else str(text)
        toast = self._toolkit.make_toast(view, caption_text, coerce_duration(duration))
        caption = self._toolkit.inflate(view, TOOLTIP_CAPTION_LAYOUT)
        caption.set_text(caption_text)
        caption.set_max_lines(None)
        toast.set_view(caption)
        x, y = self._toolkit.location_on_screen(view)
        toast.set_gravity(Gravity.TOP | Gravity.START, x, y)
        toast.show()
        _LOGGER.debug("Toast over view at (%s, %s): '%s'", x, y, caption_text)
        return toast

    def _on_long_click(self, view: Any) -> bool:
        self.show_toast_over_view(view, self._toolkit.content_description(view), LENGTH_DEFAULT)
        return True

    def set_button_long_press_toast(self, *views: Any) -> None:
        for view in views:
            self._toolkit.set_on_long_click(view, self._on_long_click)
