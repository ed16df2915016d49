from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from feedback_client.anchor_registry import find_best_view  # type: ignore
from feedback_client.durations import BANNER_LENGTH_LONG, LENGTH_DEFAULT, coerce_duration  # type: ignore
from feedback_client.errors import get_app_error  # type: ignore
from feedback_client.rich_text import RichText, from_html, strip_html  # type: ignore
from feedback_client.screens import resolve_screen  # type: ignore
from feedback_client.theme import ThemeAttr  # type: ignore
from feedback_client.toolkit import BannerHandle, FeedbackToolkit  # type: ignore
from feedback_client.url_launcher import ExternalUrlLauncher  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.message_presenter")

MessageText = Union[str, int, RichText]


class MessagePresenter:
    """Shows transient banners anchored to the best container of a screen."""

    def __init__(self, toolkit: FeedbackToolkit, launcher: ExternalUrlLauncher) -> None:
        self._toolkit = toolkit
        self._launcher = launcher

    def _resolve_text(self, screen: Any, text: MessageText) -> RichText:
        if isinstance(text, RichText):
            return text
        if isinstance(text, int) and not isinstance(text, bool):
            text = screen.get_string(text)
        return from_html(text)

    def make_banner(self, owner: Any, text: MessageText, duration: Optional[int] = None) -> BannerHandle:
        """Build (but do not show) a banner for ``owner``'s screen."""
        screen = resolve_screen(owner)
        rich = self._resolve_text(screen, text)
        length = coerce_duration(duration, BANNER_LENGTH_LONG)
        container = find_best_view(screen)
        banner = self._toolkit.make_banner(container, rich, length)
        banner.set_action_text_color(self._toolkit.themed_color(container, ThemeAttr.COLOR_ACCENT))
        banner.set_link_handler(lambda url: self._open_link(screen, url))
        _LOGGER.debug("Banner built: text='%s' duration=%sms", rich.plain, length)
        return banner

    def _open_link(self, screen: Any, url: str) -> None:
        try:
            self._launcher.visit_in_external_browser(screen, url)
        except ValueError as exc:
            _LOGGER.warning("Ignoring banner link %r: %s", url, exc)

    def show_message(self, owner: Any, text: MessageText, duration: Optional[int] = None) -> BannerHandle:
        banner = self.make_banner(owner, text, duration)
        banner.show()
        return banner

    def show_message_with_action(
        self,
        owner: Any,
        text: MessageText,
        action_label: MessageText,
        callback: Callable[[], None],
        duration: int = LENGTH_DEFAULT,
    ) -> BannerHandle:
        banner = self.make_banner(owner, text, duration)
        screen = resolve_screen(owner)
        label = action_label
        if isinstance(label, int) and not isinstance(label, bool):
            label = screen.get_string(label)
        banner.set_action(str(label), callback)
        banner.show()
        return banner

    def show_error(self, owner: Any, error: BaseException) -> BannerHandle:
        app_error = get_app_error(owner, error)
        _LOGGER.debug("Showing error banner for %s", app_error.detail)
        return self.show_message(owner, app_error.error, LENGTH_DEFAULT)

    def show_message_as_plain_text(self, owner: Any, possible_html: Any) -> BannerHandle:
        plain = strip_html(possible_html)
        return self.show_message(owner, RichText.plain_text(plain))
