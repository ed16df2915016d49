"""Hand informational URLs to the platform's default browser."""
from __future__ import annotations

import logging
import webbrowser
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from feedback_client import analytics  # type: ignore
from feedback_client.analytics import SuggestedEditsFunnel  # type: ignore
from feedback_client.resources import StringRes  # type: ignore
from feedback_client.screens import resolve_screen  # type: ignore
from feedback_client.wiki_site import user_contributions_title, user_profile_title  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.url_launcher")

ALLOWED_SCHEMES = frozenset({"http", "https", "mailto"})


class ExternalUrlLauncher:
    """Open URLs externally; wrappers resolve URL resources through the context."""

    def __init__(
        self,
        *,
        opener: Callable[[str], Any] = webbrowser.open_new,
        funnel: Optional[SuggestedEditsFunnel] = None,
    ) -> None:
        self._opener = opener
        self._funnel = funnel

    @property
    def funnel(self) -> SuggestedEditsFunnel:
        return self._funnel if self._funnel is not None else analytics.get()

    def visit_in_external_browser(self, context: Any, url: str) -> None:
        target = (url or "").strip()
        scheme = urlsplit(target).scheme.lower()
        if scheme not in ALLOWED_SCHEMES:
            raise ValueError(f"Refusing to open URL with scheme {scheme!r}: {target!r}")
        _LOGGER.info("Opening %s in external browser", target)
        self._opener(target)

    def _visit_resource(self, context: Any, key: StringRes) -> None:
        url = resolve_screen(context).get_string(key)
        self.visit_in_external_browser(context, url)

    def show_privacy_policy(self, context: Any) -> None:
        self._visit_resource(context, StringRes.PRIVACY_POLICY_URL)

    def show_offline_reading_and_data(self, context: Any) -> None:
        self._visit_resource(context, StringRes.OFFLINE_READING_AND_DATA_URL)

    def show_about_wikipedia(self, context: Any) -> None:
        self._visit_resource(context, StringRes.ABOUT_WIKIPEDIA_URL)

    def show_android_app_faq(self, context: Any) -> None:
        self._visit_resource(context, StringRes.ANDROID_APP_FAQ_URL)

    def show_android_app_request_an_account(self, context: Any) -> None:
        self._visit_resource(context, StringRes.ANDROID_APP_REQUEST_AN_ACCOUNT_URL)

    def show_android_app_editing_faq(
        self,
        context: Any,
        url_key: StringRes = StringRes.ANDROID_APP_EDIT_HELP_URL,
    ) -> None:
        self.funnel.help_opened()
        self._visit_resource(context, url_key)

    def show_user_contributions_page(self, context: Any, username: str, language_code: Optional[str]) -> None:
        title = user_contributions_title(username, language_code)
        self.visit_in_external_browser(context, title.uri)

    def show_user_profile_page(self, context: Any, username: str, language_code: Optional[str]) -> None:
        title = user_profile_title(username, language_code)
        self.visit_in_external_browser(context, title.uri)
