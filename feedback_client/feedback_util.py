"""Single entry point for banners, toasts, tooltips, spotlights and help links.

``FeedbackUtil`` owns no state of its own: it wires the presenters to one
toolkit and one URL launcher and forwards every call. The only mutable state
touched anywhere below is the Main screen's current-tooltip slot.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from feedback_client import durations  # type: ignore
from feedback_client.analytics import SuggestedEditsFunnel  # type: ignore
from feedback_client.message_presenter import MessagePresenter, MessageText  # type: ignore
from feedback_client.protection_status import show_protection_status_message  # type: ignore
from feedback_client.resources import StringRes  # type: ignore
from feedback_client.spotlight_presenter import SpotlightPresenter  # type: ignore
from feedback_client.toast_presenter import ToastPresenter  # type: ignore
from feedback_client.toolkit import Balloon, BannerHandle, FeedbackToolkit, SpotlightListener, ToastHandle  # type: ignore
from feedback_client.tooltip_presenter import TooltipPresenter  # type: ignore
from feedback_client.url_launcher import ExternalUrlLauncher  # type: ignore


class FeedbackUtil:
    LENGTH_DEFAULT = durations.LENGTH_DEFAULT
    LENGTH_MEDIUM = durations.LENGTH_MEDIUM
    LENGTH_LONG = durations.LENGTH_LONG

    def __init__(
        self,
        toolkit: FeedbackToolkit,
        *,
        launcher: Optional[ExternalUrlLauncher] = None,
        funnel: Optional[SuggestedEditsFunnel] = None,
    ) -> None:
        self._toolkit = toolkit
        self._launcher = launcher or ExternalUrlLauncher(funnel=funnel)
        self._messages = MessagePresenter(toolkit, self._launcher)
        self._toasts = ToastPresenter(toolkit)
        self._tooltips = TooltipPresenter(toolkit)
        self._spotlights = SpotlightPresenter(toolkit)

    @property
    def toolkit(self) -> FeedbackToolkit:
        return self._toolkit

    @property
    def launcher(self) -> ExternalUrlLauncher:
        return self._launcher

    # Banners -------------------------------------------------------------

    def make_snackbar(self, owner: Any, text: MessageText, duration: int) -> BannerHandle:
        return self._messages.make_banner(owner, text, duration)

    def show_message(self, owner: Any, text: MessageText, duration: Optional[int] = None) -> BannerHandle:
        return self._messages.show_message(owner, text, duration)

    def show_message_with_action(
        self,
        owner: Any,
        text: MessageText,
        action_label: MessageText,
        callback: Callable[[], None],
        duration: int = durations.LENGTH_DEFAULT,
    ) -> BannerHandle:
        return self._messages.show_message_with_action(owner, text, action_label, callback, duration)

    def show_error(self, owner: Any, error: BaseException) -> BannerHandle:
        return self._messages.show_error(owner, error)

    def show_message_as_plain_text(self, owner: Any, possible_html: Any) -> BannerHandle:
        return self._messages.show_message_as_plain_text(owner, possible_html)

    def show_protection_status_message(self, owner: Any, status: Optional[str]) -> None:
        show_protection_status_message(self._messages, owner, status)

    # Toasts --------------------------------------------------------------

    def show_toast_over_view(self, view: Any, text: str, duration: int) -> ToastHandle:
        return self._toasts.show_toast_over_view(view, text, duration)

    def set_button_long_press_toast(self, *views: Any) -> None:
        self._toasts.set_button_long_press_toast(*views)

    # Tooltips and spotlights ----------------------------------------------

    def get_tooltip(self, context: Any, text: Any, above_or_below: bool, auto_dismiss: bool) -> Balloon:
        return self._tooltips.get_tooltip(context, text, above_or_below, auto_dismiss)

    def show_tooltip(self, anchor: Any, text: Any, above_or_below: bool, auto_dismiss: bool) -> Balloon:
        return self._tooltips.show_tooltip(anchor, text, above_or_below, auto_dismiss)

    def show_layout_tooltip(
        self,
        anchor: Any,
        layout: str,
        layout_height: int,
        arrow_anchor_padding: int,
        top_or_bottom_margin: int,
        above_or_below: bool,
        auto_dismiss: bool,
    ) -> Balloon:
        return self._tooltips.show_layout_tooltip(
            anchor,
            layout,
            layout_height,
            arrow_anchor_padding,
            top_or_bottom_margin,
            above_or_below,
            auto_dismiss,
        )

    def show_tap_target_view(
        self,
        owner: Any,
        target: Any,
        title_id: int,
        description_id: int,
        listener: Optional[SpotlightListener] = None,
    ) -> Any:
        return self._spotlights.show_tap_target_view(owner, target, title_id, description_id, listener)

    # External links ------------------------------------------------------

    def show_privacy_policy(self, context: Any) -> None:
        self._launcher.show_privacy_policy(context)

    def show_offline_reading_and_data(self, context: Any) -> None:
        self._launcher.show_offline_reading_and_data(context)

    def show_about_wikipedia(self, context: Any) -> None:
        self._launcher.show_about_wikipedia(context)

    def show_android_app_faq(self, context: Any) -> None:
        self._launcher.show_android_app_faq(context)

    def show_android_app_request_an_account(self, context: Any) -> None:
        self._launcher.show_android_app_request_an_account(context)

    def show_android_app_editing_faq(
        self,
        context: Any,
        url_key: StringRes = StringRes.ANDROID_APP_EDIT_HELP_URL,
    ) -> None:
        self._launcher.show_android_app_editing_faq(context, url_key)

    def show_user_contributions_page(self, context: Any, username: str, language_code: Optional[str]) -> None:
        self._launcher.show_user_contributions_page(context, username, language_code)

    def show_user_profile_page(self, context: Any, username: str, language_code: Optional[str]) -> None:
        self._launcher.show_user_profile_page(context, username, language_code)
