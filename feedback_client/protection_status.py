"""Page protection status banners."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from feedback_client.message_presenter import MessagePresenter  # type: ignore
from feedback_client.resources import StringRes  # type: ignore
from feedback_client.screens import resolve_screen  # type: ignore

_STATUS_MESSAGES: Mapping[str, StringRes] = {
    "sysop": StringRes.PAGE_PROTECTED_SYSOP,
    "autoconfirmed": StringRes.PAGE_PROTECTED_AUTOCONFIRMED,
}


def protection_status_message(owner: Any, status: Optional[str]) -> Optional[str]:
    if not status:
        return None
    screen = resolve_screen(owner)
    key = _STATUS_MESSAGES.get(status)
    if key is not None:
        return screen.get_string(key)
    return screen.get_string(StringRes.PAGE_PROTECTED_OTHER, status)


def show_protection_status_message(presenter: MessagePresenter, owner: Any, status: Optional[str]) -> None:
    message = protection_status_message(owner, status)
    if message is None:
        return
    presenter.show_message(owner, message)
