from __future__ import annotations

import socket

import pytest

from feedback_client import analytics
from feedback_client.analytics import SCHEMA_NAME, SuggestedEditsFunnel
from feedback_client.errors import get_app_error


@pytest.mark.parametrize(
    "exc, message",
    [
        (TimeoutError("slow"), "The server took too long to respond."),
        (ConnectionRefusedError("nope"), "Cannot connect to Internet."),
        (socket.gaierror("no dns"), "Cannot connect to Internet."),
        (RuntimeError("Page missing"), "Page missing"),
        (RuntimeError(), "An error occurred."),
    ],
)
def test_get_app_error_messages(main_screen, exc, message):
    assert get_app_error(main_screen, exc).error == message


def test_network_error_found_in_cause_chain(main_screen):
    try:
        try:
            raise ConnectionResetError("reset")
        except ConnectionResetError as inner:
            raise RuntimeError("fetch failed") from inner
    except RuntimeError as outer:
        app_error = get_app_error(main_screen, outer)

    assert app_error.error == "Cannot connect to Internet."
    assert app_error.detail == "RuntimeError: fetch failed"


def test_help_opened_payload(funnel, funnel_events):
    funnel.help_opened()
    funnel.help_opened()

    assert funnel.help_opened_count == 2
    assert funnel_events[-1] == {
        "schema": SCHEMA_NAME,
        "revision": analytics.SCHEMA_REVISION,
        "session_token": "test-session",
        "action": "help_opened",
        "ts": 42.0,
        "help_opened_count": 2,
    }


def test_funnel_without_sender_only_counts():
    funnel = SuggestedEditsFunnel()
    funnel.help_opened()
    assert funnel.help_opened_count == 1


def test_shared_funnel_is_a_singleton_until_reset():
    first = analytics.get()
    assert analytics.get() is first
    analytics.reset()
    assert analytics.get() is not first
