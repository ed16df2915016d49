from __future__ import annotations

from feedback_client.feedback_util import FeedbackUtil
from feedback_client.resources import StringRes
from feedback_client.spotlight_presenter import SPOTLIGHT_OUTER_ALPHA
from feedback_client.toolkit import SpotlightListener


def test_tap_target_uses_accent_and_resolved_strings(toolkit, main_screen, make_view):
    toolkit.accent = "#36c"
    search = make_view("search", host=main_screen)

    FeedbackUtil(toolkit).show_tap_target_view(
        main_screen,
        search,
        StringRes.ONBOARDING_SEARCH_TITLE,
        StringRes.ONBOARDING_SEARCH_DESCRIPTION,
    )

    screen, target, listener = toolkit.spotlights[0]
    assert screen is main_screen
    assert target.view is search
    assert target.title == "Search Wikipedia"
    assert target.description == "Find articles in any of your languages."
    assert target.target_circle_color == "#36c"
    assert target.outer_circle_color == "#36c"
    assert target.outer_circle_alpha == SPOTLIGHT_OUTER_ALPHA
    assert target.cancelable is True
    assert target.transparent_target is True
    assert type(listener) is SpotlightListener


def test_tap_target_forwards_listener(toolkit, main_screen, make_view, make_fragment):
    class _Listener(SpotlightListener):
        def __init__(self) -> None:
            self.events = []

        def on_target_hit(self, target):
            self.events.append(("hit", target.title))

    listener = _Listener()
    FeedbackUtil(toolkit).show_tap_target_view(
        make_fragment(main_screen),
        make_view("search"),
        StringRes.ONBOARDING_SEARCH_TITLE,
        StringRes.ONBOARDING_SEARCH_DESCRIPTION,
        listener,
    )

    screen, target, forwarded = toolkit.spotlights[0]
    assert screen is main_screen
    assert forwarded is listener
    forwarded.on_target_hit(target)
    forwarded.on_dismissed(target, True)
    assert listener.events == [("hit", "Search Wikipedia")]


def test_default_listener_hooks_are_no_ops():
    listener = SpotlightListener()
    assert listener.on_target_hit(None) is None
    assert listener.on_target_cancelled(None) is None
    assert listener.on_dismissed(None, False) is None
