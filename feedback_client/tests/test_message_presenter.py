from __future__ import annotations

import pytest

from feedback_client.durations import BANNER_LENGTH_LONG, LENGTH_DEFAULT, LENGTH_LONG
from feedback_client.feedback_util import FeedbackUtil
from feedback_client.resources import StringRes
from feedback_client.rich_text import RichText, TextSpan
from feedback_client.screens import ScreenKind


@pytest.fixture
def feedback(toolkit, launcher):
    return FeedbackUtil(toolkit, launcher=launcher)


def test_show_message_anchors_to_main_coordinator(feedback, toolkit, main_screen):
    banner = feedback.show_message(main_screen, "Hello <b>world</b>", 5000)

    assert toolkit.banners == [banner]
    assert banner.container is main_screen.views["fragment_main_coordinator"]
    assert banner.text.plain == "Hello world"
    assert banner.text.spans == (TextSpan("Hello "), TextSpan("world", bold=True))
    assert banner.duration == 5000
    assert banner.show_calls == 1


def test_unspecified_duration_uses_long_banner_length(feedback, toolkit, main_screen):
    banner = feedback.show_message(main_screen, "Saved")
    assert banner.duration == BANNER_LENGTH_LONG


def test_string_key_is_resolved_through_the_screen(feedback, main_screen):
    banner = feedback.show_message(main_screen, StringRes.ERROR_GENERIC, LENGTH_LONG)
    assert banner.text.plain == "An error occurred."
    assert banner.duration == LENGTH_LONG


def test_rich_text_is_passed_through_untouched(feedback, main_screen):
    rich = RichText((TextSpan("Already parsed", italic=True),))
    banner = feedback.show_message(main_screen, rich, LENGTH_DEFAULT)
    assert banner.text is rich


def test_fragment_owner_resolves_to_its_host_screen(feedback, make_screen, make_fragment):
    screen = make_screen(ScreenKind.READING_LIST, "fragment_reading_list_coordinator")
    banner = feedback.show_message(make_fragment(screen), "Synced", LENGTH_DEFAULT)
    assert banner.container is screen.views["fragment_reading_list_coordinator"]


def test_unknown_screen_anchors_to_root_view(feedback, make_screen):
    screen = make_screen(ScreenKind.OTHER)
    banner = feedback.show_message(screen, "Hi", LENGTH_DEFAULT)
    assert banner.container is screen.root


def test_action_text_uses_accent_colour(feedback, toolkit, main_screen):
    toolkit.accent = "#abcdef"
    banner = feedback.show_message(main_screen, "Hi", LENGTH_DEFAULT)
    assert banner.action_color == "#abcdef"


def test_links_open_in_external_browser(feedback, main_screen, opened_urls):
    banner = feedback.show_message(main_screen, "See <a href='https://example.org/a'>this</a>", LENGTH_DEFAULT)
    assert banner.text.links == ("https://example.org/a",)

    banner.link_handler("https://example.org/a")
    assert opened_urls == ["https://example.org/a"]


def test_link_with_unsupported_scheme_is_logged_and_ignored(feedback, main_screen, opened_urls, caplog):
    banner = feedback.show_message(main_screen, "x", LENGTH_DEFAULT)
    with caplog.at_level("WARNING", logger="WikiFeedback.Client.message_presenter"):
        banner.link_handler("javascript:alert(1)")
        banner.link_handler("/wiki/Help:Editing")
    assert opened_urls == []
    assert caplog.text.count("Ignoring banner link") == 2


def test_make_snackbar_builds_without_showing(feedback, toolkit, main_screen):
    banner = feedback.make_snackbar(main_screen, "Pending", LENGTH_DEFAULT)
    assert toolkit.banners == [banner]
    assert banner.show_calls == 0


def test_message_with_action_resolves_label_and_keeps_callback(feedback, main_screen):
    calls = []
    banner = feedback.show_message_with_action(
        main_screen,
        StringRes.OFFLINE_READ_PERMISSION_RATIONALE,
        StringRes.STORAGE_ACCESS_ERROR_RETRY,
        lambda: calls.append("retry"),
    )

    label, callback = banner.action
    assert label == "Retry"
    assert banner.duration == LENGTH_DEFAULT
    assert banner.show_calls == 1
    callback()
    assert calls == ["retry"]


def test_show_error_translates_network_failures(feedback, main_screen):
    banner = feedback.show_error(main_screen, ConnectionError("refused"))
    assert banner.text.plain == "Cannot connect to Internet."
    assert banner.duration == LENGTH_DEFAULT


def test_show_error_uses_exception_message(feedback, main_screen):
    banner = feedback.show_error(main_screen, RuntimeError("Page not found"))
    assert banner.text.plain == "Page not found"


def test_plain_text_variant_strips_markup(feedback, main_screen):
    styled = feedback.show_message(main_screen, "Hello <b>world</b>", LENGTH_DEFAULT)
    plain = feedback.show_message_as_plain_text(main_screen, "Hello <b>world</b>")

    assert styled.text.is_styled
    assert not plain.text.is_styled
    assert plain.text.spans == (TextSpan("Hello world"),)
    assert plain.duration == BANNER_LENGTH_LONG


def test_plain_text_variant_does_not_reinterpret_escaped_markup(feedback, main_screen):
    banner = feedback.show_message_as_plain_text(main_screen, "1 &lt; 2 &amp;&amp; <i>ok</i>")
    assert banner.text == RichText.plain_text("1 < 2 && ok")
