from __future__ import annotations

import pytest

from feedback_client import analytics
from feedback_client.analytics import SuggestedEditsFunnel
from feedback_client.feedback_util import FeedbackUtil
from feedback_client.resources import StringRes
from feedback_client.url_launcher import ExternalUrlLauncher


@pytest.fixture
def feedback(toolkit, launcher):
    return FeedbackUtil(toolkit, launcher=launcher)


@pytest.mark.parametrize(
    "method, expected",
    [
        ("show_privacy_policy", "https://foundation.wikimedia.org/wiki/Privacy_policy"),
        (
            "show_offline_reading_and_data",
            "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ#Offline_reading_and_data",
        ),
        ("show_about_wikipedia", "https://en.wikipedia.org/wiki/Wikipedia:About"),
        ("show_android_app_faq", "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ"),
        ("show_android_app_request_an_account", "https://en.wikipedia.org/wiki/Wikipedia:Request_an_account"),
    ],
)
def test_resource_wrappers_launch_once(feedback, main_screen, opened_urls, funnel, method, expected):
    getattr(feedback, method)(main_screen)

    assert opened_urls == [expected]
    assert funnel.help_opened_count == 0


def test_editing_faq_counts_help_before_launching(toolkit, main_screen):
    events = []
    funnel = SuggestedEditsFunnel(send_payload_fn=lambda payload: events.append(("funnel", payload["action"])))
    launcher = ExternalUrlLauncher(opener=lambda url: events.append(("open", url)), funnel=funnel)

    FeedbackUtil(toolkit, launcher=launcher).show_android_app_editing_faq(main_screen)

    assert events == [
        ("funnel", "help_opened"),
        ("open", "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ#Editing"),
    ]
    assert funnel.help_opened_count == 1


def test_editing_faq_accepts_alternate_url_key(feedback, main_screen, opened_urls, funnel_events):
    feedback.show_android_app_editing_faq(main_screen, StringRes.ANDROID_APP_FAQ_URL)

    assert opened_urls == ["https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ"]
    assert [event["action"] for event in funnel_events] == ["help_opened"]


def test_user_contributions_page(feedback, main_screen, opened_urls):
    feedback.show_user_contributions_page(main_screen, "Alice", "en")
    assert opened_urls == ["https://en.wikipedia.org/wiki/Special:Contributions/Alice"]


def test_user_profile_page_uses_localised_namespace(feedback, main_screen, opened_urls):
    feedback.show_user_profile_page(main_screen, "Jane Doe", "de")
    assert opened_urls == ["https://de.wikipedia.org/wiki/Benutzer:Jane_Doe"]


def test_user_pages_default_to_english(feedback, main_screen, opened_urls):
    feedback.show_user_profile_page(main_screen, "Alice", None)
    assert opened_urls == ["https://en.wikipedia.org/wiki/User:Alice"]


def test_wrappers_resolve_urls_through_fragment(feedback, main_screen, make_fragment, opened_urls):
    feedback.show_privacy_policy(make_fragment(main_screen))
    assert opened_urls == ["https://foundation.wikimedia.org/wiki/Privacy_policy"]


@pytest.mark.parametrize("url", ["ftp://example.org/file", "file:///etc/passwd", "", "not a url"])
def test_unsupported_schemes_are_refused(launcher, main_screen, opened_urls, url):
    with pytest.raises(ValueError):
        launcher.visit_in_external_browser(main_screen, url)
    assert opened_urls == []


def test_mailto_is_allowed(launcher, main_screen, opened_urls):
    launcher.visit_in_external_browser(main_screen, " mailto:feedback@example.org ")
    assert opened_urls == ["mailto:feedback@example.org"]


def test_launcher_without_funnel_uses_shared_instance():
    launcher = ExternalUrlLauncher(opener=lambda url: None)
    assert launcher.funnel is analytics.get()
