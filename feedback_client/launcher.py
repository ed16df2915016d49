from __future__ import annotations

import argparse
import html
import logging
import os
import sys
from typing import Any, Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from feedback_client.anchor_registry import container_view_id  # type: ignore
from feedback_client.client_config import CLIENT_DIR, FeedbackSettings, load_settings, resolve_settings_path  # type: ignore
from feedback_client.feedback_util import FeedbackUtil  # type: ignore
from feedback_client.logging_utils import LOGGER_NAME, configure_client_logging  # type: ignore
from feedback_client.qt_screens import QtHostScreen, create_screen  # type: ignore
from feedback_client.qt_toolkit import QtFeedbackToolkit  # type: ignore
from feedback_client.resources import ResourceStore, StringRes, load_overrides  # type: ignore
from feedback_client.screens import ScreenKind  # type: ignore
from feedback_client.theme import theme_for  # type: ignore
from version import DEV_MODE_ENV_VAR, __version__, is_dev_build  # type: ignore

_CLIENT_LOGGER = logging.getLogger(LOGGER_NAME)

ONBOARDING_CARD_LAYOUT = "view_onboarding_card"
ONBOARDING_CARD_HEIGHT = 96


def build_resources(settings: FeedbackSettings) -> ResourceStore:
    overrides = load_overrides(settings.strings_override) if settings.strings_override else {}
    return ResourceStore(settings.locale, overrides)


def _onboarding_card(resources: ResourceStore) -> Callable[[Any], QWidget]:
    def _build(context: Any) -> QWidget:
        title = html.escape(resources.get_string(StringRes.ONBOARDING_SEARCH_TITLE))
        description = html.escape(resources.get_string(StringRes.ONBOARDING_SEARCH_DESCRIPTION))
        card = QLabel(f"<b>{title}</b><br>{description}")
        card.setTextFormat(Qt.TextFormat.RichText)
        card.setWordWrap(True)
        card.setStyleSheet("color: #ffffff;")
        return card

    return _build


def build_demo_screen(kind: ScreenKind, feedback: FeedbackUtil, resources: ResourceStore) -> QtHostScreen:
    """Window with one button per feedback surface, wired through ``feedback``."""
    feedback.toolkit.register_layout(ONBOARDING_CARD_LAYOUT, _onboarding_card(resources))
    screen = create_screen(kind, resources)
    screen.setWindowTitle(f"Wiki Feedback {__version__}")
    central = QWidget(screen)
    outer = QVBoxLayout(central)
    container = QWidget(central)
    view_id = container_view_id(kind)
    if view_id is not None:
        container.setObjectName(view_id)
    container.setMinimumSize(480, 320)
    outer.addWidget(container, 1)
    row = QHBoxLayout()
    outer.addLayout(row)

    banner_button = QPushButton("Banner", central)
    banner_button.setAccessibleName("Show a sample banner")
    banner_button.clicked.connect(
        lambda: feedback.show_message(screen, "Read the <a href='https://www.wikipedia.org'>encyclopedia</a>")
    )
    retry_button = QPushButton("Action", central)
    retry_button.setAccessibleName("Show a banner with an action")
    retry_button.clicked.connect(
        lambda: feedback.show_message_with_action(
            screen,
            StringRes.OFFLINE_READ_PERMISSION_RATIONALE,
            StringRes.STORAGE_ACCESS_ERROR_RETRY,
            lambda: _CLIENT_LOGGER.info("Retry requested from banner"),
        )
    )
    error_button = QPushButton("Error", central)
    error_button.setAccessibleName("Show a network error")
    error_button.clicked.connect(lambda: feedback.show_error(screen, ConnectionError("offline")))
    tooltip_button = QPushButton("Tooltip", central)
    tooltip_button.setAccessibleName("Show an edit hint")
    tooltip_button.clicked.connect(
        lambda: feedback.show_tooltip(tooltip_button, screen.get_string(StringRes.TOOLTIP_EDIT_HINT), True, False)
    )
    spotlight_button = QPushButton("Spotlight", central)
    spotlight_button.setAccessibleName("Highlight the search button")
    spotlight_button.clicked.connect(
        lambda: feedback.show_tap_target_view(
            screen,
            spotlight_button,
            StringRes.ONBOARDING_SEARCH_TITLE,
            StringRes.ONBOARDING_SEARCH_DESCRIPTION,
        )
    )
    card_button = QPushButton("Card", central)
    card_button.setAccessibleName("Show the onboarding card")
    card_button.clicked.connect(
        lambda: feedback.show_layout_tooltip(
            card_button, ONBOARDING_CARD_LAYOUT, ONBOARDING_CARD_HEIGHT, 16, 8, True, False
        )
    )
    privacy_button = QPushButton("Privacy", central)
    privacy_button.setAccessibleName("Open the privacy policy")
    privacy_button.clicked.connect(lambda: feedback.show_privacy_policy(screen))

    buttons = (
        banner_button,
        retry_button,
        error_button,
        tooltip_button,
        spotlight_button,
        card_button,
        privacy_button,
    )
    for button in buttons:
        row.addWidget(button)
    feedback.set_button_long_press_toast(*buttons)
    screen.setCentralWidget(central)
    return screen


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Wiki Feedback demo client")
    parser.add_argument("--settings", help="Path to feedback_settings.json")
    parser.add_argument(
        "--screen",
        choices=[kind.value for kind in ScreenKind],
        default=ScreenKind.MAIN.value,
        help="Screen kind to host the demo in",
    )
    args = parser.parse_args(argv)

    settings_path = resolve_settings_path(args.settings)
    settings = load_settings(settings_path)
    debug_enabled = settings.debug or is_dev_build()
    configure_client_logging(CLIENT_DIR.parent, retention=settings.log_retention, debug_enabled=debug_enabled)
    if not debug_enabled:
        _CLIENT_LOGGER.debug(
            "Debug logging disabled (release mode). Export %s=1 or set \"debug\": true to enable it.",
            DEV_MODE_ENV_VAR,
        )

    _CLIENT_LOGGER.info("Starting feedback client %s (pid=%s)", __version__, os.getpid())
    _CLIENT_LOGGER.debug(
        "Loaded settings from %s: theme=%s locale=%s retention=%d long_press=%dms",
        settings_path,
        settings.theme,
        settings.locale,
        settings.log_retention,
        settings.long_press_timeout_ms,
    )

    app = QApplication(sys.argv if argv is None else [sys.argv[0], *argv])
    resources = build_resources(settings)
    toolkit = QtFeedbackToolkit(theme_for(settings.theme), long_press_timeout_ms=settings.long_press_timeout_ms)
    feedback = FeedbackUtil(toolkit)
    screen = build_demo_screen(ScreenKind(args.screen), feedback, resources)
    screen.show()

    exit_code = app.exec()
    _CLIENT_LOGGER.info("Feedback client exiting with code %s", exit_code)
    return int(exit_code)


if __name__ == "__main__":
    sys.exit(main())
