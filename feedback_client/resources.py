"""Pre-translated string and URL resources, looked up by stable integer key."""
from __future__ import annotations

import json
import logging
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

_LOGGER = logging.getLogger("WikiFeedback.Client.resources")

DEFAULT_LOCALE = "en"


class StringRes(IntEnum):
    PRIVACY_POLICY_URL = 1001
    OFFLINE_READING_AND_DATA_URL = 1002
    ABOUT_WIKIPEDIA_URL = 1003
    ANDROID_APP_FAQ_URL = 1004
    ANDROID_APP_REQUEST_AN_ACCOUNT_URL = 1005
    ANDROID_APP_EDIT_HELP_URL = 1006
    PAGE_PROTECTED_SYSOP = 2001
    PAGE_PROTECTED_AUTOCONFIRMED = 2002
    PAGE_PROTECTED_OTHER = 2003
    ERROR_NETWORK = 3001
    ERROR_TIMEOUT = 3002
    ERROR_GENERIC = 3003
    OFFLINE_READ_PERMISSION_RATIONALE = 4001
    STORAGE_ACCESS_ERROR_RETRY = 4002
    ONBOARDING_SEARCH_TITLE = 5001
    ONBOARDING_SEARCH_DESCRIPTION = 5002
    TOOLTIP_EDIT_HINT = 5003


_ENGLISH: Dict[StringRes, str] = {
    StringRes.PRIVACY_POLICY_URL: "https://foundation.wikimedia.org/wiki/Privacy_policy",
    StringRes.OFFLINE_READING_AND_DATA_URL: "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ#Offline_reading_and_data",
    StringRes.ABOUT_WIKIPEDIA_URL: "https://en.wikipedia.org/wiki/Wikipedia:About",
    StringRes.ANDROID_APP_FAQ_URL: "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ",
    StringRes.ANDROID_APP_REQUEST_AN_ACCOUNT_URL: "https://en.wikipedia.org/wiki/Wikipedia:Request_an_account",
    StringRes.ANDROID_APP_EDIT_HELP_URL: "https://www.mediawiki.org/wiki/Wikimedia_Apps/Android_FAQ#Editing",
    StringRes.PAGE_PROTECTED_SYSOP: "This page has been protected. Only administrators can edit it.",
    StringRes.PAGE_PROTECTED_AUTOCONFIRMED: "This page has been semi-protected. Only autoconfirmed users can edit it.",
    StringRes.PAGE_PROTECTED_OTHER: "This page has been protected to the following level: %s",
    StringRes.ERROR_NETWORK: "Cannot connect to Internet.",
    StringRes.ERROR_TIMEOUT: "The server took too long to respond.",
    StringRes.ERROR_GENERIC: "An error occurred.",
    StringRes.OFFLINE_READ_PERMISSION_RATIONALE: "Permission to access storage is required to save pages for offline reading.",
    StringRes.STORAGE_ACCESS_ERROR_RETRY: "Retry",
    StringRes.ONBOARDING_SEARCH_TITLE: "Search Wikipedia",
    StringRes.ONBOARDING_SEARCH_DESCRIPTION: "Find articles in any of your languages.",
    StringRes.TOOLTIP_EDIT_HINT: "Tap here to <b>edit</b> this description.",
}


def load_overrides(path: Path) -> Dict[str, Dict[str, str]]:
    """Load ``{locale: {RESOURCE_NAME: text}}`` overrides, returning {} on errors."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Failed to parse string overrides at %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        return {}
    overrides: Dict[str, Dict[str, str]] = {}
    for locale, table in data.items():
        if not isinstance(table, dict):
            continue
        cleaned = {str(name).strip().upper(): str(text) for name, text in table.items() if isinstance(text, str)}
        overrides[str(locale).strip().lower()] = cleaned
    return overrides


class ResourceStore:
    """Resolve string keys for the active locale, falling back to English."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        overrides: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> None:
        self._locale = (locale or DEFAULT_LOCALE).strip().lower()
        self._overrides: Dict[str, Mapping[str, str]] = dict(overrides or {})

    @property
    def locale(self) -> str:
        return self._locale

    def set_locale(self, locale: str) -> None:
        self._locale = (locale or DEFAULT_LOCALE).strip().lower()

    def _lookup(self, key: StringRes) -> str:
        for locale in (self._locale, DEFAULT_LOCALE):
            table = self._overrides.get(locale)
            if table and key.name in table:
                return table[key.name]
        return _ENGLISH[key]

    def get_string(self, key: int, *args: Any) -> str:
        try:
            resource = StringRes(key)
        except ValueError:
            _LOGGER.error("Unknown string resource %r", key)
            raise KeyError(key) from None
        text = self._lookup(resource)
        if args:
            try:
                return text % args
            except (TypeError, ValueError) as exc:
                _LOGGER.warning("Bad format in %s for locale '%s' (%s); using English", resource.name, self._locale, exc)
                return _ENGLISH[resource] % args
        return text
