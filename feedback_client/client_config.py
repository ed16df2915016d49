"""Configuration helpers for the Wiki Feedback client."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from feedback_client.theme import THEMES, DEFAULT_THEME  # type: ignore

_LOGGER = logging.getLogger("WikiFeedback.Client.config")

CLIENT_DIR = Path(__file__).resolve().parent
ROOT_DIR = CLIENT_DIR.parent
SETTINGS_ENV_VAR = "WIKI_FEEDBACK_SETTINGS"
SETTINGS_FILE_NAME = "feedback_settings.json"

LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20
LONG_PRESS_MIN_MS = 100
LONG_PRESS_MAX_MS = 5000


@dataclass
class FeedbackSettings:
    """Values used to bootstrap the client."""

    theme: str = DEFAULT_THEME
    locale: str = "en"
    log_retention: int = 5
    long_press_timeout_ms: int = 500
    strings_override: Optional[Path] = None
    debug: bool = False


def resolve_settings_path(arg_path: Optional[str]) -> Path:
    if arg_path:
        return Path(arg_path).expanduser().resolve()
    env_override = os.getenv(SETTINGS_ENV_VAR)
    if env_override:
        return Path(env_override).expanduser().resolve()
    return (ROOT_DIR / SETTINGS_FILE_NAME).resolve()


def _clamped_int(value: Any, default: int, minimum: int, maximum: int) -> int:
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return default
    return max(minimum, min(numeric, maximum))


def _coerce_flag(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in {"1", "true", "yes", "on"}:
            return True
        if token in {"0", "false", "no", "off"}:
            return False
        _LOGGER.warning("Unrecognised boolean %r in settings; using %s", value, default)
    return default


def load_settings(settings_path: Path) -> FeedbackSettings:
    """Read feedback_settings.json if it exists; invalid fields fall back individually."""
    defaults = FeedbackSettings()
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        _LOGGER.debug("Settings not found at %s; using defaults", settings_path)
        return defaults

    try:
        data: Dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Failed to parse %s; using default settings (%s)", settings_path, exc)
        return defaults
    if not isinstance(data, dict):
        _LOGGER.warning("Settings at %s are not a JSON object; using defaults", settings_path)
        return defaults

    theme = str(data.get("theme", defaults.theme) or defaults.theme).strip().lower()
    if theme not in THEMES:
        _LOGGER.warning("Ignoring unknown theme '%s'", theme)
        theme = defaults.theme
    locale = str(data.get("locale", defaults.locale) or defaults.locale).strip().lower()
    retention = _clamped_int(
        data.get("log_retention", defaults.log_retention),
        defaults.log_retention,
        LOG_RETENTION_MIN,
        LOG_RETENTION_MAX,
    )
    long_press = _clamped_int(
        data.get("long_press_timeout_ms", defaults.long_press_timeout_ms),
        defaults.long_press_timeout_ms,
        LONG_PRESS_MIN_MS,
        LONG_PRESS_MAX_MS,
    )
    strings_override: Optional[Path] = None
    override_value = data.get("strings_override")
    if isinstance(override_value, str) and override_value.strip():
        candidate = Path(override_value.strip()).expanduser()
        if not candidate.is_absolute():
            candidate = settings_path.parent / candidate
        strings_override = candidate
    debug = _coerce_flag(data.get("debug"), defaults.debug)

    return FeedbackSettings(
        theme=theme,
        locale=locale,
        log_retention=retention,
        long_press_timeout_ms=long_press,
        strings_override=strings_override,
        debug=debug,
    )
