from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "WikiFeedback.Client"
LOG_DIR_ENV_VAR = "WIKI_FEEDBACK_LOG_DIR"
PROPAGATE_ENV_VAR = "WIKI_FEEDBACK_PROPAGATE_LOGS"
LOG_FILE_NAME = "feedback_client.log"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_logs_dir(base_path: Path, log_dir_name: str = "WikiFeedback") -> Path:
    """
    Resolve the directory to store client logs.

    Strategy:
    - Use WIKI_FEEDBACK_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    The install directory (``base_path``) is never written to.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        try:
            candidates.append(Path(env_override).expanduser())
        except (TypeError, ValueError):
            pass

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.append(state_home / "wiki-feedback" / "logs")
    candidates.append(cache_home / "wiki-feedback" / "logs")
    candidates.append(Path.cwd() / "logs")

    resolved_base = base_path.resolve()
    for base in candidates:
        target = base / log_dir_name
        if resolved_base in target.resolve().parents or target.resolve() == resolved_base:
            continue
        try:
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / "wiki-feedback" / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / filename
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def propagation_requested() -> bool:
    return os.environ.get(PROPAGATE_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "on"}


def configure_client_logging(
    base_path: Path,
    *,
    retention: int,
    debug_enabled: bool,
    log_dir: Optional[Path] = None,
) -> logging.Handler:
    """Attach a rotating file handler to the client logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug_enabled))
    logger.propagate = propagation_requested()
    target_dir = log_dir or resolve_logs_dir(base_path)
    handler = build_rotating_file_handler(
        target_dir,
        LOG_FILE_NAME,
        retention=retention,
        formatter=logging.Formatter(_DEFAULT_FORMAT),
    )
    for existing in list(logger.handlers):
        if isinstance(existing, RotatingFileHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.debug("Client logging configured at %s (retention=%d)", target_dir / LOG_FILE_NAME, retention)
    return handler
