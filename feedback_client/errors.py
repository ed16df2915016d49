"""Map arbitrary exceptions to user-visible messages."""
from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Any

from feedback_client.resources import StringRes  # type: ignore
from feedback_client.screens import resolve_screen  # type: ignore


@dataclass(frozen=True)
class AppError:
    error: str
    detail: str = ""


def _is_network_error(exc: BaseException) -> bool:
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (ConnectionError, socket.gaierror)):
            return True
        current = current.__cause__ or current.__context__
    return False


def get_app_error(context: Any, exc: BaseException) -> AppError:
    """Translate ``exc`` into an AppError; never raises for a resolvable context."""
    screen = resolve_screen(context)
    detail = f"{type(exc).__name__}: {exc}".rstrip(": ")
    if isinstance(exc, TimeoutError):
        return AppError(screen.get_string(StringRes.ERROR_TIMEOUT), detail)
    if _is_network_error(exc):
        return AppError(screen.get_string(StringRes.ERROR_NETWORK), detail)
    message = str(exc).strip()
    if message:
        return AppError(message, detail)
    return AppError(screen.get_string(StringRes.ERROR_GENERIC), detail)
