"""Suggested-edits analytics funnel."""
from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Optional

_LOGGER = logging.getLogger("WikiFeedback.Client.analytics")

SCHEMA_NAME = "MobileWikiAppSuggestedEdits"
SCHEMA_REVISION = 20437611


class SuggestedEditsFunnel:
    """Builds funnel events and hands them to ``send_payload_fn``."""

    def __init__(
        self,
        *,
        send_payload_fn: Optional[Callable[[dict], None]] = None,
        session_token: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._send_payload = send_payload_fn
        self._session_token = session_token or uuid.uuid4().hex
        self._clock = clock
        self._help_opened_count = 0

    @property
    def help_opened_count(self) -> int:
        return self._help_opened_count

    def help_opened(self) -> None:
        self._help_opened_count += 1
        self._log_event("help_opened", help_opened_count=self._help_opened_count)

    def _log_event(self, action: str, **fields: object) -> None:
        payload = {
            "schema": SCHEMA_NAME,
            "revision": SCHEMA_REVISION,
            "session_token": self._session_token,
            "action": action,
            "ts": self._clock(),
        }
        payload.update(fields)
        _LOGGER.debug("Funnel event dispatched: action=%s session=%s", action, self._session_token)
        if self._send_payload is not None:
            self._send_payload(payload)


_FUNNEL: Optional[SuggestedEditsFunnel] = None


def get() -> SuggestedEditsFunnel:
    global _FUNNEL
    if _FUNNEL is None:
        _FUNNEL = SuggestedEditsFunnel()
    return _FUNNEL


def reset() -> None:
    global _FUNNEL
    _FUNNEL = None
