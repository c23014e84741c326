from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class Notifier:
    """Post security alerts to an optional webhook.

    Delivery is best-effort: nothing raised while sending reaches the caller.
    """

    def __init__(self, webhook_url: str, transport: httpx.BaseTransport | None = None) -> None:
        self._url = webhook_url
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self._url)

    @staticmethod
    def _alert(title: str, message: str, level: str) -> dict[str, Any]:
        return {
            "title": title,
            "message": message,
            "level": level,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def send(self, title: str, message: str, level: str = "info") -> bool:
        """Return True once the webhook accepted the alert."""
        if not self.enabled:
            return False
        try:
            with httpx.Client(timeout=10.0, transport=self._transport) as client:
                client.post(self._url, json=self._alert(title, message, level)).raise_for_status()
        except Exception:
            logger.exception("Failed to deliver alert %r to webhook", title)
            return False
        logger.debug("Alert delivered: %s", title)
        return True
