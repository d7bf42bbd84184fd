"""Expo push service adapter — implements Notifier."""

from __future__ import annotations

import logging

import httpx

from issue_dispatch.application.ports.notifier_port import DeliveryResult, Notifier, PushMessage
from issue_dispatch.config import settings
from issue_dispatch.domain.value_objects.enums import PushProvider

logger = logging.getLogger(__name__)

EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"


class ExpoNotifier(Notifier):
    """Expo push tickets: HTTP 200 can still carry a per-message error."""

    def __init__(
        self,
        access_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._access_token = access_token if access_token is not None else settings.expo_access_token
        self._timeout = timeout or settings.push_timeout_seconds
        self._transport = transport

    @property
    def provider(self) -> PushProvider:
        return PushProvider.EXPO

    async def send(self, token: str, message: PushMessage) -> DeliveryResult:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        payload = {
            "to": token,
            "title": message.title,
            "body": message.body,
            "data": dict(message.data),
            "sound": "default",
        }

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(EXPO_PUSH_URL, json=payload, headers=headers)
                response.raise_for_status()
                ticket = response.json()["data"]
        except httpx.HTTPError as e:
            logger.warning("Expo push request failed: %s", e)
            return DeliveryResult(self.provider, delivered=False, error=f"transport error: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Malformed Expo push response: %s", e)
            return DeliveryResult(self.provider, delivered=False, error="malformed response")

        if isinstance(ticket, list):
            ticket = ticket[0] if ticket else {}
        if not isinstance(ticket, dict):
            return DeliveryResult(self.provider, delivered=False, error="malformed response")

        if ticket.get("status") == "ok":
            return DeliveryResult(self.provider, delivered=True)

        details = ticket.get("details") or {}
        reason = details.get("error") or ticket.get("message") or "unknown error"
        return DeliveryResult(self.provider, delivered=False, error=reason)
