"""Firebase Cloud Messaging adapter (HTTP v1 API) — implements Notifier."""

from __future__ import annotations

import logging

import httpx

from issue_dispatch.application.ports.notifier_port import DeliveryResult, Notifier, PushMessage
from issue_dispatch.config import settings
from issue_dispatch.domain.value_objects.enums import PushProvider

logger = logging.getLogger(__name__)

FCM_SEND_URL = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"


class FcmNotifier(Notifier):
    """Sends one message per device token through FCM HTTP v1."""

    def __init__(
        self,
        project_id: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._project_id = project_id or settings.fcm_project_id
        self._access_token = access_token or settings.fcm_access_token
        self._timeout = timeout or settings.push_timeout_seconds
        self._transport = transport

    @property
    def provider(self) -> PushProvider:
        return PushProvider.FCM

    def is_configured(self) -> bool:
        return bool(self._project_id and self._access_token)

    async def send(self, token: str, message: PushMessage) -> DeliveryResult:
        if not self.is_configured():
            logger.warning("FCM project id or access token is not set. Skipping send.")
            return DeliveryResult(self.provider, delivered=False, error="fcm not configured")

        payload = {
            "message": {
                "token": token,
                "notification": {"title": message.title, "body": message.body},
                "data": dict(message.data),
            }
        }

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(
                    FCM_SEND_URL.format(project_id=self._project_id),
                    json=payload,
                    headers={"Authorization": f"Bearer {self._access_token}"},
                )
        except httpx.HTTPError as e:
            logger.warning("FCM request failed: %s", e)
            return DeliveryResult(self.provider, delivered=False, error=f"transport error: {e}")

        if response.is_success:
            logger.debug("FCM accepted message: %s", response.text)
            return DeliveryResult(self.provider, delivered=True)

        return DeliveryResult(self.provider, delivered=False, error=self._error_reason(response))

    @staticmethod
    def _error_reason(response: httpx.Response) -> str:
        try:
            error = response.json().get("error") or {}
            status = error.get("status") or response.status_code
            return f"{status}: {error.get('message', '')}".rstrip(": ")
        except (ValueError, AttributeError):
            return f"HTTP {response.status_code}"
