"""Dry-run notifier — logs the message instead of sending it."""

from __future__ import annotations

import logging

from issue_dispatch.application.ports.notifier_port import DeliveryResult, Notifier, PushMessage
from issue_dispatch.domain.value_objects.enums import PushProvider

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    def __init__(self, provider: PushProvider):
        self._provider = provider

    @property
    def provider(self) -> PushProvider:
        return self._provider

    async def send(self, token: str, message: PushMessage) -> DeliveryResult:
        logger.info(
            "[DRY RUN] Would send %s notification %r: %s (data=%s)",
            self._provider.value, message.title, message.body, message.data,
        )
        return DeliveryResult(self._provider, delivered=True)
