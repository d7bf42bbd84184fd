"""Port interface for push-notification transports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from issue_dispatch.domain.value_objects.enums import PushProvider


@dataclass(frozen=True)
class PushMessage:
    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DeliveryResult:
    provider: PushProvider
    delivered: bool
    error: str | None = None


class Notifier(ABC):
    @property
    @abstractmethod
    def provider(self) -> PushProvider:
        """Token scheme this transport understands."""
        ...

    @abstractmethod
    async def send(self, token: str, message: PushMessage) -> DeliveryResult:
        """Deliver *message* to the device identified by *token*.

        Transport failures are reported in the result, never raised.
        """
        ...
