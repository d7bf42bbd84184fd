"""PushToken value object — a device token tagged with its provider kind."""

from dataclasses import dataclass

from issue_dispatch.domain.value_objects.enums import PushProvider


@dataclass(frozen=True)
class PushToken:
    provider: PushProvider
    value: str

    def __repr__(self) -> str:
        # Tokens are credentials for the device; keep them out of logs.
        return f"PushToken(provider={self.provider.value}, value=***{self.value[-4:]})"
