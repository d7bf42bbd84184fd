"""Citizen entity — the person who reported an issue."""

from dataclasses import dataclass

from issue_dispatch.domain.value_objects.push_token import PushToken


@dataclass
class Citizen:
    id: str
    name: str | None = None
    email: str | None = None
    push_token: PushToken | None = None
