from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class ReadyEvent:
    user_name: str
    session_id: str


@dataclass(frozen=True)
class MessageEvent:
    author_id: str
    author_name: str
    # true for messages written by a bot account, including this one
    self_authored: bool
    content: str
    # framework message object, only the dispatcher looks inside
    raw: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class OtherEvent:
    name: str


Event = Union[ReadyEvent, MessageEvent, OtherEvent]


class GateOutcome(Enum):
    READY = "ready"
    IGNORED = "ignored"
    WARNED = "warned"
    PROCESSED = "processed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Config:
    trigger: str = "h"
    reply: str = "h"
    reaction: str = "🇭"
    greeting: str = "h"
    warning: str = (
        ":x: You are being rate limited. Please wait a few seconds before sending another message."
    )
    activity: str = "sticks & sham cry"
    command_prefix: str = "~"
    sweep_interval_sec: float = 2.0
    delivery_timeout_sec: float = 10.0
