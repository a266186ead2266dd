"""Routes each inbound event into one of the bot's response paths.

A message from a subject already in the RecencySet only gets the rate-limit
DM, whatever its content. A message from anyone else gets the reply and
reaction if it matches the trigger, after which the subject is recorded.
"""
import logging
from typing import Protocol

from hbot.base import Config, Event, GateOutcome, MessageEvent, ReadyEvent
from hbot.infra.logging import log_event
from hbot.recency import RecencySet


class Dispatcher(Protocol):
    async def notify(self, event: MessageEvent, text: str) -> None: ...

    async def reply(self, event: MessageEvent, text: str) -> None: ...

    async def react(self, event: MessageEvent, emoji: str) -> None: ...

    async def set_presence(self, text: str) -> None: ...


class EventGate:
    def __init__(self, recency: RecencySet, dispatcher: Dispatcher, config: Config):
        self.recency = recency
        self.dispatcher = dispatcher
        self.config = config

    async def handle(self, event: Event) -> GateOutcome:
        if isinstance(event, MessageEvent):
            return await self.on_message(event)
        if isinstance(event, ReadyEvent):
            return await self.on_ready(event)
        return GateOutcome.IGNORED

    async def on_ready(self, event: ReadyEvent) -> GateOutcome:
        log_event("ready", user=event.user_name, session_id=event.session_id)
        try:
            await self.dispatcher.set_presence(self.config.activity)
        except Exception as e:
            log_event("presence_failed", error=e)
        return GateOutcome.READY

    async def on_message(self, event: MessageEvent) -> GateOutcome:
        if event.self_authored:
            return GateOutcome.IGNORED

        if await self.recency.contains(event.author_id):
            await self._warn(event)
            return GateOutcome.WARNED

        if event.content != self.config.trigger:
            return GateOutcome.SKIPPED

        # reply/react errors propagate; the subject is only recorded on success
        await self.dispatcher.reply(event, self.config.reply)
        await self.dispatcher.react(event, self.config.reaction)
        await self.recency.insert(event.author_id)
        log_event("trigger_processed", author_id=event.author_id)
        return GateOutcome.PROCESSED

    async def _warn(self, event: MessageEvent) -> None:
        log_event("rate_limited", author_id=event.author_id)
        try:
            await self.dispatcher.notify(event, self.config.warning)
        except Exception as e:
            log_event("rate_limit_dm_failed", level=logging.WARNING, author_id=event.author_id, error=e)


__all__ = ["Dispatcher", "EventGate"]
