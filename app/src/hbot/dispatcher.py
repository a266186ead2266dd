import asyncio
from typing import Awaitable, TypeVar

import discord

from hbot.base import MessageEvent, ReadyEvent

T = TypeVar("T")


def message_to_event(message: discord.Message) -> MessageEvent:
    return MessageEvent(
        author_id=str(message.author.id),
        author_name=message.author.name,
        self_authored=bool(message.author.bot),
        content=message.content or "",
        raw=message,
    )


def ready_event(client: discord.Client) -> ReadyEvent:
    session_id = getattr(client.ws, "session_id", None) if client.ws else None
    return ReadyEvent(user_name=str(client.user), session_id=str(session_id))


class DiscordDispatcher:
    """Outbound side of the bot, backed by a discord.py client.

    Every call is bounded by `timeout` seconds so one slow delivery can't pin
    the handling task.
    """

    def __init__(self, client: discord.Client, timeout: float = 10.0):
        self.client = client
        self.timeout = timeout

    async def _bounded(self, aw: Awaitable[T]) -> T:
        return await asyncio.wait_for(aw, timeout=self.timeout)

    async def notify(self, event: MessageEvent, text: str) -> None:
        await self._bounded(event.raw.author.send(text))

    async def reply(self, event: MessageEvent, text: str) -> None:
        await self._bounded(event.raw.reply(text))

    async def react(self, event: MessageEvent, emoji: str) -> None:
        await self._bounded(event.raw.add_reaction(emoji))

    async def set_presence(self, text: str) -> None:
        activity = discord.Activity(type=discord.ActivityType.watching, name=text)
        await self._bounded(self.client.change_presence(activity=activity))


__all__ = ["DiscordDispatcher", "message_to_event", "ready_event"]
