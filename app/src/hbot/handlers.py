"""Error containment around the bot's event and command handlers.

A failure while handling one event is logged with the handler name and then
dropped, so the next event is processed normally.
"""
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from hbot.base import GateOutcome
from hbot.dispatcher import message_to_event
from hbot.gate import EventGate
from hbot.infra.logging import logger, log_event


async def handle_message(gate: EventGate, message: discord.Message, handler: str = "on_message") -> Optional[GateOutcome]:
    try:
        return await gate.handle(message_to_event(message))
    except Exception as e:
        log_event("handler_error", level=logging.ERROR, handler=handler, author_id=getattr(message.author, 'id', None), error=e)
        logger.exception(e)
        return None


async def on_command_error(ctx: commands.Context, error: commands.CommandError) -> None:
    if isinstance(error, commands.CommandNotFound):
        # "~" is ordinary chat too
        return
    name = ctx.command.qualified_name if ctx.command else None
    if isinstance(error, commands.NotOwner):
        log_event("command_refused", command=name, author_id=getattr(ctx.author, 'id', None))
        await ctx.reply("Only the bot owner can use this command.")
        return
    log_event("command_error", level=logging.ERROR, command=name, error=error)
    logger.error(f"Error in command `{name}`: {error!r}", exc_info=error)


async def on_app_command_error(int: discord.Interaction, error: app_commands.AppCommandError) -> None:
    name = int.command.name if int.command else None
    log_event("command_error", level=logging.ERROR, command=name, error=error)
    logger.error(f"Error in command `{name}`: {error!r}", exc_info=error)


async def on_error(event_method: str, *args, **kwargs) -> None:
    log_event("framework_error", level=logging.ERROR, handler=event_method)
    logger.exception(f"Ignoring exception in {event_method}")


__all__ = ["handle_message", "on_command_error", "on_app_command_error", "on_error"]
