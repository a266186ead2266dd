import discord
from discord.ext import commands

from hbot import handlers
from hbot.base import Config
from hbot.dispatcher import DiscordDispatcher, ready_event
from hbot.gate import EventGate
from hbot.recency import RecencySet
from hbot.sweeper import Sweeper


def create_bot(config: Config) -> commands.Bot:
    """Build the client and wire the recency set, sweeper and gate into it.

    Commands are added separately with `hbot.cogs.setup` since add_cog is async.
    """
    intents = discord.Intents.default()
    intents.message_content = True  # trigger matching needs message text

    bot = commands.Bot(command_prefix=config.command_prefix, intents=intents, help_command=None)
    bot.recency = RecencySet()
    bot.sweeper = Sweeper(bot.recency, interval=config.sweep_interval_sec)
    bot.gate = EventGate(bot.recency, DiscordDispatcher(bot, timeout=config.delivery_timeout_sec), config)

    @bot.event
    async def on_ready():
        bot.sweeper.start()
        await bot.gate.handle(ready_event(bot))

    @bot.event
    async def on_message(message: discord.Message):
        await handlers.handle_message(bot.gate, message)
        await bot.process_commands(message)

    bot.add_listener(handlers.on_command_error, "on_command_error")
    bot.event(handlers.on_error)
    bot.tree.error(handlers.on_app_command_error)
    return bot


__all__ = ["create_bot"]
