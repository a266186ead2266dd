from datetime import datetime
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from hbot.base import Config
from hbot.infra.logging import log_event


def format_age(name: str, created_at: datetime) -> str:
    return f"{name}'s account was created at {created_at}"


class General(commands.Cog):
    def __init__(self, bot: commands.Bot, config: Config):
        self.bot = bot
        self.config = config

    # ~h and /h
    @commands.hybrid_command(name="h", description="h")
    async def h(self, ctx: commands.Context):
        log_event("h_command", user_id=getattr(ctx.author, 'id', None))
        await ctx.send(self.config.greeting)

    # /age user:
    @app_commands.command(name="age", description="Displays your or another user's account creation date")
    @app_commands.describe(user="Selected user")
    async def age(self, int: discord.Interaction, user: Optional[discord.User] = None):
        u = user or int.user
        log_event("age_command", user_id=getattr(int.user, 'id', None), target_id=u.id)
        await int.response.send_message(format_age(u.name, u.created_at))

    # ~register [guild]
    @commands.command(name="register")
    @commands.is_owner()
    async def register(self, ctx: commands.Context, scope: str = "global") -> int:
        """(Re)register the slash commands, globally or for the current guild."""
        scope = scope.lower()
        tree = self.bot.tree
        if scope == "guild":
            if ctx.guild is None:
                await ctx.reply("`guild` registration only works inside a server.")
                return -1
            tree.copy_global_to(guild=ctx.guild)
            synced = await tree.sync(guild=ctx.guild)
        else:
            scope = "global"
            synced = await tree.sync()
        log_event("commands_registered", scope=scope, count=len(synced))
        await ctx.reply(f"Registered {len(synced)} commands ({scope}).")
        return len(synced)


async def setup(bot: commands.Bot, config: Config) -> None:
    await bot.add_cog(General(bot, config))


__all__ = ["General", "format_age", "setup"]
