#!/usr/bin/env python3
import os
import sys
import asyncio
import logging

sys.path.append(os.path.dirname(os.path.realpath(__file__)))

from hbot.constants import LOG_LEVEL
from hbot.config import load_config, require_token
from hbot.errors import SetupError
from hbot.infra.logging import logger
from hbot.bot import create_bot
from hbot import cogs


logging.basicConfig(
    format="[%(asctime)s] [%(filename)s:%(lineno)d] %(message)s", level=LOG_LEVEL
)


async def main():
    config = load_config()
    token = require_token()
    bot = create_bot(config)
    async with bot:
        await cogs.setup(bot, config)
        try:
            await bot.start(token)
        finally:
            await bot.sweeper.stop()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except SetupError as e:
        logger.error(f"Failed to start bot: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass
