# hypixelbot.py – Hypixel stats Discord bot (core launcher)
# ===========================================================
from __future__ import annotations

import asyncio
import logging
import os
import sys
from importlib import import_module
from types import ModuleType
from typing import Sequence

import discord
from discord.ext import commands
from dotenv import load_dotenv

from hypixel import HypixelClient

# ─────────────────────────── log / env ────────────────────────────
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    stream=sys.stdout,
    force=True,
)

BOT_TOKEN: str | None = os.getenv("BOT_TOKEN")
HYPIXEL_API_KEY: str | None = os.getenv("HYPIXEL_API_KEY")

COMMAND_PREFIX  = os.getenv("COMMAND_PREFIX", "!")
GUILD_ID        = int(os.getenv("GUILD_ID", "0")) or None
HYPIXEL_TIMEOUT = float(os.getenv("HYPIXEL_TIMEOUT", "6.0"))

COGS = (
    "cogs.bedwars",
    "cogs.duels",
    "cogs.bridge",
)


# ─────────────────────────── bot factory ──────────────────────────
def create_bot() -> commands.Bot:
    intents = discord.Intents.default()
    intents.messages = True
    intents.message_content = True  # needed for !prefix commands

    bot_ = commands.Bot(
        command_prefix=COMMAND_PREFIX,
        intents=intents,
        case_insensitive=True,
    )

    @bot_.tree.error
    async def app_command_error(inter: discord.Interaction, err: Exception):
        logging.error("Slash-cmd error: %s – %s", type(err).__name__, err)

    @bot_.event
    async def on_command_error(ctx: commands.Context, err: Exception):
        if isinstance(err, commands.CommandNotFound):
            return
        logging.error("Command error in %s: %s – %s",
                      ctx.command, type(err).__name__, err)

    @bot_.event
    async def on_ready() -> None:
        logging.info("Logged in as %s (%s)", bot_.user, bot_.user.id)

        if GUILD_ID:
            guild = discord.Object(id=GUILD_ID)
            bot_.tree.copy_global_to(guild=guild)
            await bot_.tree.sync(guild=guild)
            logging.info("Slash-commands synced for guild %s", GUILD_ID)
        else:
            await bot_.tree.sync()
            logging.info("Slash-commands synced globally")

    return bot_


# ─────────────────────────── helper: cog loader ───────────────────
async def load_cogs(bot_: commands.Bot, api_: HypixelClient, paths: Sequence[str]) -> None:
    for dotted in paths:
        try:
            module: ModuleType = import_module(dotted)
            if not hasattr(module, "setup"):
                logging.warning("Module %s has no setup() – skipped", dotted)
                continue
            await module.setup(bot_, api_)
            logging.info("Loaded cog %s", dotted)
        except Exception:
            logging.exception("Failed to load cog %s", dotted)


# ─────────────────────────── main runner ──────────────────────────
async def _run_bot() -> None:
    if not BOT_TOKEN or not HYPIXEL_API_KEY:
        raise RuntimeError("Set BOT_TOKEN and HYPIXEL_API_KEY in .env!")

    bot = create_bot()
    async with HypixelClient(HYPIXEL_API_KEY, timeout=HYPIXEL_TIMEOUT) as api:
        await load_cogs(bot, api, COGS)
        async with bot:
            await bot.start(BOT_TOKEN)


# ─────────────────────────── entry-point ──────────────────────────
def main() -> None:
    try:
        asyncio.run(_run_bot())
    except KeyboardInterrupt:
        logging.info("Bot stopped by user")


if __name__ == "__main__":
    main()
