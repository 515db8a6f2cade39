# cogs/duels.py
# ───────────────────────────────────────────────────────────────
#   !duels <username>  → overall W/L + K/D and UHC / Sumo / OP /
#   Classic breakdowns. Bridge lives in cogs/bridge.py.
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Optional

from discord import app_commands
from discord.ext import commands

from cogs._lookup import run_lookup
from hypixel import HypixelClient


class DuelsCog(commands.Cog):
    def __init__(self, bot: commands.Bot, api: HypixelClient):
        self.bot, self.api = bot, api

    @commands.hybrid_command(name="duels", description="Hypixel Duels stats")
    @app_commands.describe(username="Minecraft username")
    async def duels(self, ctx: commands.Context, username: Optional[str] = None):
        await self.handle_duels(ctx, username)

    async def handle_duels(self, ctx: commands.Context, username: Optional[str]):
        await run_lookup(
            ctx,
            self.api,
            command="duels",
            kind="duels",
            label="Duels",
            username=username,
        )


async def setup(bot: commands.Bot, api: HypixelClient):
    await bot.add_cog(DuelsCog(bot, api))
