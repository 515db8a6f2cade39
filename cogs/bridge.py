# cogs/bridge.py
# ───────────────────────────────────────────────────────────────
#   !bridge <username>  → Bridge Duels (Solo & Doubles) + the
#   player's saved hotbar layout. No win streaks.
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Optional

from discord import app_commands
from discord.ext import commands

from cogs._lookup import run_lookup
from hypixel import HypixelClient


class BridgeCog(commands.Cog):
    """Bridge Duels has its own report, separate from !duels."""

    def __init__(self, bot: commands.Bot, api: HypixelClient):
        self.bot, self.api = bot, api

    @commands.hybrid_command(name="bridge", description="Hypixel Bridge Duels stats")
    @app_commands.describe(username="Minecraft username")
    async def bridge(self, ctx: commands.Context, username: Optional[str] = None):
        await self.handle_bridge(ctx, username)

    async def handle_bridge(self, ctx: commands.Context, username: Optional[str]):
        await run_lookup(
            ctx,
            self.api,
            command="bridge",
            kind="bridge",
            label="Bridge",
            username=username,
        )


# ───────────────────────── setup() hook ─────────────────────────
async def setup(bot: commands.Bot, api: HypixelClient):
    await bot.add_cog(BridgeCog(bot, api))
