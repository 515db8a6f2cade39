# cogs/bedwars.py
# ───────────────────────────────────────────────────────────────
#   !bedwars <username>  → Hypixel Bedwars wins / losses per mode
#   Gated on a role (default "perms", env BEDWARS_ROLE).
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
import os
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from cogs._lookup import run_lookup
from hypixel import HypixelClient

log = logging.getLogger("cog.bedwars")

# ═══════════════════ CONFIG ═══════════════════════════════════
PERMS_ROLE = os.getenv("BEDWARS_ROLE", "perms")
# ══════════════════════════════════════════════════════════════


def has_perms_role(member) -> bool:
    """DM authors are plain Users without roles → never allowed."""
    roles = getattr(member, "roles", None) or []
    return discord.utils.get(roles, name=PERMS_ROLE) is not None


class BedwarsCog(commands.Cog):
    """Bedwars overall + Solo / Doubles / Threes / Fours / 4v4."""

    def __init__(self, bot: commands.Bot, api: HypixelClient):
        self.bot, self.api = bot, api

    @commands.hybrid_command(name="bedwars", description="Hypixel Bedwars stats")
    @app_commands.describe(username="Minecraft username")
    async def bedwars(self, ctx: commands.Context, username: Optional[str] = None):
        await self.handle_bedwars(ctx, username)

    async def handle_bedwars(self, ctx: commands.Context, username: Optional[str]):
        await run_lookup(
            ctx,
            self.api,
            command="bedwars",
            kind="bedwars",
            label="Bedwars",
            username=username,
            check=lambda c: has_perms_role(c.author),
        )


# ───────────────────────── setup() hook ─────────────────────────
async def setup(bot: commands.Bot, api: HypixelClient):
    await bot.add_cog(BedwarsCog(bot, api))
    log.debug("BedwarsCog added (role gate: %s)", PERMS_ROLE)
