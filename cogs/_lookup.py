# cogs/_lookup.py
# ───────────────────────────────────────────────────────────────
#   Shared flow for the stats commands:
#   sanitize → fetch → build report → render → reply
#   Every failure ends in a reply; nothing propagates to discord.py.
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
from typing import Callable, Optional

from discord.ext import commands

from hypixel import HypixelClient, HypixelError, PlayerNotFound, RateLimited
from presenter import (
    MSG_ERROR,
    MSG_NO_PERMS,
    MSG_NO_STATS,
    MSG_NOT_FOUND,
    MSG_RATE_LIMITED,
    MSG_TOO_SHORT,
    MSG_USAGE,
    render,
)
from reports import NoStatsForGame, UsernameTooShort, build_report, sanitize

log = logging.getLogger("cog.lookup")


async def run_lookup(
    ctx: commands.Context,
    api: HypixelClient,
    *,
    command: str,
    kind: str,
    label: str,
    username: Optional[str],
    check: Optional[Callable[[commands.Context], bool]] = None,
) -> None:
    """Answer one `!<command> <username>` invocation."""
    if not username or not username.strip():
        await ctx.reply(MSG_USAGE.format(prefix=ctx.prefix or "!", command=command))
        return

    if check is not None and not check(ctx):
        log.info("[%s] %s lacks the required role", command, ctx.author)
        await ctx.reply(MSG_NO_PERMS)
        return

    try:
        name = sanitize(username)
    except UsernameTooShort as exc:
        log.info("[%s] rejected username %r (%s)", command, username, exc)
        await ctx.reply(MSG_TOO_SHORT)
        return

    # slash invocations must be acknowledged within 3 s; no-op for prefix commands
    await ctx.defer()

    try:
        record = await api.fetch_player(name)
        report = build_report(kind, record)
    except NoStatsForGame as exc:
        log.info("[%s] %s has no %s stats", command, name, exc.game)
        await ctx.reply(MSG_NO_STATS.format(game=exc.game, name=name))
    except PlayerNotFound:
        log.info("[%s] player %s not found", command, name)
        await ctx.reply(MSG_NOT_FOUND.format(name=name))
    except RateLimited as exc:
        log.warning("[%s] %s", command, exc)
        await ctx.reply(MSG_RATE_LIMITED)
    except HypixelError as exc:
        log.warning("[%s] Hypixel error for %s: %s", command, name, exc)
        await ctx.reply(MSG_ERROR.format(game=label))
    except Exception:
        log.exception("Error in %s command for %s", command, name)
        await ctx.reply(MSG_ERROR.format(game=label))
    else:
        await ctx.reply(embed=render(report, name))
