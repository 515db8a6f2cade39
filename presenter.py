# presenter.py – Report → discord.Embed
# ───────────────────────────────────────────────────────────────
#   Pure embed construction; sending is the cog's job.
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict

import discord

from reports import Number, Report, Section, format_ratio

FOOTER_TEXT = "Powered by Hypixel API"

# ═════════════════════ USER-FACING MESSAGES ═════════════════════
MSG_USAGE        = "Usage: {prefix}{command} <playerName>"
MSG_TOO_SHORT    = "❌ Invalid username provided. Must be at least 3 characters."
MSG_NO_PERMS     = "❌ You do not have permission to use this command."
MSG_NO_STATS     = "❌ No {game} stats found for **{name}**."
MSG_NOT_FOUND    = "❌ Player **{name}** was not found on Hypixel."
MSG_RATE_LIMITED = "⚠️ Rate limit reached. Please try again later."
MSG_ERROR        = "⚠️ Error fetching {game} stats. Check the username or try again later."


@dataclass(frozen=True)
class EmbedStyle:
    title: str                 # formatted with {name}
    description: str
    colour: int
    sep: str                   # joins the stats of one block field
    icons: bool                # emoji before Wins / Losses / W/L
    headline: Dict[str, str]   # stat label → field name; spread rows show only these
    section_names: Dict[str, str]


STYLES: Dict[str, EmbedStyle] = {
    "Bedwars": EmbedStyle(
        title="🔥 **Bedwars Stats for {name}** 🔥",
        description="Here are your Bedwars stats! 🔥🏆",
        colour=0xFF9900,
        sep=" | ",
        icons=True,
        headline={
            "Wins":   "**🏆 Total Wins**",
            "Losses": "**❌ Total Losses**",
            "W/L":    "**⚖️ Total W/L Ratio**",
        },
        section_names={
            "Solo":    "**🎭 Solo**",
            "Doubles": "**👥 Doubles**",
            "Threes":  "**👨‍👩‍👦 Threes**",
            "Fours":   "**🏰 Fours**",
            "4v4":     "**⚔️ 4v4**",
        },
    ),
    "Duels": EmbedStyle(
        title="⚔️ Duels Stats for {name}",
        description="Overall stats and mode-specific Duels performance.",
        colour=0x00AAFF,
        sep="\n",
        icons=False,
        headline={
            "Wins":   "Overall Wins",
            "Losses": "Overall Losses",
            "W/L":    "Overall W/L Ratio",
            "K/D":    "Overall K/D Ratio",
        },
        section_names={
            "UHC":     "UHC Duels",
            "Sumo":    "Sumo Duels",
            "OP":      "OP Duels",
            "Classic": "Classic Duels",
        },
    ),
    "Bridge Duels": EmbedStyle(
        title="Bridge Duels Stats for {name}",
        description="Here are the Bridge Duels stats (Solo & Doubles) from Hypixel.",
        colour=0x00BFFF,
        sep="\n",
        icons=True,
        headline={},
        section_names={
            "Overall":          "🌟 Overall",
            "Solo":             "🎭 Solo",
            "Doubles":          "👥 Doubles",
            "Inventory Layout": "🛠️ Inventory Layout",
        },
    ),
}

# stat label → emoji prefix inside a block field
_STAT_ICONS = {"Wins": "🏆 ", "Losses": "❌ ", "W/L": "⚖️ "}


def _fmt(label: str, value: Number) -> str:
    return format_ratio(value) if label in ("W/L", "K/D") else str(value)


def _block(section: Section, style: EmbedStyle) -> str:
    return style.sep.join(
        f"{_STAT_ICONS.get(label, '') if style.icons else ''}{label}: {_fmt(label, v)}"
        for label, v in section.mode.fields()
    )


def render(report: Report, username: str) -> discord.Embed:
    """Build the reply embed for one report."""
    style = STYLES[report.game]
    e = discord.Embed(
        title=style.title.format(name=username),
        description=style.description,
        colour=style.colour,
        timestamp=datetime.now(timezone.utc),
    )

    for s in report.sections:
        name = style.section_names.get(s.title, s.title)
        if s.value is not None:
            e.add_field(name=name, value=s.value, inline=s.inline)
        elif s.spread:
            for label, v in s.mode.fields():
                if label not in style.headline:
                    continue
                e.add_field(
                    name=style.headline[label],
                    value=_fmt(label, v),
                    inline=True,
                )
        else:
            e.add_field(name=name, value=_block(s, style), inline=s.inline)

    e.set_footer(text=FOOTER_TEXT)
    return e
