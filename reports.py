# reports.py – Hypixel stat reports (Bedwars · Duels · Bridge Duels)
# ───────────────────────────────────────────────────────────────
#   • sanitize() / ratio() helpers shared by every command
#   • build_bedwars / build_duels / build_bridge turn a raw player
#     record into an immutable Report; no I/O, no clock
# ───────────────────────────────────────────────────────────────
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

MIN_USERNAME_LEN = 3
LAYOUT_MISSING   = "Not available"

_BAD_CHARS = re.compile(r"[^A-Za-z0-9_]")
_CENT      = Decimal("0.01")

Number = Union[int, float]


# ═══════════════════════ ERRORS ═══════════════════════
class UsernameTooShort(ValueError):
    def __init__(self, cleaned: str) -> None:
        super().__init__(
            f"username {cleaned!r} is shorter than {MIN_USERNAME_LEN} characters"
        )
        self.cleaned = cleaned


class BuildError(Exception):
    pass


class NoStatsForGame(BuildError):
    def __init__(self, game: str) -> None:
        super().__init__(f"player has no {game} stats")
        self.game = game


# ═══════════════════════ HELPERS ═══════════════════════
def sanitize(raw: str) -> str:
    """Drop everything but ASCII letters, digits and `_`; enforce min length."""
    cleaned = _BAD_CHARS.sub("", raw)
    if len(cleaned) < MIN_USERNAME_LEN:
        raise UsernameTooShort(cleaned)
    return cleaned


def ratio(numerator: int, denominator: int) -> Number:
    """
    W/L or K/D ratio.

    A zero denominator returns the numerator as-is (an int); anything
    else is divided and rounded to two decimals, halves away from zero.
    """
    if denominator == 0:
        return numerator
    exact = Decimal(numerator / max(denominator, 1))
    return float(exact.quantize(_CENT, rounding=ROUND_HALF_UP))


def format_ratio(value: Number) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.2f}"


class GameCounters:
    """Read-only view over one game's counters; absent/non-numeric → 0."""

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self._raw = raw

    def get(self, name: str, default: int = 0) -> int:
        value = self._raw.get(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return int(value) if value >= 0 else default

    def text(self, name: str, default: str) -> Any:
        value = self._raw.get(name)
        return value if value else default


# ═══════════════════════ MODEL ═══════════════════════
@dataclass(frozen=True)
class ModeBreakdown:
    name: str
    wins: int
    losses: int
    kills: Optional[int] = None
    deaths: Optional[int] = None

    @property
    def win_loss(self) -> Number:
        return ratio(self.wins, self.losses)

    @property
    def kill_death(self) -> Optional[Number]:
        if self.kills is None or self.deaths is None:
            return None
        return ratio(self.kills, self.deaths)

    @property
    def tracks_kills(self) -> bool:
        return self.kills is not None and self.deaths is not None

    def fields(self) -> list[tuple[str, Number]]:
        out: list[tuple[str, Number]] = [
            ("Wins", self.wins),
            ("Losses", self.losses),
            ("W/L", self.win_loss),
        ]
        if self.tracks_kills:
            out += [
                ("Kills", self.kills),
                ("Deaths", self.deaths),
                ("K/D", self.kill_death),
            ]
        return out


@dataclass(frozen=True)
class Section:
    title: str
    mode: Optional[ModeBreakdown] = None
    value: Optional[str] = None
    inline: bool = False
    spread: bool = False        # headline row → one inline field per stat


@dataclass(frozen=True)
class Report:
    game: str
    sections: Tuple[Section, ...]

    def section(self, title: str) -> Section:
        for s in self.sections:
            if s.title == title:
                return s
        raise KeyError(title)


def _game_counters(record: Mapping[str, Any], game: str) -> GameCounters:
    stats = record.get("stats") or {}
    block = stats.get(game) if isinstance(stats, Mapping) else None
    if not isinstance(block, Mapping):
        raise NoStatsForGame(game)
    return GameCounters(block)


# ═══════════════════════ BEDWARS ═══════════════════════
# mode name → counter prefix  (`<prefix>_wins_bedwars`)
BEDWARS_MODES: Dict[str, str] = {
    "Solo":    "eight_one",
    "Doubles": "eight_two",
    "Threes":  "four_three",
    "Fours":   "four_four",
    "4v4":     "two_four",
}


def build_bedwars(record: Mapping[str, Any]) -> Report:
    c = _game_counters(record, "Bedwars")

    overall = ModeBreakdown(
        "Overall", c.get("wins_bedwars"), c.get("losses_bedwars")
    )
    sections = [Section("Overall", mode=overall, spread=True)]
    for name, prefix in BEDWARS_MODES.items():
        mode = ModeBreakdown(
            name,
            c.get(f"{prefix}_wins_bedwars"),
            c.get(f"{prefix}_losses_bedwars"),
        )
        sections.append(Section(name, mode=mode))
    return Report("Bedwars", tuple(sections))


# ═══════════════════════ DUELS ═══════════════════════
# mode name → (wins, losses, kills, deaths) counter names; Bridge has its own report
DUELS_MODES: Dict[str, Tuple[str, str, str, str]] = {
    "UHC":     ("uhc_wins_duels", "uhc_losses_duels",
                "uhc_kills_duels", "uhc_deaths_duels"),
    "Sumo":    ("sumo_wins_duels", "sumo_losses_duels",
                "sumo_kills_duels", "sumo_deaths_duels"),
    "OP":      ("op_duels_wins", "op_duels_losses",
                "op_duels_kills", "op_duels_deaths"),
    "Classic": ("classic_duels_wins", "classic_duels_losses",
                "classic_duels_kills", "classic_duels_deaths"),
}


def build_duels(record: Mapping[str, Any]) -> Report:
    c = _game_counters(record, "Duels")

    overall = ModeBreakdown(
        "Overall",
        c.get("wins"), c.get("losses"),
        c.get("kills"), c.get("deaths"),
    )
    sections = [Section("Overall", mode=overall, spread=True)]
    for name, (w, l, k, d) in DUELS_MODES.items():
        mode = ModeBreakdown(name, c.get(w), c.get(l), c.get(k), c.get(d))
        sections.append(Section(name, mode=mode))
    return Report("Duels", tuple(sections))


# ═══════════════════════ BRIDGE DUELS ═══════════════════════
def format_layout(layout: Any) -> str:
    """Hypixel sends the hotbar as {slot: item}; older payloads as plain text."""
    if isinstance(layout, Mapping):
        if not layout:
            return LAYOUT_MISSING

        def slot_key(slot: Any) -> tuple:
            s = str(slot)
            return (0, int(s), s) if s.isdigit() else (1, 0, s)

        return "\n".join(
            f"{slot}: {layout[slot]}" for slot in sorted(layout, key=slot_key)
        )
    return str(layout) if layout else LAYOUT_MISSING


def build_bridge(record: Mapping[str, Any]) -> Report:
    c = _game_counters(record, "Duels")

    solo = ModeBreakdown(
        "Solo", c.get("bridge_duel_wins"), c.get("bridge_duel_losses")
    )
    doubles = ModeBreakdown(
        "Doubles", c.get("bridge_doubles_wins"), c.get("bridge_doubles_losses")
    )
    overall = ModeBreakdown(
        "Overall", solo.wins + doubles.wins, solo.losses + doubles.losses
    )
    layout = format_layout(c.text("layout_bridge_duel_layout", LAYOUT_MISSING))

    return Report(
        "Bridge Duels",
        (
            Section("Overall", mode=overall, inline=True),
            Section("Solo", mode=solo, inline=True),
            Section("Doubles", mode=doubles, inline=True),
            Section("Inventory Layout", value=layout),
        ),
    )


# ═══════════════════════ DISPATCH ═══════════════════════
BUILDERS: Dict[str, Callable[[Mapping[str, Any]], Report]] = {
    "bedwars": build_bedwars,
    "duels":   build_duels,
    "bridge":  build_bridge,
}


def build_report(kind: str, record: Mapping[str, Any]) -> Report:
    try:
        builder = BUILDERS[kind.lower()]
    except KeyError:
        raise ValueError(f"unknown report kind {kind!r}") from None
    return builder(record)

