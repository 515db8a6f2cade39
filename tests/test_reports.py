import unittest

from reports import (
    LAYOUT_MISSING,
    GameCounters,
    NoStatsForGame,
    UsernameTooShort,
    build_bedwars,
    build_bridge,
    build_duels,
    build_report,
    format_layout,
    format_ratio,
    ratio,
    sanitize,
)


def make_record(game: str, **counters) -> dict:
    return {"displayname": "Steve", "stats": {game: counters}}


class SanitizeTests(unittest.TestCase):
    def test_strips_disallowed_characters(self):
        self.assertEqual(sanitize("ab!!c"), "abc")
        self.assertEqual(sanitize(" Steve_99 "), "Steve_99")

    def test_only_symbols_is_too_short(self):
        with self.assertRaises(UsernameTooShort) as cm:
            sanitize("!@#$%^&*() -")
        self.assertEqual(cm.exception.cleaned, "")

    def test_two_characters_rejected(self):
        with self.assertRaises(UsernameTooShort):
            sanitize("a-b")

    def test_non_ascii_letters_removed(self):
        with self.assertRaises(UsernameTooShort):
            sanitize("éü")
        self.assertEqual(sanitize("Jöhn"), "Jhn")


class RatioTests(unittest.TestCase):
    def test_zero_denominator_returns_numerator(self):
        self.assertEqual(ratio(0, 0), 0)
        self.assertEqual(ratio(5, 0), 5)
        self.assertIsInstance(ratio(5, 0), int)

    def test_rounds_to_two_decimals(self):
        self.assertEqual(ratio(10, 4), 2.5)
        self.assertEqual(ratio(1, 3), 0.33)
        self.assertEqual(ratio(2, 3), 0.67)

    def test_format(self):
        self.assertEqual(format_ratio(ratio(10, 4)), "2.50")
        self.assertEqual(format_ratio(ratio(3, 1)), "3.00")
        self.assertEqual(format_ratio(ratio(0, 0)), "0")
        self.assertEqual(format_ratio(ratio(7, 0)), "7")

    def test_halves_round_up(self):
        self.assertEqual(format_ratio(ratio(1, 8)), "0.13")
        self.assertEqual(format_ratio(ratio(5, 8)), "0.63")
        self.assertEqual(format_ratio(ratio(9, 8)), "1.13")
        self.assertEqual(ratio(3, 8), 0.38)


class GameCountersTests(unittest.TestCase):
    def test_missing_and_bad_values_default_to_zero(self):
        c = GameCounters({"a": 4, "b": "12", "c": None, "d": True, "e": -3, "f": 2.0})
        self.assertEqual(c.get("a"), 4)
        self.assertEqual(c.get("b"), 0)
        self.assertEqual(c.get("c"), 0)
        self.assertEqual(c.get("d"), 0)
        self.assertEqual(c.get("e"), 0)
        self.assertEqual(c.get("f"), 2)
        self.assertEqual(c.get("missing"), 0)


class BedwarsBuilderTests(unittest.TestCase):
    def setUp(self):
        self.record = make_record(
            "Bedwars",
            wins_bedwars=10,
            losses_bedwars=4,
            eight_one_wins_bedwars=3,
            eight_one_losses_bedwars=1,
        )

    def test_overall_and_solo(self):
        report = build_bedwars(self.record)

        overall = report.section("Overall").mode
        self.assertEqual((overall.wins, overall.losses, overall.win_loss), (10, 4, 2.5))
        solo = report.section("Solo").mode
        self.assertEqual((solo.wins, solo.losses, solo.win_loss), (3, 1, 3.0))

    def test_other_modes_are_zero(self):
        report = build_bedwars(self.record)

        for title in ("Doubles", "Threes", "Fours", "4v4"):
            mode = report.section(title).mode
            self.assertEqual((mode.wins, mode.losses, mode.win_loss), (0, 0, 0))
            self.assertIsNone(mode.kill_death)

    def test_section_order(self):
        report = build_bedwars(self.record)
        self.assertEqual(
            [s.title for s in report.sections],
            ["Overall", "Solo", "Doubles", "Threes", "Fours", "4v4"],
        )
        self.assertTrue(report.sections[0].spread)

    def test_missing_block(self):
        with self.assertRaises(NoStatsForGame) as cm:
            build_bedwars({"stats": {"Duels": {}}})
        self.assertEqual(cm.exception.game, "Bedwars")

    def test_builder_is_deterministic(self):
        self.assertEqual(build_bedwars(self.record), build_bedwars(self.record))


class DuelsBuilderTests(unittest.TestCase):
    def test_builder_is_deterministic(self):
        record = make_record("Duels", wins=3, losses=8, uhc_kills_duels=5)
        self.assertEqual(build_duels(record), build_duels(record))

    def test_missing_duels_key(self):
        with self.assertRaises(NoStatsForGame):
            build_duels(make_record("Bedwars", wins_bedwars=1))

    def test_missing_stats_entirely(self):
        with self.assertRaises(NoStatsForGame):
            build_duels({"displayname": "Steve", "stats": None})
        with self.assertRaises(NoStatsForGame):
            build_duels({})

    def test_overall_and_modes(self):
        record = make_record(
            "Duels",
            wins=20, losses=10, kills=30, deaths=0,
            uhc_wins_duels=4, uhc_losses_duels=2, uhc_kills_duels=9, uhc_deaths_duels=3,
            sumo_wins_duels=1,
            op_duels_wins=5, op_duels_losses=5,
            classic_duels_kills=7, classic_duels_deaths=2,
            bridge_duel_wins=99,
        )

        report = build_duels(record)

        overall = report.section("Overall").mode
        self.assertEqual(overall.win_loss, 2.0)
        self.assertEqual(overall.kill_death, 30)

        uhc = report.section("UHC").mode
        self.assertEqual((uhc.wins, uhc.losses, uhc.kills, uhc.deaths), (4, 2, 9, 3))
        self.assertEqual((uhc.win_loss, uhc.kill_death), (2.0, 3.0))

        self.assertEqual(report.section("Sumo").mode.win_loss, 1)
        self.assertEqual(report.section("OP").mode.win_loss, 1.0)
        self.assertEqual(report.section("Classic").mode.kill_death, 3.5)

        self.assertEqual(
            [s.title for s in report.sections],
            ["Overall", "UHC", "Sumo", "OP", "Classic"],
        )

    def test_fields_include_kills(self):
        report = build_duels(make_record("Duels"))
        labels = [label for label, _ in report.section("UHC").mode.fields()]
        self.assertEqual(labels, ["Wins", "Losses", "W/L", "Kills", "Deaths", "K/D"])


class BridgeBuilderTests(unittest.TestCase):
    def test_builder_is_deterministic(self):
        record = make_record(
            "Duels", bridge_duel_wins=1, bridge_duel_losses=8,
            layout_bridge_duel_layout={"0": "sword", "1": "bow"},
        )
        self.assertEqual(build_bridge(record), build_bridge(record))

    def test_sums_solo_and_doubles(self):
        record = make_record(
            "Duels",
            bridge_duel_wins=5,
            bridge_duel_losses=5,
            bridge_doubles_wins=0,
            bridge_doubles_losses=0,
        )

        report = build_bridge(record)

        overall = report.section("Overall").mode
        self.assertEqual((overall.wins, overall.losses, overall.win_loss), (5, 5, 1.0))
        solo = report.section("Solo").mode
        self.assertEqual((solo.wins, solo.losses, solo.win_loss), (5, 5, 1.0))
        doubles = report.section("Doubles").mode
        self.assertEqual((doubles.wins, doubles.losses, doubles.win_loss), (0, 0, 0))
        self.assertEqual(report.section("Inventory Layout").value, LAYOUT_MISSING)

    def test_no_kills_tracked(self):
        report = build_bridge(make_record("Duels", bridge_duel_wins=2))
        self.assertIsNone(report.section("Solo").mode.kill_death)

    def test_layout_string_and_mapping(self):
        report = build_bridge(make_record("Duels", layout_bridge_duel_layout="sword,bow"))
        self.assertEqual(report.section("Inventory Layout").value, "sword,bow")

        layout = {"10": "blocks", "0": "sword", "1": "bow"}
        self.assertEqual(format_layout(layout), "0: sword\n1: bow\n10: blocks")
        self.assertEqual(format_layout({}), LAYOUT_MISSING)
        self.assertEqual(format_layout(""), LAYOUT_MISSING)


class DispatchTests(unittest.TestCase):
    def test_build_report_by_kind(self):
        record = {"stats": {"Bedwars": {}, "Duels": {}}}
        self.assertEqual(build_report("Bedwars", record).game, "Bedwars")
        self.assertEqual(build_report("duels", record).game, "Duels")
        self.assertEqual(build_report("bridge", record).game, "Bridge Duels")

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            build_report("skywars", {})


if __name__ == "__main__":
    unittest.main()
