import unittest

from matchfeed.classify import (
    FORM_STYLES,
    STATUS_STYLES,
    classify_form,
    classify_status,
    normalize_live_time,
    pick_style_tag,
    read_status,
)
from matchfeed.models import FormResult, MatchStatus


class ClassifyStatusTests(unittest.TestCase):
    def test_style_tags_map_to_status(self) -> None:
        self.assertEqual(classify_status("HT", "blue"), MatchStatus.HALF_TIME)
        self.assertEqual(classify_status("45", "red"), MatchStatus.LIVE)
        self.assertEqual(classify_status("FT", "green"), MatchStatus.FINISHED)

    def test_unknown_tags_are_unknown(self) -> None:
        for tag in ("", "yellow", "purple", "RED-ish", None):
            self.assertEqual(classify_status("12", tag), MatchStatus.UNKNOWN)

    def test_classification_is_repeatable(self) -> None:
        for tag in ("blue", "red", "green", "x", ""):
            self.assertEqual(classify_status("1", tag), classify_status("1", tag))

    def test_live_time_gets_minute_mark(self) -> None:
        self.assertEqual(normalize_live_time("45"), "45'")
        self.assertEqual(normalize_live_time(" 45 "), "45'")

    def test_live_time_normalization_is_idempotent(self) -> None:
        for raw in ("45", "45'", "90+2", "90+2'"):
            once = normalize_live_time(raw)
            self.assertTrue(once.endswith("'"))
            self.assertEqual(normalize_live_time(once), once)

    def test_read_status_live(self) -> None:
        self.assertEqual(read_status("67", "red", None), (MatchStatus.LIVE, "67'"))
        self.assertEqual(read_status("HT", "blue", "20:00"), (MatchStatus.HALF_TIME, "HT"))
        self.assertEqual(read_status("Pen", "", None), (MatchStatus.UNKNOWN, "Pen"))

    def test_read_status_scheduled(self) -> None:
        self.assertEqual(read_status(None, "", "20:45"), (MatchStatus.SCHEDULED, "20:45"))
        self.assertEqual(read_status("  ", "red", "18:00"), (MatchStatus.SCHEDULED, "18:00"))
        self.assertEqual(read_status(None, "", None), (MatchStatus.SCHEDULED, "TBD"))


class ClassifyFormTests(unittest.TestCase):
    def test_form_tags(self) -> None:
        self.assertEqual(classify_form("green"), FormResult.WIN)
        self.assertEqual(classify_form("red"), FormResult.LOSS)
        self.assertEqual(classify_form("yellow"), FormResult.DRAW)
        self.assertEqual(classify_form("blue"), FormResult.UNKNOWN)
        self.assertEqual(classify_form(""), FormResult.UNKNOWN)


class PickStyleTagTests(unittest.TestCase):
    def test_picks_known_tag(self) -> None:
        self.assertEqual(pick_style_tag(["status", "color--red"], STATUS_STYLES), "red")
        self.assertEqual(pick_style_tag(["bullet", "color--yellow"], FORM_STYLES), "yellow")

    def test_priority_follows_table_order(self) -> None:
        self.assertEqual(pick_style_tag(["color--green", "color--blue"], STATUS_STYLES), "blue")

    def test_no_known_tag(self) -> None:
        self.assertEqual(pick_style_tag(["status", "color--purple"], STATUS_STYLES), "")
        self.assertEqual(pick_style_tag(None, STATUS_STYLES), "")


if __name__ == "__main__":
    unittest.main()
