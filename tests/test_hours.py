"""
Tests for opening hours localization
"""
import pytest

from sitefactory.design.hours import localize_hours_line, localize_opening_hours


class TestLocalizeHours:
    @pytest.mark.parametrize("line,expected", [
        ("Monday: 9:00 AM – 6:00 PM", "Montag: 09:00 – 18:00 Uhr"),
        ("Tuesday: Closed", "Dienstag: Geschlossen"),
        ("Saturday: Open 24 hours", "Samstag: 24 Stunden geöffnet"),
        ("Friday: 12:00 AM – 12:00 PM", "Freitag: 00:00 – 12:00 Uhr"),
        (
            "Wednesday: 9:00 AM – 12:00 PM, 2:00 PM – 6:00 PM",
            "Mittwoch: 09:00 – 12:00 Uhr, 14:00 – 18:00 Uhr",
        ),
    ])
    def test_google_places_lines(self, line, expected):
        assert localize_hours_line(line) == expected

    def test_single_time_gets_suffix(self):
        assert localize_hours_line("Sunday: 10:00 AM") == "Sonntag: 10:00 Uhr"

    def test_german_lines_unchanged(self):
        line = "Montag: 09:00 – 18:00 Uhr"
        assert localize_hours_line(line) == line
        assert localize_hours_line(localize_hours_line("Monday: 9:00 AM – 6:00 PM")) == line

    def test_list_helper(self):
        assert localize_opening_hours(["Tuesday: Closed"]) == ["Dienstag: Geschlossen"]
        assert localize_opening_hours(None) == []
