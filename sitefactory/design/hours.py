"""Localize Google Places opening hours lines to German.

"Monday: 9:00 AM – 6:00 PM"  ->  "Montag: 09:00 – 18:00 Uhr"
"Tuesday: Closed"            ->  "Dienstag: Geschlossen"
"""

import re
from typing import Iterable, List

DAY_NAMES = {
    "Monday": "Montag",
    "Tuesday": "Dienstag",
    "Wednesday": "Mittwoch",
    "Thursday": "Donnerstag",
    "Friday": "Freitag",
    "Saturday": "Samstag",
    "Sunday": "Sonntag",
}

_DAY_PATTERNS = [(re.compile(rf"\b{en}\b", re.IGNORECASE), de) for en, de in DAY_NAMES.items()]
_CLOSED = re.compile(r"\bClosed\b", re.IGNORECASE)
_OPEN_ALL_DAY = re.compile(r"\bOpen 24 hours\b", re.IGNORECASE)
_TIME_12H = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)
_RANGE = re.compile(r"(\d{2}:\d{2})\s*[–\-]\s*(\d{2}:\d{2})(?!\s*Uhr)")
_STANDALONE = re.compile(r"(\d{2}:\d{2})(?!\s*(?:Uhr|–|-))")


def _to_24h(match: "re.Match[str]") -> str:
    hours = int(match.group(1))
    period = match.group(3).upper()
    if period == "AM" and hours == 12:
        hours = 0
    elif period == "PM" and hours != 12:
        hours += 12
    return f"{hours:02d}:{match.group(2)}"


def localize_hours_line(line: str) -> str:
    result = line
    for pattern, german in _DAY_PATTERNS:
        result = pattern.sub(german, result)
    result = _CLOSED.sub("Geschlossen", result)
    result = _OPEN_ALL_DAY.sub("24 Stunden geöffnet", result)
    result = _TIME_12H.sub(_to_24h, result)
    # "Uhr" once per range, after the closing time
    result = _RANGE.sub(r"\1 – \2 Uhr", result)
    return _STANDALONE.sub(r"\1 Uhr", result)


def localize_opening_hours(lines: Iterable[str]) -> List[str]:
    return [localize_hours_line(line) for line in lines or []]
