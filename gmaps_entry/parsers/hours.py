"""
Opening Hours Extractor

Hours live at data[34][1], one item per day:
    ['Monday', ['10 am–10 pm'], ...]
    ['Sunday', ['Closed'], ...]

The time fragments are joined and stripped of spaces and quotes. A day is
considered open when the cleaned text contains a decimal digit, which
holds across the various ways Google renders hour ranges.
"""

from typing import Any, List

from ..models import WorkingHours
from .path import get_nth, get_strings

HOURS_PATH = (34, 1)


def clean_hours(fragments: List[str]) -> str:
    """Join time fragments and drop spaces and double quotes."""
    return "".join(fragments).replace(" ", "").replace('"', "")


def get_hours(data: Any) -> List[WorkingHours]:
    """Extract per-day working hours. Malformed day items are skipped."""
    working_hours = []

    for item in get_nth(data, *HOURS_PATH, cast=list):
        if not isinstance(item, list):
            continue

        open_hours = clean_hours(get_strings(item, 1))

        working_hours.append(WorkingHours(
            day=get_nth(item, 0),
            open_hours=open_hours,
            open=any(char.isdecimal() for char in open_hours),
        ))

    return working_hours
