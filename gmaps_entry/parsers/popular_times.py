"""
Popular Times Extractor

The traffic histogram lives at data[84][0], one item per day:
    [1, [[6, 10], [7, 25], [8, 40], ...], ...]
     ^ ISO weekday (1 = Monday)
          ^ [hour, traffic level]

Unlike the other extractors this one is all-or-nothing: one malformed day
or hour entry drops the whole histogram.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict

from .path import get_nth, is_number

logger = logging.getLogger(__name__)

POPULAR_TIMES_PATH = (84, 0)

DAY_OF_WEEK = MappingProxyType({
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
})


def get_popular_times(data: Any) -> Dict[str, Dict[int, int]]:
    """Build {day name: {hour: traffic level}}, or {} if any entry is malformed."""
    popular_times = {}

    for item in get_nth(data, *POPULAR_TIMES_PATH, cast=list):
        if not isinstance(item, list):
            logger.debug("Popular times dropped: day item is %s", type(item).__name__)
            return {}

        day = DAY_OF_WEEK.get(get_nth(item, 0, cast=int))
        if day is None:
            logger.debug("Popular times dropped: unknown weekday %r", item[0] if item else None)
            return {}

        times = {}
        for entry in get_nth(item, 1, cast=list):
            if not isinstance(entry, list) or len(entry) < 2:
                logger.debug("Popular times dropped: bad hour entry on %s", day)
                return {}

            hour, level = entry[0], entry[1]
            if not is_number(hour) or not is_number(level):
                logger.debug("Popular times dropped: non-numeric hour entry on %s", day)
                return {}

            times[int(hour)] = int(level)

        popular_times[day] = times

    return popular_times
