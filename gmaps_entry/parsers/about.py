"""
About Section Extractor

The "About" tab lives at data[100][1]. Each section:
    ['service_options', 'Service options', [option, ...], ...]

Each option carries its name at [1] and its enabled flag (1 = yes) at
[2][1][0][0]. Options without a name are dropped; sections are kept even
when no options survive.
"""

from typing import Any, List

from ..models import About, Option
from .path import get_nth

ABOUT_PATH = (100, 1)


def get_options(options: List[Any]) -> List[Option]:
    result = []

    for item in options:
        option = Option(
            name=get_nth(item, 1),
            enabled=get_nth(item, 2, 1, 0, 0, cast=int) == 1,
        )
        if option.name:
            result.append(option)

    return result


def get_about(data: Any) -> List[About]:
    """Extract the about sections and their named options."""
    sections = []

    for item in get_nth(data, *ABOUT_PATH, cast=list):
        if not isinstance(item, list):
            continue

        sections.append(About(
            id=get_nth(item, 0),
            name=get_nth(item, 1),
            options=get_options(get_nth(item, 2, cast=list)),
        ))

    return sections
