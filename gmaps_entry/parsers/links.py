"""
Link/Source Pair Extractor

Several sections of a place response are lists of items that each carry a
URL and a label at fixed offsets inside the item:

- Images:        data[171][0], link [3][0][6][0], title [2]
- Reservations:  data[46],     link [0],          source [1]
- Order online:  data[75][0][1][2] or data[75][0][0][2],
                 link [1][2][0], source [0][0]

Pairs missing either the link or the source are dropped.
"""

import logging
from types import MappingProxyType
from typing import Any, List

from ..models import Image, LinkSource
from .path import Path, get_nth

logger = logging.getLogger(__name__)

IMAGES_PATH = (171, 0)
IMAGE_LINK = (3, 0, 6, 0)
IMAGE_TITLE = (2,)

RESERVATIONS_PATH = (46,)
RESERVATION_LINK = (0,)
RESERVATION_SOURCE = (1,)

# Known layouts of the order-online section, tried in order
ORDER_ONLINE_LAYOUTS = MappingProxyType({
    "primary": (75, 0, 1, 2),
    "fallback": (75, 0, 0, 2),
})
ORDER_ONLINE_LINK = (1, 2, 0)
ORDER_ONLINE_SOURCE = (0, 0)


def get_link_source(items: List[Any], link: Path, source: Path) -> List[LinkSource]:
    """Collect one LinkSource per item where both link and source are non-empty.

    Args:
        items: Candidate item nodes
        link: Path of the link inside each item
        source: Path of the source/label inside each item
    """
    result = []

    for item in items:
        if not isinstance(item, list):
            continue

        pair = LinkSource(
            link=get_nth(item, *link),
            source=get_nth(item, *source),
        )
        if pair.link and pair.source:
            result.append(pair)

    return result


def get_images(data: Any) -> List[Image]:
    pairs = get_link_source(get_nth(data, *IMAGES_PATH, cast=list), IMAGE_LINK, IMAGE_TITLE)
    return [Image(title=pair.source, image=pair.link) for pair in pairs]


def get_reservations(data: Any) -> List[LinkSource]:
    return get_link_source(
        get_nth(data, *RESERVATIONS_PATH, cast=list),
        RESERVATION_LINK,
        RESERVATION_SOURCE,
    )


def get_order_online(data: Any) -> List[LinkSource]:
    """Order-online links, from the first layout that has any items."""
    for layout, path in ORDER_ONLINE_LAYOUTS.items():
        items = get_nth(data, *path, cast=list)
        if items:
            logger.debug("Order online links found in %s layout", layout)
            return get_link_source(items, ORDER_ONLINE_LINK, ORDER_ONLINE_SOURCE)

    return []
