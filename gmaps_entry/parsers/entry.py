"""
Place Entry Extractor

Builds an Entry from the raw body of a Google Maps /maps/preview/place
response.

The place response structure contains:
- [6] = Place data array
- [6][11] = name
- [6][13] = categories
- [6][18] = address
- [6][4][7], [6][4][8] = rating, review count
- [6][9][2], [6][9][3] = lat, lng
- [6][34] = hours and status
- [6][52] = reviews
- [6][84] = popular times
- [6][100] = about sections
- [6][178] = phone
- [6][183] = structured address and plus code
- [25][3][0][13][0][0][1] = CID (outside the place data array)
"""

import logging
import traceback
from typing import Any, Union

from ..config import OWNER_LINK_TEMPLATE
from ..decoder import decode_document, get_place_data
from ..exceptions import UnexpectedFaultError
from ..models import Address, Entry, LinkSource, Owner
from .about import get_about
from .hours import get_hours
from .links import get_images, get_order_online, get_reservations
from .path import get_nth, get_strings
from .popular_times import get_popular_times
from .reviews import get_reviews_per_rating, get_user_reviews

logger = logging.getLogger(__name__)

CID_PATH = (25, 3, 0, 13, 0, 0, 1)


def clean_address(address: str, title: str) -> str:
    """Drop a leading "<title>," from the address and trim whitespace."""
    prefix = title + ","
    if address.startswith(prefix):
        address = address[len(prefix):]
    return address.strip()


def owner_link(owner_id: str) -> str:
    return OWNER_LINK_TEMPLATE.format(owner_id) if owner_id else ""


def entry_from_json(raw: Union[bytes, str]) -> Entry:
    """
    Extract an Entry from a raw place response.

    Args:
        raw: Response body, with or without the )]}' prefix

    Returns:
        The populated Entry. It may still be unusable; check entry.is_valid().

    Raises:
        MalformedDocumentError: If the body is not JSON or has no place data array
        UnexpectedFaultError: If extraction failed in a way the path guards
            did not anticipate
    """
    document = decode_document(raw)
    data = get_place_data(document)

    try:
        return _build_entry(document, data)
    except Exception as e:
        trace = traceback.format_exc()
        logger.error("Unexpected fault extracting place entry: %r\n%s", e, trace)
        raise UnexpectedFaultError(
            f"unexpected fault during extraction: {e!r}", original=e, trace=trace
        ) from e


def _build_entry(document: Any, data: list) -> Entry:
    title = get_nth(data, 11)
    categories = get_strings(data, 13)

    owner_id = get_nth(data, 57, 2)

    return Entry(
        link=get_nth(data, 27),
        cid=get_nth(document, *CID_PATH),
        title=title,
        categories=categories,
        category=categories[0] if categories else "",
        address=clean_address(get_nth(data, 18), title),
        working_hours=get_hours(data),
        popular_times=get_popular_times(data),
        website=get_nth(data, 7, 0),
        phone=get_nth(data, 178, 0, 0),
        plus_code=get_nth(data, 183, 2, 2, 0),
        review_count=get_nth(data, 4, 8, cast=int),
        review_rating=get_nth(data, 4, 7, cast=float),
        reviews_per_rating=get_reviews_per_rating(data),
        latitude=get_nth(data, 9, 2, cast=float),
        longitude=get_nth(data, 9, 3, cast=float),
        status=get_nth(data, 34, 4, 4),
        description=get_nth(data, 32, 1, 1),
        reviews_link=get_nth(data, 4, 3, 0),
        thumbnail=get_nth(data, 72, 0, 1, 6, 0),
        timezone=get_nth(data, 30),
        price_range=get_nth(data, 4, 2),
        data_id=get_nth(data, 10),
        images=get_images(data),
        reservations=get_reservations(data),
        order_online=get_order_online(data),
        services=LinkSource(
            link=get_nth(data, 38, 0),
            source=get_nth(data, 38, 1),
        ),
        owner=Owner(
            id=owner_id,
            name=get_nth(data, 57, 1),
            link=owner_link(owner_id),
        ),
        complete_address=Address(
            borough=get_nth(data, 183, 1, 0),
            street=get_nth(data, 183, 1, 1),
            city=get_nth(data, 183, 1, 3),
            postal_code=get_nth(data, 183, 1, 4),
            state=get_nth(data, 183, 1, 5),
            country=get_nth(data, 183, 1, 6),
        ),
        about=get_about(data),
        user_reviews=get_user_reviews(data),
    )
