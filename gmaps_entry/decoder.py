"""
Place Document Decoder

Decodes the raw body of a Google Maps /maps/preview/place response into
nested Python lists. Google prefixes these bodies with )]}' to defeat
JSON hijacking; the prefix is stripped when present.
"""

import json
from typing import Any, Union

from .config import DATA_INDEX, MIN_TOP_LEVEL_LENGTH, XSSI_PREFIX
from .exceptions import MalformedDocumentError


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def decode_document(raw: Union[bytes, str]) -> Any:
    """Decode raw response bytes (or text) into a JSON value.

    Raises:
        MalformedDocumentError: If the input is not valid JSON
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(f"document is not valid UTF-8: {e}") from e

    text = raw.lstrip("\ufeff").strip()
    if text.startswith(XSSI_PREFIX):
        text = text[len(XSSI_PREFIX):].strip()

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedDocumentError(f"document is not valid JSON: {e}") from e


def get_place_data(document: Any) -> list:
    """Return the place data array at document[6].

    Raises:
        MalformedDocumentError: If the document is too short or [6] is not an array
    """
    if not isinstance(document, list) or len(document) < MIN_TOP_LEVEL_LENGTH:
        raise MalformedDocumentError("invalid json: missing top-level place structure")

    data = document[DATA_INDEX]
    if not isinstance(data, list):
        raise MalformedDocumentError("invalid json: place data is not an array")

    return data
