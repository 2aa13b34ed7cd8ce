"""
Google Maps Place Entry Extractor

Extracts structured business listings from the positional, field-name-free
JSON that Google Maps returns for a single place.

Quick start:
    from gmaps_entry import entry_from_json

    entry = entry_from_json(raw_bytes)
    if entry.is_valid():
        print(entry.title, entry.address)
"""

from .exceptions import (
    GMapsEntryError,
    MalformedDocumentError,
    UnexpectedFaultError,
    EntryValidationError,
    ConfigurationError,
)
from .models import Entry
from .parsers import entry_from_json, get_nth

__version__ = "1.0.0"
__all__ = [
    "Entry",
    "entry_from_json",
    "get_nth",
    "GMapsEntryError",
    "MalformedDocumentError",
    "UnexpectedFaultError",
    "EntryValidationError",
    "ConfigurationError",
]
