"""
Parsers module for extracting entry data from Google Maps place responses.

- path.py: Typed, fault-tolerant access by index path
- hours.py: Opening hours per day
- popular_times.py: Traffic histogram per day and hour
- links.py: Images, reservations and order-online links
- about.py: About sections and their options
- reviews.py: Inline reviews and the per-rating review counts
- entry.py: Builds a full Entry from a raw response
"""

from .path import Path, get_nth, get_strings, is_number, zero_value
from .entry import entry_from_json
