import copy
import json

import pytest


def set_path(root: list, path, value):
    """Place value at path inside root, padding lists with None as needed."""
    current = root
    for idx in path[:-1]:
        while len(current) <= idx:
            current.append(None)
        if current[idx] is None:
            current[idx] = []
        current = current[idx]
    while len(current) <= path[-1]:
        current.append(None)
    current[path[-1]] = value
    return root


def _photo(url):
    return [None, None, None, None, None, None, [url]]


def _review(name, picture, when, text, rating, photos=None):
    review = [[None, name, picture], when, None, text, rating]
    if photos is not None:
        set_path(review, (14,), photos)
    return review


def _order_item(source, link):
    return [[source], [None, None, [link]]]


def build_place_data() -> list:
    data = []
    set_path(data, (4,), [None, None, "$$", ["https://search.google.com/local/reviews?placeid=ChIJ"],
                          None, None, None, 4.6, 1234])
    set_path(data, (7,), ["https://joespizzanyc.com/", "joespizzanyc.com"])
    set_path(data, (9,), [None, None, 40.7305, -74.0021])
    set_path(data, (10,), "0x89c25991:0x4f5b8a9")
    set_path(data, (11,), "Joe's Pizza")
    set_path(data, (13,), ["Pizza restaurant", "Italian restaurant", None])
    set_path(data, (18,), "Joe's Pizza, 7 Carmine St, New York, NY 10014")
    set_path(data, (27,), "https://www.google.com/maps/place/Joe's+Pizza")
    set_path(data, (30,), "America/New_York")
    set_path(data, (32,), [None, [None, "Classic slice joint since 1975."]])
    set_path(data, (34,), [
        None,
        [
            ["Monday", ["10 am–10 pm"]],
            ["Tuesday", ['"10 am', '–11 pm"']],
            ["Sunday", ["Closed"]],
            "not a day",
        ],
        None,
        None,
        [None, None, None, None, "Open ⋅ Closes 10 pm"],
    ])
    set_path(data, (38,), ["https://joespizzanyc.com/services", "joespizzanyc.com"])
    set_path(data, (46,), [
        ["https://www.opentable.com/r/joes", "opentable.com"],
        ["", "resy.com"],
        ["https://www.yelp.com/reservations/joes", ""],
    ])
    set_path(data, (52,), [
        [
            _review("Alice", "https://lh3.googleusercontent.com/a/alice", "2 weeks ago",
                    "Best slice in the Village.", 5,
                    photos=[_photo("https://lh5.googleusercontent.com/p/1"), _photo(""), "junk"]),
            _review("", "https://lh3.googleusercontent.com/a/anon", "a year ago", "placeholder", 1),
            _review("Bob", "https://lh3.googleusercontent.com/a/bob", "3 months ago",
                    "Crust was soggy.", 2),
        ],
        None,
        None,
        [40, 25, 60, 210, 899],
    ])
    set_path(data, (57,), [None, "Joe Pozzuoli", "abc123"])
    set_path(data, (72, 0), [None, [None, None, None, None, None, None,
                                    ["https://lh5.googleusercontent.com/p/thumb"]]])
    set_path(data, (75, 0, 1, 2), [
        _order_item("Seamless", "https://www.seamless.com/menu/joes"),
        _order_item("", "https://www.grubhub.com/restaurant/joes"),
    ])
    set_path(data, (84, 0), [
        [1, [[11, 20], [12, 45], [13, 60]]],
        [7, [[12, 70]]],
    ])
    set_path(data, (100, 1), [
        ["service_options", "Service options", [
            [None, "Dine-in", [None, [[1]]]],
            [None, "Delivery", [None, [[0]]]],
            [None, "", [None, [[1]]]],
        ]],
        ["accessibility", "Accessibility", []],
    ])
    set_path(data, (171, 0), [
        [None, None, "All", [_photo("https://lh5.googleusercontent.com/p/all")]],
        [None, None, "Menu", [_photo("https://lh5.googleusercontent.com/p/menu")]],
        [None, None, "Untitled", [_photo("")]],
    ])
    set_path(data, (178,), [["(212) 366-1182", "+12123661182"]])
    set_path(data, (183,), [
        None,
        ["Greenwich Village", "7 Carmine St", None, "New York", "10014", "NY", "US"],
        [None, None, ["PXJ2+6X New York"]],
    ])
    return data


def build_place_document(data: list = None) -> list:
    document = [None] * 7
    document[6] = build_place_data() if data is None else data
    set_path(document, (25, 3, 0, 13, 0, 0, 1), "5789012345678901234")
    return document


def encode(document, prefix: bool = True) -> bytes:
    body = json.dumps(document, ensure_ascii=False)
    if prefix:
        body = ")]}'\n" + body
    return body.encode("utf-8")


@pytest.fixture
def place_document():
    return build_place_document()


@pytest.fixture
def place_data(place_document):
    return place_document[6]


@pytest.fixture
def place_raw(place_document):
    return encode(place_document)


@pytest.fixture
def make_raw(place_document):
    """Return a builder that applies (path, value) edits to the place data and encodes it."""
    def _make(*edits, prefix: bool = True):
        document = copy.deepcopy(place_document)
        for path, value in edits:
            set_path(document[6], path, value)
        return encode(document, prefix=prefix)
    return _make


@pytest.fixture
def restore_config(monkeypatch):
    """Undo ExtractorConfig.apply() and clear GMAPS_ENTRY_* overrides."""
    from gmaps_entry import config

    for name in ("GMAPS_ENTRY_API_HOST", "GMAPS_ENTRY_API_PORT", "GMAPS_ENTRY_WORKERS",
                 "GMAPS_ENTRY_MAX_WORKERS", "GMAPS_ENTRY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    saved = {name: getattr(config, name) for name in (
        "API_HOST", "API_PORT", "DEFAULT_PARALLEL_WORKERS", "MAX_PARALLEL_WORKERS", "LOG_LEVEL",
    )}
    yield
    for name, value in saved.items():
        setattr(config, name, value)
