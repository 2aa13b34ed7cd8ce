import json

import pytest

from gmaps_entry import Entry, MalformedDocumentError, UnexpectedFaultError, entry_from_json
from gmaps_entry.models import Address, LinkSource, Owner
from gmaps_entry.parsers import entry as entry_module
from gmaps_entry.parsers.entry import clean_address, owner_link

from conftest import build_place_document, encode


def test_full_entry(place_raw):
    entry = entry_from_json(place_raw)

    assert entry.link == "https://www.google.com/maps/place/Joe's+Pizza"
    assert entry.cid == "5789012345678901234"
    assert entry.title == "Joe's Pizza"
    assert entry.categories == ["Pizza restaurant", "Italian restaurant", ""]
    assert entry.category == "Pizza restaurant"
    assert entry.address == "7 Carmine St, New York, NY 10014"
    assert entry.website == "https://joespizzanyc.com/"
    assert entry.phone == "(212) 366-1182"
    assert entry.plus_code == "PXJ2+6X New York"
    assert entry.review_count == 1234
    assert entry.review_rating == 4.6
    assert entry.latitude == 40.7305
    assert entry.longitude == -74.0021
    assert entry.status == "Open ⋅ Closes 10 pm"
    assert entry.description == "Classic slice joint since 1975."
    assert entry.reviews_link == "https://search.google.com/local/reviews?placeid=ChIJ"
    assert entry.thumbnail == "https://lh5.googleusercontent.com/p/thumb"
    assert entry.timezone == "America/New_York"
    assert entry.price_range == "$$"
    assert entry.data_id == "0x89c25991:0x4f5b8a9"
    assert entry.services == LinkSource(link="https://joespizzanyc.com/services", source="joespizzanyc.com")
    assert entry.owner == Owner(id="abc123", name="Joe Pozzuoli",
                                link="https://www.google.com/maps/contrib/abc123")
    assert entry.complete_address == Address(
        borough="Greenwich Village",
        street="7 Carmine St",
        city="New York",
        postal_code="10014",
        state="NY",
        country="US",
    )
    assert entry.reviews_per_rating == {1: 40, 2: 25, 3: 60, 4: 210, 5: 899}
    assert len(entry.working_hours) == 3
    assert set(entry.popular_times) == {"Monday", "Sunday"}
    assert len(entry.images) == 2
    assert len(entry.reservations) == 1
    assert len(entry.order_online) == 1
    assert len(entry.about) == 2
    assert [review.name for review in entry.user_reviews] == ["Alice", "Bob"]
    assert entry.emails == []
    assert entry.is_valid()


def test_accepts_text_and_unprefixed_bodies(place_document):
    from_text = entry_from_json(json.dumps(place_document))
    from_bytes = entry_from_json(encode(place_document, prefix=False))
    assert from_text == from_bytes
    assert from_text.title == "Joe's Pizza"


def test_parsing_is_idempotent(place_raw):
    assert entry_from_json(place_raw) == entry_from_json(place_raw)


@pytest.mark.parametrize("raw", [
    b"",
    b"not json",
    b")]}'\n[1, 2",
    b"\xff\xfe\x00",
    b'{"a": 1}',
    b"[1, 2, 3, 4, 5, 6]",
    b"[0, 1, 2, 3, 4, 5, null]",
    b'[0, 1, 2, 3, 4, 5, "place"]',
    b"[0, 1, 2, 3, 4, 5, {}]",
    b"null",
])
def test_malformed_documents(raw):
    with pytest.raises(MalformedDocumentError):
        entry_from_json(raw)


def test_short_place_data_gives_defaults():
    entry = entry_from_json(b"[0, 1, 2, 3, 4, 5, [1, 2]]")

    assert entry == Entry()
    assert entry.title == ""
    assert entry.review_rating == 0.0
    assert entry.review_count == 0
    assert entry.categories == []
    assert entry.working_hours == []
    assert entry.popular_times == {}
    assert entry.reviews_per_rating == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert entry.owner.link == ""
    assert not entry.is_valid()


def test_wrong_shapes_are_absorbed(make_raw):
    entry = entry_from_json(make_raw(
        ((4,), "not a list"),
        ((13,), "Pizza"),
        ((34,), 7),
        ((52,), {"reviews": []}),
        ((84,), [None]),
        ((100, 1), [["x", "X", "bad options"]]),
        ((183,), None),
    ))

    assert entry.title == "Joe's Pizza"
    assert entry.review_rating == 0.0
    assert entry.categories == []
    assert entry.category == ""
    assert entry.working_hours == []
    assert entry.status == ""
    assert entry.user_reviews == []
    assert entry.popular_times == {}
    assert entry.about[0].options == []
    assert entry.complete_address == Address()
    # Untouched sections are still populated
    assert len(entry.images) == 2
    assert entry.phone == "(212) 366-1182"


def test_order_online_fallback(make_raw):
    entry = entry_from_json(make_raw(
        ((75,), [[None, None]]),
        ((75, 0, 0, 2), [[["DoorDash"], [None, None, ["https://www.doordash.com/store/joes"]]]]),
    ))
    assert entry.order_online == [
        LinkSource(link="https://www.doordash.com/store/joes", source="DoorDash"),
    ]


def test_address_prefix_is_stripped(make_raw):
    entry = entry_from_json(make_raw(((11,), "Acme"), ((18,), "Acme, 123 Main St")))
    assert entry.address == "123 Main St"


def test_address_without_prefix_is_trimmed(make_raw):
    entry = entry_from_json(make_raw(((18,), "  123 Main St  ")))
    assert entry.address == "123 Main St"


def test_clean_address():
    assert clean_address("Acme, 123 Main St", "Acme") == "123 Main St"
    assert clean_address("Acme Corp, 123 Main St", "Acme") == "Acme Corp, 123 Main St"
    assert clean_address("123 Main St", "") == "123 Main St"
    assert clean_address("", "Acme") == ""


def test_owner_link():
    assert owner_link("abc123") == "https://www.google.com/maps/contrib/abc123"
    assert owner_link("") == ""


def test_missing_owner(make_raw):
    entry = entry_from_json(make_raw(((57,), None)))
    assert entry.owner == Owner()


def test_unexpected_fault_is_wrapped(monkeypatch, place_raw):
    def broken(data):
        raise KeyError("boom")

    monkeypatch.setattr(entry_module, "get_about", broken)

    with pytest.raises(UnexpectedFaultError) as exc_info:
        entry_from_json(place_raw)

    error = exc_info.value
    assert isinstance(error.original, KeyError)
    assert error.__cause__ is error.original
    assert "broken" in error.trace
    assert "KeyError" in str(error)


def test_malformed_document_is_not_wrapped():
    with pytest.raises(MalformedDocumentError):
        entry_from_json(b")]}'")


def test_document_builder_round_trip():
    document = build_place_document([])
    assert entry_from_json(encode(document)).cid == "5789012345678901234"


def test_non_finite_constants_are_malformed():
    raw = b'[0, 1, 2, 3, 4, 5, [null, null, null, null, [null, null, "$", null, null, null, null, 4.5, Infinity]]]'
    with pytest.raises(MalformedDocumentError):
        entry_from_json(raw)


def test_overflowing_numbers_fall_back_to_defaults(make_raw):
    raw = make_raw(((4, 7), "RATING"), ((4, 8), "COUNT"), ((52, 3, 4), "FIVE_STARS"))
    for marker, number in ((b'"RATING"', b"1e400"), (b'"COUNT"', b"-1e400"), (b'"FIVE_STARS"', b"1e999")):
        raw = raw.replace(marker, number)

    entry = entry_from_json(raw)
    assert entry.review_count == 0
    assert entry.review_rating == 0.0
    assert entry.reviews_per_rating[5] == 0
    assert entry.reviews_per_rating[4] == 210
    assert entry.title == "Joe's Pizza"
