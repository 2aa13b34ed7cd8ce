"""
Entry data model.

An Entry is one business listing extracted from a place response. Field
aliases are the labels used for JSON output; csv_headers()/csv_row()
flatten an entry for tabular export, rendering nested structures as
compact JSON.
"""

import json
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .config import CSV_COLUMNS, EMAIL_UNFRIENDLY_HOSTS
from .exceptions import EntryValidationError


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Image(_Model):
    title: str = ""
    image: str = ""


class LinkSource(_Model):
    link: str = ""
    source: str = ""


class Owner(_Model):
    id: str = ""
    name: str = ""
    link: str = ""


class Address(_Model):
    borough: str = ""
    street: str = ""
    city: str = ""
    postal_code: str = Field("", alias="postalCode")
    state: str = ""
    country: str = ""


class Option(_Model):
    name: str = ""
    enabled: bool = False


class About(_Model):
    id: str = ""
    name: str = ""
    options: List[Option] = Field(default_factory=list)


class Review(_Model):
    name: str = Field("", alias="Name")
    profile_picture: str = Field("", alias="ProfilePicture")
    rating: int = Field(0, alias="Rating")
    description: str = Field("", alias="Description")
    images: List[str] = Field(default_factory=list, alias="Images")
    when: str = Field("", alias="When")


class WorkingHours(_Model):
    day: str = ""
    open_hours: str = Field("", alias="openHours")
    open: bool = False


def _empty_ratings() -> Dict[int, int]:
    return {stars: 0 for stars in range(1, 6)}


class Entry(_Model):
    """A business listing extracted from a Google Maps place response.

    Usable only when title and category are both non-empty; call
    is_valid() or ensure_valid() before persisting or forwarding it.
    """

    link: str = ""
    cid: str = Field("", alias="cID")
    title: str = Field("", alias="businessName")
    categories: List[str] = Field(default_factory=list)
    category: str = ""
    address: str = ""
    working_hours: List[WorkingHours] = Field(default_factory=list, alias="WorkingHours")
    # {day name: {hour: traffic level}}
    popular_times: Dict[str, Dict[int, int]] = Field(default_factory=dict, alias="popularTimes")
    website: str = Field("", alias="webSite")
    phone: str = ""
    plus_code: str = Field("", alias="plusCode")
    review_count: int = Field(0, alias="reviewCount")
    review_rating: float = Field(0.0, alias="reviewRating")
    reviews_per_rating: Dict[int, int] = Field(default_factory=_empty_ratings, alias="reviewsPerRating")
    latitude: float = 0.0
    longitude: float = Field(0.0, alias="longtitude")
    status: str = ""
    description: str = ""
    reviews_link: str = Field("", alias="reviewsLink")
    thumbnail: str = ""
    timezone: str = Field("", alias="timeZone")
    price_range: str = Field("", alias="priceRange")
    data_id: str = Field("", alias="dataID")
    images: List[Image] = Field(default_factory=list)
    reservations: List[LinkSource] = Field(default_factory=list)
    order_online: List[LinkSource] = Field(default_factory=list, alias="orderOnline")
    services: LinkSource = Field(default_factory=LinkSource)
    owner: Owner = Field(default_factory=Owner)
    complete_address: Address = Field(default_factory=Address, alias="completeAddress")
    about: List[About] = Field(default_factory=list)
    user_reviews: List[Review] = Field(default_factory=list, alias="userReviews")
    emails: List[str] = Field(default_factory=list)

    def is_valid(self) -> bool:
        return bool(self.title) and bool(self.category)

    def ensure_valid(self):
        """Raise EntryValidationError if a required field is empty."""
        if not self.title:
            raise EntryValidationError("title")
        if not self.category:
            raise EntryValidationError("category")

    def is_website_valid_for_email(self) -> bool:
        """Whether the website is worth crawling for email addresses."""
        if not self.website:
            return False
        return not any(host in self.website for host in EMAIL_UNFRIENDLY_HOSTS)

    @classmethod
    def csv_headers(cls) -> List[str]:
        return list(CSV_COLUMNS)

    def csv_row(self) -> List[str]:
        """Field values in csv_headers() order, rendered as text."""
        return [
            self.link,
            self.title,
            self.category,
            self.address,
            stringify(self.working_hours),
            stringify(self.popular_times),
            self.website,
            self.phone,
            self.plus_code,
            stringify(self.review_count),
            stringify(self.review_rating),
            stringify(self.reviews_per_rating),
            stringify(self.latitude),
            stringify(self.longitude),
            self.cid,
            self.status,
            self.description,
            self.reviews_link,
            self.thumbnail,
            self.timezone,
            self.price_range,
            self.data_id,
            stringify(self.images),
            stringify(self.reservations),
            stringify(self.order_online),
            stringify(self.services),
            stringify(self.owner),
            stringify(self.complete_address),
            stringify(self.about),
            stringify(self.user_reviews),
            ", ".join(self.emails),
        ]


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    return value


def stringify(value: Any) -> str:
    """Render a field value as text: floats as %f, structures as compact JSON."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return f"{value:f}"
    return json.dumps(_plain(value), separators=(",", ":"), ensure_ascii=False)
