"""
Reviews Extractor

Extracts the inline reviews shipped with a place preview response.

Reviews are found at data[52][0]. Each review contains:
- [0][1] = Reviewer name
- [0][2] = Profile photo URL
- [1]    = When (e.g. "3 weeks ago")
- [3]    = Review text
- [4]    = Rating (1-5)
- [14]   = Photos, each URL at [6][0]

The review count per star rating is pre-aggregated at data[52][3].
"""

from typing import Any, Dict, List

from ..models import Review
from .path import get_nth

REVIEWS_PATH = (52, 0)
REVIEWS_PER_RATING_PATH = (52, 3)


def get_review_images(review_data: List[Any]) -> List[str]:
    images = []
    for photo in get_nth(review_data, 14, cast=list):
        url = get_nth(photo, 6, 0)
        if url:
            images.append(url)
    return images


def get_user_reviews(data: Any) -> List[Review]:
    """Extract reviews. Entries without a reviewer name are skipped."""
    reviews = []

    for review_data in get_nth(data, *REVIEWS_PATH, cast=list):
        name = get_nth(review_data, 0, 1)
        if not name:
            continue

        reviews.append(Review(
            name=name,
            profile_picture=get_nth(review_data, 0, 2),
            when=get_nth(review_data, 1),
            rating=get_nth(review_data, 4, cast=int),
            description=get_nth(review_data, 3),
            images=get_review_images(review_data),
        ))

    return reviews


def get_reviews_per_rating(data: Any) -> Dict[int, int]:
    """Return {stars: review count} for 1 to 5 stars."""
    return {
        stars: get_nth(data, *REVIEWS_PER_RATING_PATH, stars - 1, cast=int)
        for stars in range(1, 6)
    }
