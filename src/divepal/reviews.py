"""Site reviews: star ratings with a comment, newest first."""

import json
import math
from collections.abc import Sequence
from datetime import date as date_cls
from pathlib import Path

from divepal.models import Review

DEFAULT_REVIEWS_PATH = Path(__file__).parent / "resources" / "reviews.json"
MAX_RATING = 5


class ReviewError(Exception):
    """Review rejected as incomplete."""


def load_reviews(path: Path | None = None) -> tuple[Review, ...]:
    """Seed reviews shown on every site until divers add their own."""
    with (path or DEFAULT_REVIEWS_PATH).open(encoding="utf-8") as f:
        rows = json.load(f)
    return tuple(
        Review(
            id=int(row["id"]),
            user_name=str(row["user_name"]),
            rating=int(row["rating"]),
            comment=str(row["comment"]),
            date=str(row["date"]),
            helpful=int(row.get("helpful", 0)),
        )
        for row in rows
    )


def add_review(
    reviews: Sequence[Review],
    user_name: str,
    rating: int,
    comment: str,
    today: date_cls | None = None,
) -> tuple[Review, ...]:
    """Prepend a new review.

    Raises:
        ReviewError: When the rating is outside 1..5 or the comment is blank.
    """
    if not 1 <= rating <= MAX_RATING or not comment.strip():
        raise ReviewError("Please provide both a rating and comment")
    review = Review(
        id=max((r.id for r in reviews), default=0) + 1,
        user_name=user_name,
        rating=rating,
        comment=comment.strip(),
        date=(today or date_cls.today()).isoformat(),
    )
    return (review, *reviews)


def average_rating(reviews: Sequence[Review]) -> float:
    """Mean star rating to one decimal place. 0.0 when there are no reviews."""
    if not reviews:
        return 0.0
    mean = sum(r.rating for r in reviews) / len(reviews)
    return math.floor(mean * 10 + 0.5) / 10
