"""Community feed: bundled posts plus likes, comments, and new posts held by the caller."""

import json
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from divepal.models import DiveSite, FeedComment, FeedPost, User

DEFAULT_FEED_PATH = Path(__file__).parent / "resources" / "feed.json"
PLACEHOLDER_MEDIA = "/placeholder.svg?height=300&width=400"


class FeedError(Exception):
    """Feed action rejected."""


def _post_from_dict(row: dict[str, Any]) -> FeedPost:
    return FeedPost(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        user_name=str(row["user_name"]),
        user_avatar=str(row.get("user_avatar") or ""),
        site_id=int(row["site_id"]),
        site_name=str(row["site_name"]),
        caption=str(row["caption"]),
        media=tuple(row.get("media") or ()),
        created_at=str(row["created_at"]),
        likes_count=int(row.get("likes_count", 0)),
        comments=tuple(
            FeedComment(
                id=int(c["id"]),
                user_name=str(c["user_name"]),
                comment=str(c["comment"]),
                created_at=str(c["created_at"]),
            )
            for c in row.get("comments") or ()
        ),
    )


def load_feed(path: Path | None = None) -> tuple[FeedPost, ...]:
    """Read feed posts from the bundled JSON file."""
    with (path or DEFAULT_FEED_PATH).open(encoding="utf-8") as f:
        rows = json.load(f)
    return tuple(_post_from_dict(row) for row in rows)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def toggle_like(post: FeedPost, liked: bool) -> tuple[FeedPost, bool]:
    """Flip the like state. Returns the updated post and the new liked flag."""
    delta = -1 if liked else 1
    return replace(post, likes_count=max(0, post.likes_count + delta)), not liked


def add_comment(
    post: FeedPost, user_name: str, text: str, now: datetime | None = None
) -> FeedPost:
    if not text.strip():
        raise FeedError("Comment cannot be empty")
    next_id = max((c.id for c in post.comments), default=0) + 1
    comment = FeedComment(
        id=next_id,
        user_name=user_name,
        comment=text.strip(),
        created_at=(now or _now()).isoformat(),
    )
    return replace(post, comments=post.comments + (comment,))


def create_post(
    posts: Sequence[FeedPost],
    user: User,
    site: DiveSite | None,
    caption: str,
    media: Sequence[str] = (),
    now: datetime | None = None,
) -> tuple[FeedPost, ...]:
    """Prepend a new post by `user` about `site`.

    Raises:
        FeedError: When the caption is blank or no site was chosen.
    """
    if not caption.strip() or site is None:
        raise FeedError("Please add a caption and select a dive site")
    post = FeedPost(
        id=max((p.id for p in posts), default=0) + 1,
        user_id=user.id,
        user_name=user.name,
        user_avatar="",
        site_id=site.id,
        site_name=site.name,
        caption=caption.strip(),
        media=tuple(media) or (PLACEHOLDER_MEDIA,),
        created_at=(now or _now()).isoformat(),
        likes_count=0,
    )
    return (post, *posts)


def format_time_ago(created_at: str, now: datetime | None = None) -> str:
    """Relative label: "Just now", "5h ago", "3d ago", or the ISO date after a week."""
    created = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    hours = int(((now or _now()) - created).total_seconds() // 3600)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return created.date().isoformat()
