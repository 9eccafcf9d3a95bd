"""Editable diver profile shown on the profile screen."""

from dataclasses import replace

from divepal.models import User, UserProfile


class ProfileError(Exception):
    """Profile edit rejected."""


def default_profile(user: User) -> UserProfile:
    return UserProfile(name=user.name)


def edit_profile(
    profile: UserProfile,
    name: str,
    bio: str = "",
    location: str = "",
    certification: str = "",
) -> UserProfile:
    """Apply edited fields, trimming whitespace.

    Raises:
        ProfileError: When the display name is blank.
    """
    if not name.strip():
        raise ProfileError("Name cannot be empty")
    return replace(
        profile,
        name=name.strip(),
        bio=bio.strip(),
        location=location.strip(),
        certification=certification.strip(),
    )
