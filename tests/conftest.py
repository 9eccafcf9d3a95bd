"""Shared fixtures."""
import pytest

from divepal.models import DiveSite


def build_site(**overrides) -> DiveSite:
    fields = dict(
        id=1,
        name="Test Reef",
        location="Nowhere, Ocean",
        lat=0.0,
        lon=0.0,
        temp_min=24.0,
        temp_max=28.0,
        marine_life=("sea turtles", "Reef Sharks"),
        coral_type=("table corals",),
        visibility_min=20.0,
        site_type=("reef",),
        access_type="boat",
        entry_difficulty="beginner",
    )
    fields.update(overrides)
    return DiveSite(**fields)


@pytest.fixture
def catalog():
    """Small hand-built catalog covering every filter field."""
    return (
        build_site(id=1, name="Warm Reef"),
        build_site(
            id=2,
            name="Cold Wreck",
            temp_min=10.0,
            temp_max=16.0,
            marine_life=("seals",),
            coral_type=(),
            visibility_min=8.0,
            site_type=("wreck",),
            access_type="shore",
            entry_difficulty="advanced",
        ),
        build_site(
            id=3,
            name="Manta Wall",
            temp_min=20.0,
            temp_max=27.0,
            marine_life=("manta rays",),
            coral_type=("soft corals",),
            visibility_min=30.0,
            site_type=("wall", "drift"),
            access_type="boat",
            entry_difficulty="intermediate",
        ),
    )
