"""Guided questionnaire: prompt list and parsing of raw answers into a PreferenceQuery."""

import math
from collections.abc import Iterable, Mapping
from typing import TypedDict

from divepal.models import ACCESS_TYPES, ENTRY_DIFFICULTIES, PreferenceQuery

SKIP_WORD = "skip"
ANSWER_KEY_PREFIX = "answer_"


class Question(TypedDict):
    id: str
    kind: str  # "number", "text", or "select"


QUESTIONS: tuple[Question, ...] = (
    {"id": "temp_min", "kind": "number"},
    {"id": "temp_max", "kind": "number"},
    {"id": "marine_life", "kind": "text"},
    {"id": "coral_type", "kind": "text"},
    {"id": "visibility_min", "kind": "number"},
    {"id": "site_type", "kind": "text"},
    {"id": "access_difficulty", "kind": "select"},
)


def _is_skipped(text: str | None) -> bool:
    return text is None or not text.strip() or text.strip().lower() == SKIP_WORD


def parse_number(text: str | None) -> float | None:
    """Parse a numeric answer. Blank, "skip", and non-numeric text yield None."""
    if _is_skipped(text):
        return None
    assert text is not None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def split_terms(text: str | None) -> tuple[str, ...]:
    """Split a comma-separated answer into trimmed, non-empty terms."""
    if _is_skipped(text):
        return ()
    assert text is not None
    return tuple(part.strip() for part in text.split(",") if part.strip())


def _choice(value: str | None, allowed: tuple[str, ...]) -> str | None:
    if not value:
        return None
    value = value.strip().lower()
    return value if value in allowed else None


def build_query(answers: Mapping[str, str | None]) -> PreferenceQuery:
    """Turn raw questionnaire answers (keyed by question id) into a query.

    Select answers use the keys `access_type` and `entry_difficulty`; unknown
    or empty choices are dropped.
    """
    return PreferenceQuery(
        temp_min=parse_number(answers.get("temp_min")),
        temp_max=parse_number(answers.get("temp_max")),
        marine_life=split_terms(answers.get("marine_life")),
        coral_type=split_terms(answers.get("coral_type")),
        visibility_min=parse_number(answers.get("visibility_min")),
        site_type=split_terms(answers.get("site_type")),
        access_type=_choice(answers.get("access_type"), ACCESS_TYPES),
        entry_difficulty=_choice(answers.get("entry_difficulty"), ENTRY_DIFFICULTIES),
    )


def answer_key(question_id: str) -> str:
    """Widget key holding the raw text typed for `question_id`."""
    return f"{ANSWER_KEY_PREFIX}{question_id}"


def answer_keys(keys: Iterable[object]) -> list[str]:
    """The answer widget keys among `keys`, to be cleared on a new search."""
    return [k for k in keys if isinstance(k, str) and k.startswith(ANSWER_KEY_PREFIX)]

def map_filter_query(
    marine_life: str = "",
    difficulty: str = "",
    visibility: float | None = None,
    site_type: str = "",
) -> PreferenceQuery:
    """Query for the map's filter panel. A visibility of 0 means no floor."""
    return PreferenceQuery(
        marine_life=split_terms(marine_life),
        visibility_min=visibility or None,
        site_type=split_terms(site_type),
        entry_difficulty=_choice(difficulty, ENTRY_DIFFICULTIES),
    )
