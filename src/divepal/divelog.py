"""Dive log entries and the profile statistics derived from them."""

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass

from divepal.models import DiveLogEntry, DiveSite


class DiveLogError(Exception):
    """Dive log entry rejected."""


@dataclass(frozen=True)
class ProfileStats:
    total_dives: int
    unique_sites: int
    photos: int


def find_sites(catalog: Sequence[DiveSite], text: str) -> tuple[DiveSite, ...]:
    """Case-insensitive substring match on site name or location."""
    needle = text.strip().lower()
    if not needle:
        return tuple(catalog)
    return tuple(
        site
        for site in catalog
        if needle in site.name.lower() or needle in site.location.lower()
    )


def new_log_entry(
    site: DiveSite | None,
    date: str,
    notes: str = "",
    photos: Sequence[str] = (),
) -> DiveLogEntry:
    """Build a log entry for `site` on `date` ("YYYY-MM-DD").

    Raises:
        DiveLogError: When no site was chosen or the date is blank.
    """
    if site is None:
        raise DiveLogError("Please select a dive site before logging your dive")
    if not date.strip():
        raise DiveLogError("Please enter the dive date")
    return DiveLogEntry(
        site_id=site.id,
        site_name=site.name,
        location=site.location,
        date=date.strip(),
        notes=notes.strip(),
        photos=tuple(photos),
    )


def profile_stats(entries: Sequence[DiveLogEntry]) -> ProfileStats:
    sites = {e.site_id if e.site_id is not None else e.site_name for e in entries}
    return ProfileStats(
        total_dives=len(entries),
        unique_sites=len(sites),
        photos=sum(len(e.photos) for e in entries),
    )


def save_site(saved: Sequence[DiveSite], site: DiveSite) -> tuple[DiveSite, ...]:
    """Append `site` to the saved list unless a site with its id is already there."""
    if any(s.id == site.id for s in saved):
        return tuple(saved)
    return (*saved, site)


def toggle_completed(completed: frozenset[int], site_id: int) -> tuple[frozenset[int], bool]:
    """Flip the completed mark for `site_id`. Returns the new set and the new mark."""
    if site_id in completed:
        return completed - {site_id}, False
    return completed | {site_id}, True


CSV_COLUMNS = ("date", "site_name", "location", "notes", "photos")


def export_csv(entries: Sequence[DiveLogEntry]) -> str:
    """Render dive log entries as CSV text with a header row, oldest first."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for e in sorted(entries, key=lambda e: e.date):
        writer.writerow((e.date, e.site_name, e.location, e.notes, len(e.photos)))
    return buf.getvalue()
