"""Tests for dive log entries and profile stats."""
import pytest

from divepal.divelog import (
    DiveLogError,
    export_csv,
    find_sites,
    new_log_entry,
    profile_stats,
    save_site,
    toggle_completed,
)


class TestFindSites:
    def test_matches_name_or_location(self, catalog):
        assert [s.id for s in find_sites(catalog, "manta")] == [3]
        assert [s.id for s in find_sites(catalog, "OCEAN")] == [1, 2, 3]

    def test_blank_returns_all(self, catalog):
        assert find_sites(catalog, "  ") == catalog


class TestNewLogEntry:
    def test_builds_entry(self, catalog):
        entry = new_log_entry(catalog[0], "2024-05-02", " great dive ", ["a.jpg"])
        assert entry.site_id == 1
        assert entry.site_name == "Warm Reef"
        assert entry.notes == "great dive"
        assert entry.photos == ("a.jpg",)

    def test_requires_site(self):
        with pytest.raises(DiveLogError, match="select a dive site"):
            new_log_entry(None, "2024-05-02")

    def test_requires_date(self, catalog):
        with pytest.raises(DiveLogError):
            new_log_entry(catalog[0], "")


def test_profile_stats(catalog):
    entries = [
        new_log_entry(catalog[0], "2024-05-01", photos=["a.jpg", "b.jpg"]),
        new_log_entry(catalog[0], "2024-05-02"),
        new_log_entry(catalog[2], "2024-05-03", photos=["c.jpg"]),
    ]
    stats = profile_stats(entries)
    assert stats.total_dives == 3
    assert stats.unique_sites == 2
    assert stats.photos == 3


def test_profile_stats_empty():
    stats = profile_stats([])
    assert (stats.total_dives, stats.unique_sites, stats.photos) == (0, 0, 0)


class TestSavedSites:
    def test_appends_in_order(self, catalog):
        saved = save_site((), catalog[2])
        saved = save_site(saved, catalog[0])
        assert [s.id for s in saved] == [3, 1]

    def test_saving_twice_is_a_no_op(self, catalog):
        saved = save_site(save_site((), catalog[0]), catalog[0])
        assert saved == (catalog[0],)


def test_toggle_completed_round_trip():
    completed, done = toggle_completed(frozenset(), 5)
    assert done and completed == {5}
    completed, done = toggle_completed(completed, 5)
    assert not done and completed == frozenset()


class TestExportCsv:
    def test_header_and_rows_sorted_by_date(self, catalog):
        entries = [
            new_log_entry(catalog[2], "2024-05-03", 'Manta "train", then drift'),
            new_log_entry(catalog[0], "2024-05-01", photos=["a.jpg", "b.jpg"]),
        ]
        lines = export_csv(entries).splitlines()
        assert lines[0] == "date,site_name,location,notes,photos"
        assert lines[1] == '2024-05-01,Warm Reef,"Nowhere, Ocean",,2'
        assert lines[2] == '2024-05-03,Manta Wall,"Nowhere, Ocean","Manta ""train"", then drift",0'

    def test_empty_log_has_only_header(self):
        assert export_csv([]) == "date,site_name,location,notes,photos\n"
