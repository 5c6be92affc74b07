import pytest

from therapy_directory.filtering.view import (
    derive_view,
    filter_entries,
    location_options,
    matches,
    specialty_options,
)
from therapy_directory.models.entry import DirectoryEntry
from therapy_directory.models.view import ALL, FilterState


@pytest.fixture
def entries():
    return [
        DirectoryEntry(name="Jane Doe", specialties=["DBT", "CBT"], location="Clinic B"),
        DirectoryEntry(name="John Roe", specialties=["EMDR"], location="Clinic A"),
        DirectoryEntry(name="Janet Smith", specialties=["CBT"], location="Clinic A"),
    ]


def test_specialty_options_sorted_after_sentinel():
    entries = [
        DirectoryEntry(name="A", specialties=["CBT", "DBT"], location="X"),
        DirectoryEntry(name="B", specialties=["EMDR"], location="X"),
    ]
    assert specialty_options(entries) == ["All", "CBT", "DBT", "EMDR"]


def test_location_options_are_distinct_and_sorted(entries):
    assert location_options(entries) == ["All", "Clinic A", "Clinic B"]


def test_options_for_empty_directory():
    assert specialty_options([]) == [ALL]
    assert location_options([]) == [ALL]


def test_literal_all_value_is_not_listed_twice():
    entries = [DirectoryEntry(name="A", specialties=["All", "CBT"], location="All")]
    assert specialty_options(entries) == ["All", "CBT"]
    assert location_options(entries) == ["All"]


def test_default_filters_show_everything(entries):
    view = derive_view(entries)
    assert view.visible_entries == entries


def test_search_is_case_insensitive_substring_on_name(entries):
    visible = filter_entries(entries, FilterState(search="JANE DOE"))
    assert [e.name for e in visible] == ["Jane Doe"]
    visible = filter_entries(entries, FilterState(search="jOhN"))
    assert [e.name for e in visible] == ["John Roe"]
    visible = filter_entries(entries, FilterState(search="jan"))
    assert [e.name for e in visible] == ["Jane Doe", "Janet Smith"]


def test_search_does_not_look_at_other_fields(entries):
    assert filter_entries(entries, FilterState(search="clinic")) == []
    assert filter_entries(entries, FilterState(search="cbt")) == []


def test_specialty_filter_is_exact(entries):
    visible = filter_entries(entries, FilterState(specialty="CBT"))
    assert [e.name for e in visible] == ["Jane Doe", "Janet Smith"]
    assert filter_entries(entries, FilterState(specialty="cbt")) == []


def test_location_filter_is_exact(entries):
    visible = filter_entries(entries, FilterState(location="Clinic A"))
    assert [e.name for e in visible] == ["John Roe", "Janet Smith"]
    assert filter_entries(entries, FilterState(location="Clinic")) == []


def test_filters_combine(entries):
    filters = FilterState(search="jan", specialty="CBT", location="Clinic A")
    assert [e.name for e in filter_entries(entries, filters)] == ["Janet Smith"]
    assert matches(entries[2], filters)
    assert not matches(entries[0], filters)


def test_filtering_is_idempotent(entries):
    filters = FilterState(search="j", specialty="CBT")
    once = filter_entries(entries, filters)
    assert filter_entries(once, filters) == once


def test_options_ignore_active_filters(entries):
    view = derive_view(entries, FilterState(search="zzz"))
    assert view.visible_entries == []
    assert view.specialty_options == ["All", "CBT", "DBT", "EMDR"]
    assert view.location_options == ["All", "Clinic A", "Clinic B"]


def test_derive_view_is_pure(entries):
    filters = FilterState(specialty="EMDR")
    assert derive_view(entries, filters) == derive_view(entries, filters)
    assert [e.name for e in entries] == ["Jane Doe", "John Roe", "Janet Smith"]
