from typing import Iterable, List, Sequence

from therapy_directory.models.entry import DirectoryEntry
from therapy_directory.models.view import ALL, DirectoryView, FilterState


def specialty_options(entries: Iterable[DirectoryEntry]) -> List[str]:
    """The "All" sentinel followed by every distinct specialty, sorted."""
    distinct = {specialty for entry in entries for specialty in entry.specialties}
    # A literal "All" value folds into the sentinel; it cannot be selected on its own
    return [ALL] + sorted(distinct - {ALL})


def location_options(entries: Iterable[DirectoryEntry]) -> List[str]:
    """The "All" sentinel followed by every distinct clinic, sorted."""
    # Same folding of a literal "All" as specialty_options
    return [ALL] + sorted({entry.location for entry in entries} - {ALL})


def matches(entry: DirectoryEntry, filters: FilterState) -> bool:
    if filters.search.lower() not in entry.name.lower():
        return False
    if filters.specialty != ALL and filters.specialty not in entry.specialties:
        return False
    if filters.location != ALL and entry.location != filters.location:
        return False
    return True


def filter_entries(
    entries: Iterable[DirectoryEntry], filters: FilterState
) -> List[DirectoryEntry]:
    return [entry for entry in entries if matches(entry, filters)]


def derive_view(
    entries: Sequence[DirectoryEntry], filters: FilterState = FilterState()
) -> DirectoryView:
    """Computes option lists and visible entries for one render.

    Pure: the result depends only on the arguments, and is recomputed in full
    on every call.
    """
    return DirectoryView(
        specialty_options=specialty_options(entries),
        location_options=location_options(entries),
        visible_entries=filter_entries(entries, filters),
    )
