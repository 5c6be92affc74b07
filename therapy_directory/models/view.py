from typing import List

from pydantic import BaseModel, ConfigDict

from .entry import DirectoryEntry

ALL = "All"  # Filter sentinel meaning "no constraint on this dimension"


class FilterState(BaseModel):
    """The three pieces of UI state that drive a render."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    specialty: str = ALL
    location: str = ALL


class DirectoryView(BaseModel):
    """Everything a renderer needs for one pass: option lists and visible rows."""

    model_config = ConfigDict(frozen=True)

    specialty_options: List[str]
    location_options: List[str]
    visible_entries: List[DirectoryEntry]
