# therapy_directory/models/entry.py
from typing import List, Optional

from pydantic import BaseModel, Field


class DirectoryEntry(BaseModel):
    """A therapist record, deduplicated by name across spreadsheet rows."""

    name: str = Field(..., min_length=1, description="Therapist name; the dedup key.")
    specialties: List[str] = Field(
        default_factory=list,
        description="Specialty tags in the order they were first seen.",
    )
    location: str = Field(..., min_length=1, description="Clinic name from the first row seen.")
    address: str = ""  # First row seen wins
    notes: Optional[str] = None  # First row seen wins; empty becomes None
