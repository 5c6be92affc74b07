from enum import Enum


class Column(str, Enum):
    """Spreadsheet headers the normalizer reads. Other columns are ignored."""

    THERAPIST_NAME = "Therapist Name"
    SPECIALTY_GROUP = "Specialty Group"
    CLINIC_NAME = "Clinic Name"
    ADDRESS = "Address"
    NOTES = "Notes"


class LoadState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
