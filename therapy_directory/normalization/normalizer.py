from typing import Dict, Iterable, List, Mapping, Optional

from loguru import logger

from therapy_directory.models.entry import DirectoryEntry
from therapy_directory.models.enums import Column
from therapy_directory.parsing.csv_parser import parse_csv


class NormalizationError(Exception):
    """Custom exception for data normalization errors."""

    pass


def _cell(row: Mapping[str, str], column: Column) -> str:
    value = row.get(column.value)
    return value.strip() if value else ""


class Normalizer:
    """Folds spreadsheet rows into directory entries keyed by therapist name."""

    def normalize(self, rows: Iterable[Mapping[str, str]]) -> List[DirectoryEntry]:
        """Groups rows into entries, merging repeated names.

        A row missing a name, specialty or clinic (after trimming) is skipped
        and touches no entry. The first row seen for a name fixes its location,
        address and notes; later rows for that name only add specialties.

        Returns:
            Entries in first-seen order of distinct names.
        """
        entries: Dict[str, DirectoryEntry] = {}
        skipped = 0
        total = 0

        try:
            for row in rows:
                total += 1
                name = _cell(row, Column.THERAPIST_NAME)
                specialty = _cell(row, Column.SPECIALTY_GROUP)
                location = _cell(row, Column.CLINIC_NAME)

                if not (name and specialty and location):
                    skipped += 1
                    continue

                entry = entries.get(name)
                if entry is None:
                    entries[name] = DirectoryEntry(
                        name=name,
                        specialties=[specialty],
                        location=location,
                        address=_cell(row, Column.ADDRESS),
                        notes=_cell(row, Column.NOTES) or None,
                    )
                elif specialty not in entry.specialties:
                    entry.specialties.append(specialty)
        except Exception as e:
            raise NormalizationError(f"Failed to normalize row {total}: {e}") from e

        if skipped:
            logger.debug(f"Skipped {skipped} row(s) missing name, specialty or clinic.")
        logger.info(
            f"Normalization complete. {total} row(s) produced {len(entries)} directory entries."
        )
        return list(entries.values())


def normalize_csv(text: str, normalizer: Optional[Normalizer] = None) -> List[DirectoryEntry]:
    """Parses CSV text and normalizes it in one step."""
    return (normalizer or Normalizer()).normalize(parse_csv(text))
