from typing import Dict, List

from loguru import logger

# Type alias for one parsed spreadsheet line: header -> raw cell value
Row = Dict[str, str]


def parse_csv(text: str) -> List[Row]:
    """Splits published-sheet CSV text into rows keyed by header.

    Lines are split on newlines and cells on bare commas. Quoted fields are not
    understood, so a comma inside a value (e.g. "123 Main St, Suite 2") shifts
    every later cell on that line one column to the right.

    Args:
        text: The raw response body. The first line is the header row.

    Returns:
        One dict per line after the header, with trimmed headers and values.
        Cells missing at the end of a short line are "".
    """
    lines = text.split("\n")
    headers = [header.strip() for header in lines[0].split(",")]
    if not any(headers):
        logger.warning("CSV text has no header row; nothing to parse.")
        return []

    rows: List[Row] = []
    for line in lines[1:]:
        values = line.split(",")
        row: Row = {}
        for index, header in enumerate(headers):
            row[header] = values[index].strip() if index < len(values) else ""
        rows.append(row)

    logger.debug(f"Parsed {len(rows)} CSV line(s) with headers: {headers}")
    return rows
