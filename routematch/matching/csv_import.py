"""DCN upload CSV parsing with flexible headers."""

import csv
import io
import re
from types import MappingProxyType
from typing import Optional

COLUMN_MAPPINGS = MappingProxyType(
    {
        "dcn": ("dcn", "document_control_number", "doc_number", "control_number", "documentcontrolnumber"),
        "address": ("address", "street", "street_address", "service_address", "streetaddress"),
        "city": ("city", "town"),
        "defendant_first_name": (
            "defendant_first_name", "first_name", "defendant_first", "firstname", "defendantfirst",
        ),
        "defendant_last_name": (
            "defendant_last_name", "last_name", "defendant_last", "lastname", "defendantlast",
        ),
        "court_name": ("court_name", "court", "courtname"),
        "case_number": ("case_number", "case_no", "case", "casenumber"),
    }
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _squash(header: str) -> str:
    return _NON_ALNUM.sub("", header.lower())


def map_column_name(header: str) -> Optional[str]:
    """Canonical field for a CSV header, or None if unrecognised."""
    normalized = _squash(header)
    for field_name, aliases in COLUMN_MAPPINGS.items():
        if any(_squash(alias) == normalized for alias in aliases):
            return field_name
    return None


def parse_dcn_csv(text: str) -> list[dict[str, str]]:
    """
    Parse an uploaded DCN CSV.

    Quoted fields may contain commas, newlines and doubled quotes. Known
    headers are renamed to canonical fields; unknown ones are kept as-is.

    Returns:
        One dict per data row, [] without a header and at least one row
    """
    reader = csv.reader(io.StringIO(text or "", newline=""))
    rows = [row for row in reader if any(cell.strip() for cell in row)]
    if len(rows) < 2:
        return []

    headers = [h.strip() for h in rows[0]]
    mapped = [map_column_name(h) or h for h in headers]

    records = []
    for values in rows[1:]:
        records.append(
            {
                header: (values[idx].strip() if idx < len(values) else "")
                for idx, header in enumerate(mapped)
            }
        )
    return records
