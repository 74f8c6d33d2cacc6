"""Two-line upper-case address formatting for display and receipts."""

from typing import Any

from routematch.address.models import (
    FreeFormAddress,
    ScannedAddress,
    parse_raw_input,
)


def format_address(raw: Any) -> tuple[str, str]:
    """
    Format an address as (line1, line2).

    Line 1: 28175 HAGGERTY ROAD
    Line 2: NOVI, MI 48377
    """
    address_input = parse_raw_input(raw)
    if address_input is None:
        return "", ""

    if isinstance(address_input, FreeFormAddress):
        parts = [p.strip() for p in address_input.text.split(",")]
        if len(parts) >= 3:
            return parts[0].upper(), ", ".join(parts[1:]).upper()
        return address_input.text.strip().upper(), ""

    if isinstance(address_input, ScannedAddress):
        street = address_input.street
    else:
        street = address_input.combined.split(",")[0]

    city = address_input.city.strip().upper()
    state = address_input.state.strip().upper()
    zip_code = address_input.zip.strip()

    line2 = f"{city}, {state} {zip_code}".strip() if city and state else zip_code
    return street.strip().upper(), line2


def format_single_line(raw: Any) -> str:
    """Format an address on one line, lines joined by a comma."""
    line1, line2 = format_address(raw)
    if not line2:
        return line1
    if not line1:
        return line2
    return f"{line1}, {line2}"
