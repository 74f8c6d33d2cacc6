"""Address input shapes and the canonical address."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class FreeFormAddress:
    """Single comma-delimited address string."""

    text: str


@dataclass(frozen=True)
class ScannedAddress:
    """Structured fields produced by the scanning/OCR pipeline."""

    street: str
    city: str = ""
    state: str = ""
    zip: str = ""


@dataclass(frozen=True)
class StoredAddress:
    """Stored address record with a combined address field."""

    legal_address: str = ""
    normalized_address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    @property
    def combined(self) -> str:
        """Combined field, legal address preferred."""
        return self.legal_address or self.normalized_address


RawAddressInput = Union[FreeFormAddress, ScannedAddress, StoredAddress]


@dataclass(frozen=True)
class CanonicalAddress:
    """Decomposed street/city/state/zip address."""

    street: str
    city: str = ""
    state: str = ""
    zip: str = ""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def parse_raw_input(value: Any) -> Optional[RawAddressInput]:
    """
    Detect the shape of a raw address value.

    Strings become FreeFormAddress. Mappings with a street become
    ScannedAddress, mappings with a legal or normalized address become
    StoredAddress. Variants pass through unchanged.

    Returns:
        The tagged input, or None when nothing usable was supplied
    """
    if value is None:
        return None

    if isinstance(value, (FreeFormAddress, ScannedAddress, StoredAddress)):
        return value

    if isinstance(value, str):
        return FreeFormAddress(text=value) if value.strip() else None

    if isinstance(value, Mapping):
        if value.get("street"):
            return ScannedAddress(
                street=_text(value.get("street")),
                city=_text(value.get("city")),
                state=_text(value.get("state")),
                zip=_text(value.get("zip")),
            )
        if value.get("legal_address") or value.get("normalized_address"):
            return StoredAddress(
                legal_address=_text(value.get("legal_address")),
                normalized_address=_text(value.get("normalized_address")),
                city=_text(value.get("city")),
                state=_text(value.get("state")),
                zip=_text(value.get("zip")),
            )
        return None

    raise TypeError(f"Unsupported address input: {type(value).__name__}")
