"""Address canonicalization from raw input shapes."""

import logging
import re
from typing import Any, Optional

from routematch.address.models import (
    CanonicalAddress,
    FreeFormAddress,
    RawAddressInput,
    ScannedAddress,
    StoredAddress,
    parse_raw_input,
)

logger = logging.getLogger(__name__)


class AddressCanonicalizer:
    """Parses raw address representations into CanonicalAddress values."""

    # "MI 48201", "mi48201"; first hit anywhere in the segment
    STATE_ZIP_PATTERN = re.compile(r"([A-Za-z]{2})\s*(\d{5})")

    # Free-form strings need street plus at least two more segments to split
    MIN_FREE_FORM_SEGMENTS = 3

    def canonicalize(self, raw: Any) -> Optional[CanonicalAddress]:
        """
        Canonicalize a raw address.

        Args:
            raw: A str, a mapping, or one of the RawAddressInput variants

        Returns:
            CanonicalAddress, or None if no usable street was found
        """
        address_input = parse_raw_input(raw)
        if address_input is None:
            logger.debug("No address input to canonicalize")
            return None

        canonical = self._dispatch(address_input)
        if canonical is None or not canonical.street:
            logger.debug(f"No street in {type(address_input).__name__}")
            return None
        return canonical

    def _dispatch(self, address_input: RawAddressInput) -> Optional[CanonicalAddress]:
        if isinstance(address_input, FreeFormAddress):
            return self._from_free_form(address_input)
        if isinstance(address_input, ScannedAddress):
            return self._from_scanned(address_input)
        if isinstance(address_input, StoredAddress):
            return self._from_stored(address_input)
        raise TypeError(f"Unknown address shape: {type(address_input).__name__}")

    def _from_free_form(self, address_input: FreeFormAddress) -> Optional[CanonicalAddress]:
        """Street plus an undecomposed city/state/zip remainder."""
        text = address_input.text.strip()
        if not text.replace(",", "").strip():
            return None

        parts = [p.strip() for p in text.split(",")]
        if len(parts) >= self.MIN_FREE_FORM_SEGMENTS:
            return CanonicalAddress(street=parts[0], city=", ".join(parts[1:]))
        return CanonicalAddress(street=text)

    def _from_scanned(self, address_input: ScannedAddress) -> CanonicalAddress:
        return CanonicalAddress(
            street=address_input.street.strip(),
            city=address_input.city.strip(),
            state=address_input.state.strip(),
            zip=address_input.zip.strip(),
        )

    def _from_stored(self, address_input: StoredAddress) -> CanonicalAddress:
        """Split the combined field, then fill gaps from explicit fields."""
        parts = [p.strip() for p in address_input.combined.split(",")]
        street = parts[0]
        city = state = zip_code = ""

        if len(parts) >= 2:
            last_part = parts[-1]
            match = self.STATE_ZIP_PATTERN.search(last_part)
            if match:
                state = match.group(1)
                zip_code = match.group(2)
                city = last_part.replace(match.group(0), "", 1).strip()
                if not city and len(parts) >= 3:
                    city = parts[-2]

        return CanonicalAddress(
            street=street,
            city=city or address_input.city.strip(),
            state=state or address_input.state.strip(),
            zip=zip_code or address_input.zip.strip(),
        )


_canonicalizer = AddressCanonicalizer()


def canonicalize(raw: Any) -> Optional[CanonicalAddress]:
    """Canonicalize a raw address with the shared canonicalizer."""
    return _canonicalizer.canonicalize(raw)
