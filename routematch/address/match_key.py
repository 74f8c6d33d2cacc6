"""Match key generation for duplicate detection and DCN matching."""

import re
from typing import Any, Optional

from routematch.address.canonicalizer import canonicalize
from routematch.address.models import CanonicalAddress


class MatchKeyGenerator:
    """Derives comparable keys from canonical addresses."""

    # Applied in order as plain substring replacements on the squashed
    # street. No output here contains a later trigger.
    STREET_DESIGNATORS = (
        ("street", "st"),
        ("avenue", "ave"),
        ("boulevard", "blvd"),
        ("drive", "dr"),
        ("road", "rd"),
        ("lane", "ln"),
        ("court", "ct"),
        ("place", "pl"),
        ("circle", "cir"),
        ("apartment", "apt"),
        ("suite", "ste"),
        ("unit", "unit"),
        ("way", "way"),
    )

    STATE_NAMES = (
        (re.compile("MICHIGAN", re.IGNORECASE), "MI"),
        (re.compile("OHIO", re.IGNORECASE), "OH"),
    )

    _NON_ALNUM = re.compile(r"[^a-z0-9]")
    _NON_ALPHA = re.compile(r"[^a-z]")
    _NON_DIGIT = re.compile(r"\D")

    def generate(self, address: CanonicalAddress) -> str:
        """
        Generate the match key for an address.

        Args:
            address: Canonical address

        Returns:
            Key of the form "<street>-<city>-<state>-<zip>"
        """
        return "-".join(
            [
                self.normalize_street(address.street),
                self.normalize_city(address.city),
                self.normalize_state(address.state),
                self.normalize_zip(address.zip),
            ]
        )

    def normalize_street(self, street: str) -> str:
        normalized = self._NON_ALNUM.sub("", (street or "").lower())
        for long_form, short_form in self.STREET_DESIGNATORS:
            normalized = normalized.replace(long_form, short_form)
        return normalized

    def normalize_city(self, city: str) -> str:
        return self._NON_ALPHA.sub("", (city or "").lower())

    def normalize_state(self, state: str) -> str:
        normalized = (state or "").upper()
        for pattern, code in self.STATE_NAMES:
            normalized = pattern.sub(code, normalized, count=1)
        return normalized

    def normalize_zip(self, zip_code: str) -> str:
        return self._NON_DIGIT.sub("", zip_code or "")[:5]


_generator = MatchKeyGenerator()


def match_key(address: CanonicalAddress) -> str:
    """Match key for a canonical address."""
    return _generator.generate(address)


def key_for(raw: Any) -> Optional[str]:
    """Canonicalize a raw address and key it; None when it has no street."""
    address = canonicalize(raw)
    if address is None:
        return None
    return _generator.generate(address)


def street_segment(key: Optional[str]) -> str:
    """Street portion of a match key."""
    return (key or "").split("-")[0]
