"""DCN (document control number) to address matching."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

import jellyfish

from routematch.address.match_key import key_for, street_segment
from routematch.address.models import ScannedAddress
from routematch.config import get_settings
from routematch.monitoring import MetricsCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressMatch:
    """Best address for an uploaded DCN."""

    address_id: Any
    confidence: float
    match_type: str


def string_similarity(str1: str, str2: str) -> float:
    """Levenshtein similarity: 1 - distance / longer length."""
    if not str1 or not str2:
        return 0.0
    if str1 == str2:
        return 1.0
    distance = jellyfish.levenshtein_distance(str1, str2)
    return 1 - distance / max(len(str1), len(str2))


class DCNMatcher:
    """Links uploaded DCN rows to existing route addresses."""

    EXACT = "exact"
    STREET_EXACT = "street_exact"
    FUZZY = "fuzzy"

    def __init__(self):
        self._settings = get_settings().matching
        self._metrics = MetricsCollector()

    def uploaded_key(self, raw_address: str, raw_city: str = "") -> Optional[str]:
        """Key for an uploaded row; uploads carry no state or zip."""
        return key_for(
            ScannedAddress(
                street=raw_address or "",
                city=raw_city or "",
                state=self._settings.default_state,
                zip="",
            )
        )

    def find_address_match(
        self,
        addresses: Iterable[Mapping[str, Any]],
        raw_address: str,
        raw_city: str = "",
    ) -> Optional[AddressMatch]:
        """
        Find the best address for a DCN.

        Tried per address: exact key, exact street segment, then fuzzy
        street similarity. Addresses that already have a DCN are skipped.

        Args:
            addresses: Address records with id, normalized_key and has_dcn
            raw_address: Street text from the upload
            raw_city: City text from the upload

        Returns:
            AddressMatch, or None if nothing scored above the fuzzy floor
        """
        uploaded = self.uploaded_key(raw_address, raw_city)
        if uploaded is None:
            logger.debug("DCN row has no street, skipping match")
            self._metrics.record_dcn_match("none")
            return None

        upload_street = street_segment(uploaded)
        best_match: Optional[AddressMatch] = None
        best_score = 0.0

        for addr in addresses:
            if addr.get("has_dcn"):
                continue

            addr_key = addr.get("normalized_key") or ""
            if addr_key == uploaded:
                self._metrics.record_dcn_match(self.EXACT)
                return AddressMatch(addr.get("id"), 1.0, self.EXACT)

            addr_street = street_segment(addr_key)
            if addr_street == upload_street and len(addr_street) > self._settings.street_exact_min_length:
                score = self._settings.street_exact_confidence
                if score > best_score:
                    best_score = score
                    best_match = AddressMatch(addr.get("id"), score, self.STREET_EXACT)
                continue

            similarity = string_similarity(addr_street, upload_street)
            if similarity > best_score and similarity > self._settings.fuzzy_floor:
                best_score = similarity
                best_match = AddressMatch(addr.get("id"), similarity, self.FUZZY)

        self._metrics.record_dcn_match(best_match.match_type if best_match else "none")
        return best_match

    def review_status(self, confidence: float) -> str:
        """auto_match, pending_review or no_match for a confidence."""
        if confidence >= self._settings.auto_match_threshold:
            return "auto_match"
        if confidence >= self._settings.pending_review_threshold:
            return "pending_review"
        return "no_match"
