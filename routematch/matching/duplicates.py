"""Duplicate address detection with proximity corroboration."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from routematch.address.match_key import key_for
from routematch.geo.proximity import GeoPoint, ProximityVerifier
from routematch.monitoring import MetricsCollector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateCandidate:
    """Known address sharing the candidate's match key."""

    address_id: Any
    match_key: str
    distance_feet: Optional[int]
    is_confirmed: Optional[bool]


def _record_key(record: Any) -> Optional[str]:
    if isinstance(record, Mapping) and record.get("normalized_key"):
        return record["normalized_key"]
    return key_for(record)


def _record_point(record: Any) -> Optional[GeoPoint]:
    if not isinstance(record, Mapping):
        return None
    return GeoPoint(latitude=record.get("latitude"), longitude=record.get("longitude"))


class DuplicateDetector:
    """Finds known addresses that collide with a new one."""

    def __init__(self, verifier: Optional[ProximityVerifier] = None):
        self._verifier = verifier or ProximityVerifier()
        self._metrics = MetricsCollector()

    def find_duplicates(
        self,
        candidate: Any,
        known: Iterable[Mapping[str, Any]],
        location: Optional[GeoPoint] = None,
    ) -> list[DuplicateCandidate]:
        """
        Find known addresses with the candidate's match key.

        Key equality alone does not prove a duplicate, so each hit carries
        the distance between the candidate's fix and the known address.

        Args:
            candidate: Raw address to check
            known: Address records with id, normalized_key or address
                fields, and optional latitude/longitude
            location: Fix for the candidate, if one was taken

        Returns:
            DuplicateCandidate per collision; [] if the candidate has no key
        """
        key = key_for(candidate)
        self._metrics.record_canonicalization(key is not None)
        if key is None:
            return []

        duplicates = []
        for record in known:
            if _record_key(record) != key:
                continue

            result = self._verifier.verify(location, _record_point(record))
            self._metrics.record_duplicate(result.is_within_threshold)
            duplicates.append(
                DuplicateCandidate(
                    address_id=record.get("id"),
                    match_key=key,
                    distance_feet=result.distance_feet,
                    is_confirmed=result.is_within_threshold,
                )
            )

        if duplicates:
            logger.info(f"Found {len(duplicates)} duplicate(s) for key {key}")
        return duplicates

    def group_by_key(self, records: Iterable[Any]) -> dict[str, list[Any]]:
        """Group raw records by match key, dropping ones without a key."""
        groups: dict[str, list[Any]] = {}
        for record in records:
            key = _record_key(record)
            self._metrics.record_canonicalization(key is not None)
            if key is None:
                continue
            groups.setdefault(key, []).append(record)
        return groups
