"""Address matching metrics collection."""

from prometheus_client import Counter


# Counters
addresses_canonicalized = Counter(
    "routematch_addresses_canonicalized_total",
    "Raw addresses run through canonicalization",
    ["outcome"],
)

dcn_matches = Counter(
    "routematch_dcn_matches_total",
    "DCN match attempts by result",
    ["match_type"],
)

duplicate_checks = Counter(
    "routematch_duplicate_checks_total",
    "Duplicate candidates found by proximity outcome",
    ["outcome"],
)

location_errors = Counter(
    "routematch_location_errors_total",
    "Failed device location requests",
    ["code"],
)


class MetricsCollector:
    """Collects and exposes address matching metrics."""

    def record_canonicalization(self, has_key: bool):
        """Record a canonicalization outcome."""
        addresses_canonicalized.labels(outcome="keyed" if has_key else "absent").inc()

    def record_dcn_match(self, match_type: str):
        """Record a DCN match attempt."""
        dcn_matches.labels(match_type=match_type).inc()

    def record_duplicate(self, is_confirmed):
        """Record a duplicate candidate and how proximity judged it."""
        if is_confirmed is None:
            outcome = "unverified"
        else:
            outcome = "confirmed" if is_confirmed else "disputed"
        duplicate_checks.labels(outcome=outcome).inc()

    def record_location_error(self, code: str):
        """Record a location failure."""
        location_errors.labels(code=code).inc()
