"""OCR extraction confidence categories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfidenceCategory:
    """What to do with an OCR result of a given confidence."""

    level: str
    action: str
    message: str


HIGH_THRESHOLD = 0.90
MEDIUM_THRESHOLD = 0.75
LOW_THRESHOLD = 0.50


def categorize_confidence(score: float) -> ConfidenceCategory:
    """Bucket an OCR confidence score into a review action."""
    if score >= HIGH_THRESHOLD:
        return ConfidenceCategory("high", "auto_accept", "High confidence")
    if score >= MEDIUM_THRESHOLD:
        return ConfidenceCategory("medium", "review", "Please verify")
    if score >= LOW_THRESHOLD:
        return ConfidenceCategory("low", "review_required", "Low confidence - review required")
    return ConfidenceCategory("reject", "manual_entry", "Could not extract - enter manually")
