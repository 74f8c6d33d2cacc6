"""API dependency injection."""

import logging
from typing import Optional

from routematch.geo.proximity import ProximityVerifier
from routematch.matching.dcn import DCNMatcher
from routematch.matching.duplicates import DuplicateDetector

logger = logging.getLogger(__name__)

# Global instances (lazily initialized)
_proximity_verifier: Optional[ProximityVerifier] = None
_dcn_matcher: Optional[DCNMatcher] = None
_duplicate_detector: Optional[DuplicateDetector] = None


def get_proximity_verifier() -> ProximityVerifier:
    """Get proximity verifier instance."""
    global _proximity_verifier

    if _proximity_verifier is None:
        _proximity_verifier = ProximityVerifier()
    return _proximity_verifier


def get_dcn_matcher() -> DCNMatcher:
    """Get DCN matcher instance."""
    global _dcn_matcher

    if _dcn_matcher is None:
        _dcn_matcher = DCNMatcher()
    return _dcn_matcher


def get_duplicate_detector() -> DuplicateDetector:
    """Get duplicate detector instance."""
    global _duplicate_detector

    if _duplicate_detector is None:
        _duplicate_detector = DuplicateDetector(verifier=get_proximity_verifier())
    return _duplicate_detector


def cleanup():
    """Drop cached instances."""
    global _proximity_verifier, _dcn_matcher, _duplicate_detector

    _proximity_verifier = None
    _dcn_matcher = None
    _duplicate_detector = None
    logger.info("Cleared cached matching services")
