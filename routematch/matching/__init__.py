"""Record matching workflows built on match keys."""

from .confidence import ConfidenceCategory, categorize_confidence
from .csv_import import map_column_name, parse_dcn_csv
from .dcn import AddressMatch, DCNMatcher, string_similarity
from .duplicates import DuplicateCandidate, DuplicateDetector

__all__ = [
    "ConfidenceCategory",
    "categorize_confidence",
    "map_column_name",
    "parse_dcn_csv",
    "AddressMatch",
    "DCNMatcher",
    "string_similarity",
    "DuplicateCandidate",
    "DuplicateDetector",
]
