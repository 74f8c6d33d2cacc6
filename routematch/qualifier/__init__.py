"""Attempt qualifier classification."""

from .classifier import Qualifier, QUALIFIER_LABELS, classify, display_label
from .service_hours import (
    QualifierBadges,
    QualifierProgress,
    get_qualifiers,
    needed_qualifiers,
    storage_fields,
    spread_date,
)

__all__ = [
    "Qualifier",
    "QUALIFIER_LABELS",
    "classify",
    "display_label",
    "QualifierBadges",
    "QualifierProgress",
    "get_qualifiers",
    "needed_qualifiers",
    "storage_fields",
    "spread_date",
]
