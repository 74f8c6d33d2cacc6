"""Address canonicalization and match keys."""

from .models import (
    CanonicalAddress,
    FreeFormAddress,
    ScannedAddress,
    StoredAddress,
    parse_raw_input,
)
from .canonicalizer import AddressCanonicalizer, canonicalize
from .match_key import MatchKeyGenerator, match_key, key_for, street_segment
from .formatting import format_address, format_single_line
from .ocr_parser import DocumentType, parse_document_address, extract_defendant_name

__all__ = [
    "CanonicalAddress",
    "FreeFormAddress",
    "ScannedAddress",
    "StoredAddress",
    "parse_raw_input",
    "AddressCanonicalizer",
    "canonicalize",
    "MatchKeyGenerator",
    "match_key",
    "key_for",
    "street_segment",
    "format_address",
    "format_single_line",
    "DocumentType",
    "parse_document_address",
    "extract_defendant_name",
]
