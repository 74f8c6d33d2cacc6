"""Address and defendant extraction from OCR'd legal documents."""

import logging
import re
from enum import Enum
from typing import Optional, Union

from routematch.address.models import ScannedAddress

logger = logging.getLogger(__name__)


class DocumentType(Enum):
    """Scanned document types."""

    SERVE = "serve"
    GARNISHMENT = "garnishment"
    POSTING = "posting"


_LINE_END = r"(?:\n|$)"

# Labelled address lines, tried before the generic pattern
ADDRESS_PATTERNS = {
    DocumentType.SERVE: [
        re.compile(r"SERVE\s*AT[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Defendant.*?Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Service\s*Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Residence[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
    ],
    DocumentType.GARNISHMENT: [
        re.compile(r"Garnishee.*?Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"GARNISHMENT.*?(?:serve|mail).*?to[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Third\s*Party.*?Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Employer.*?Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
    ],
    DocumentType.POSTING: [
        re.compile(r"POST\s*AT[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Posting\s*Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Property\s*Address[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
        re.compile(r"Premises[:\s]+(.+?)" + _LINE_END, re.IGNORECASE),
    ],
}

_STATES = r"(MI|Michigan|OH|Ohio)"
_ZIP = r"(\d{5}(?:-\d{4})?)"

ADDRESS_COMPONENTS_PATTERN = re.compile(
    r"^(.+?),?\s*([A-Za-z\s]+),?\s*" + _STATES + r"\s*" + _ZIP + r"$",
    re.IGNORECASE,
)

GENERIC_ADDRESS_PATTERN = re.compile(
    r"(\d+\s+[\w\s]+(?:St|Street|Ave|Avenue|Blvd|Boulevard|Dr|Drive|Rd|Road|Ln|Lane"
    r"|Ct|Court|Pl|Place|Way|Cir|Circle)[\w\s,#\.]*),?\s*([A-Za-z\s]+),?\s*"
    + _STATES + r"\s*" + _ZIP,
    re.IGNORECASE,
)

DEFENDANT_PATTERNS = [
    re.compile(r"Defendant[:\s]+([A-Za-z\s,\.]+?)(?:,|\n|Address|$)", re.IGNORECASE),
    re.compile(r"SERVE[:\s]+([A-Za-z\s,\.]+?)(?:\s+at|\s+@|\n)", re.IGNORECASE),
    re.compile(r"vs\.?\s+([A-Za-z\s,\.]+?)(?:,|\n|$)", re.IGNORECASE),
    re.compile(r"TO[:\s]+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)"),
]


def _from_match(match: re.Match) -> ScannedAddress:
    return ScannedAddress(
        street=match.group(1).strip(),
        city=match.group(2).strip(),
        state=match.group(3).strip(),
        zip=match.group(4).strip(),
    )


def parse_address_components(address_text: str) -> Optional[ScannedAddress]:
    """Split "street, city, state zip" text into scanned fields."""
    match = ADDRESS_COMPONENTS_PATTERN.match(address_text.strip())
    if match:
        return _from_match(match)
    return None


def parse_document_address(
    text: str,
    document_type: Union[DocumentType, str],
) -> Optional[ScannedAddress]:
    """
    Extract the service address from OCR text.

    Args:
        text: Full OCR text of the document
        document_type: Document type, selects the labelled patterns;
            unknown types only get the generic pattern

    Returns:
        ScannedAddress, or None if no address could be extracted
    """
    type_name = document_type.value if isinstance(document_type, DocumentType) else str(document_type)
    try:
        labelled = ADDRESS_PATTERNS[DocumentType(type_name)]
    except ValueError:
        logger.debug(f"Unknown document type {type_name!r}, using generic pattern only")
        labelled = []

    for pattern in labelled:
        match = pattern.search(text)
        if match:
            parsed = parse_address_components(match.group(1))
            if parsed:
                return parsed

    generic = GENERIC_ADDRESS_PATTERN.search(text)
    if generic:
        return _from_match(generic)

    logger.debug(f"No address found in {type_name} document")
    return None


def extract_defendant_name(text: str) -> Optional[str]:
    """Defendant name from OCR text, if any pattern matches."""
    for pattern in DEFENDANT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return None
