"""Address canonicalization and matching endpoints."""

import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from routematch.address.canonicalizer import canonicalize
from routematch.address.formatting import format_address
from routematch.address.match_key import match_key
from routematch.api import dependencies
from routematch.geo.proximity import GeoPoint

logger = logging.getLogger(__name__)
router = APIRouter()


class AddressFields(BaseModel):
    """Structured address input (scanned or stored shape)."""

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    legal_address: Optional[str] = None
    normalized_address: Optional[str] = None


class CanonicalizeRequest(BaseModel):
    """Request model for canonicalization."""

    address: Union[str, AddressFields]


class CanonicalAddressModel(BaseModel):
    street: str
    city: str
    state: str
    zip: str


class CanonicalizeResponse(BaseModel):
    """Response model for canonicalization."""

    canonical: Optional[CanonicalAddressModel] = None
    match_key: Optional[str] = None
    line1: str = ""
    line2: str = ""


class KnownAddress(BaseModel):
    """Existing route address."""

    id: Any
    normalized_key: Optional[str] = None
    has_dcn: bool = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DCNMatchRequest(BaseModel):
    """Request model for DCN matching."""

    raw_address: str
    raw_city: str = ""
    addresses: list[KnownAddress]


class DCNMatchResponse(BaseModel):
    """Response model for DCN matching."""

    address_id: Optional[Any] = None
    confidence: float = 0.0
    match_type: Optional[str] = None
    review_status: str


class DuplicateRequest(BaseModel):
    """Request model for duplicate detection."""

    address: Union[str, AddressFields]
    known: list[KnownAddress]
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DuplicateModel(BaseModel):
    address_id: Any
    match_key: str
    distance_feet: Optional[int] = None
    is_confirmed: Optional[bool] = None


def _raw(address: Union[str, AddressFields]):
    if isinstance(address, AddressFields):
        return address.model_dump(exclude_none=True)
    return address


@router.post("/canonicalize", response_model=CanonicalizeResponse)
async def canonicalize_address(request: CanonicalizeRequest):
    """
    Canonicalize an address and derive its match key.

    Input without a usable street yields an empty response rather than
    an error; such records cannot be deduplicated.
    """
    raw = _raw(request.address)
    try:
        canonical = canonicalize(raw)
    except TypeError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if canonical is None:
        return CanonicalizeResponse()

    line1, line2 = format_address(raw)
    return CanonicalizeResponse(
        canonical=CanonicalAddressModel(
            street=canonical.street,
            city=canonical.city,
            state=canonical.state,
            zip=canonical.zip,
        ),
        match_key=match_key(canonical),
        line1=line1,
        line2=line2,
    )


@router.post("/dcn-match", response_model=DCNMatchResponse)
async def match_dcn(request: DCNMatchRequest):
    """Find the best existing address for an uploaded DCN row."""
    matcher = dependencies.get_dcn_matcher()
    match = matcher.find_address_match(
        [a.model_dump() for a in request.addresses],
        request.raw_address,
        request.raw_city,
    )

    if match is None:
        return DCNMatchResponse(review_status="no_match")

    return DCNMatchResponse(
        address_id=match.address_id,
        confidence=match.confidence,
        match_type=match.match_type,
        review_status=matcher.review_status(match.confidence),
    )


@router.post("/duplicates", response_model=list[DuplicateModel])
async def find_duplicates(request: DuplicateRequest):
    """List known addresses sharing the address's match key."""
    detector = dependencies.get_duplicate_detector()
    duplicates = detector.find_duplicates(
        _raw(request.address),
        [k.model_dump() for k in request.known],
        location=GeoPoint(latitude=request.latitude, longitude=request.longitude),
    )
    return [
        DuplicateModel(
            address_id=d.address_id,
            match_key=d.match_key,
            distance_feet=d.distance_feet,
            is_confirmed=d.is_confirmed,
        )
        for d in duplicates
    ]
