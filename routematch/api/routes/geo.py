"""Proximity endpoints."""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from routematch.api import dependencies
from routematch.geo.proximity import GeoPoint

router = APIRouter()


class PointModel(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DistanceRequest(BaseModel):
    """Request model for a distance check."""

    a: PointModel
    b: PointModel


class DistanceResponse(BaseModel):
    """Response model for a distance check."""

    distance_feet: Optional[int] = None
    display: str
    is_within_threshold: Optional[bool] = None
    match_radius_feet: int


@router.post("/distance", response_model=DistanceResponse)
async def distance(request: DistanceRequest):
    """Distance in feet between two fixes, with its display form."""
    verifier = dependencies.get_proximity_verifier()
    result = verifier.verify(
        GeoPoint(latitude=request.a.latitude, longitude=request.a.longitude),
        GeoPoint(latitude=request.b.latitude, longitude=request.b.longitude),
    )
    return DistanceResponse(
        distance_feet=result.distance_feet,
        display=result.display,
        is_within_threshold=result.is_within_threshold,
        match_radius_feet=verifier.match_radius_feet,
    )
