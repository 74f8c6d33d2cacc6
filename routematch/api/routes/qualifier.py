"""Attempt qualifier endpoints."""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from routematch.qualifier.classifier import classify, display_label
from routematch.qualifier.service_hours import get_qualifiers, storage_fields

router = APIRouter()


class ClassifyRequest(BaseModel):
    """Request model for attempt classification."""

    timestamp: datetime


class ClassifyResponse(BaseModel):
    """Response model for attempt classification."""

    qualifier: str
    label: str
    badges: list[str]
    storage: dict


@router.post("/classify", response_model=ClassifyResponse)
async def classify_attempt(request: ClassifyRequest):
    """
    Classify an attempt time.

    qualifier uses the time as sent; badges use the configured service
    timezone.
    """
    qualifier = classify(request.timestamp)
    badges = get_qualifiers(request.timestamp)
    return ClassifyResponse(
        qualifier=qualifier.value,
        label=display_label(qualifier),
        badges=list(badges.badges),
        storage=storage_fields(badges),
    )


@router.get("/labels/{qualifier}")
async def label(qualifier: str):
    """Display label for a stored qualifier value."""
    return {"qualifier": qualifier, "label": display_label(qualifier)}
