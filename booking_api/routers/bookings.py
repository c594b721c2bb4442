from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from booking_api.api.deps import get_orchestrator, http_error
from booking_api.core.config import get_settings
from booking_api.core.exceptions import BookingServiceError
from booking_api.models.enums import BookingStatus
from booking_api.schemas.booking import (
    BookingAggregate,
    BookingCancellationRequest,
    BookingRequest,
    BookingResponse,
    BookingSummary,
)
from booking_api.schemas.common import Page
from booking_api.services.booking import BookingOrchestrator

router = APIRouter()
settings = get_settings()


@router.post("/bookings", response_model=BookingAggregate, status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingRequest,
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> BookingAggregate:
    try:
        return await orchestrator.create_booking(payload)
    except BookingServiceError as exc:
        raise http_error(exc)


@router.get("/bookings", response_model=Page[BookingSummary])
async def list_bookings(
    document_status: Optional[BookingStatus] = Query(None, alias="documentStatus"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> Page[BookingSummary]:
    try:
        return await orchestrator.list_booking_summaries(document_status, page, page_size)
    except BookingServiceError as exc:
        raise http_error(exc)


@router.get("/bookings/{reference}", response_model=BookingAggregate)
async def get_booking(
    reference: str,
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> BookingAggregate:
    try:
        return await orchestrator.get_booking(reference)
    except BookingServiceError as exc:
        raise http_error(exc)


@router.put("/bookings/{reference}", response_model=BookingAggregate)
async def update_booking(
    reference: str,
    payload: BookingRequest,
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> BookingAggregate:
    try:
        return await orchestrator.update_booking(reference, payload)
    except BookingServiceError as exc:
        raise http_error(exc)


@router.patch("/bookings/{reference}", response_model=BookingResponse)
async def cancel_booking(
    reference: str,
    payload: BookingCancellationRequest,
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> BookingResponse:
    try:
        return await orchestrator.cancel_booking(reference, payload.reason)
    except BookingServiceError as exc:
        raise http_error(exc)
