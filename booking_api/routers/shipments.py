from typing import Optional

from fastapi import APIRouter, Depends, Query

from booking_api.api.deps import get_orchestrator, http_error
from booking_api.core.config import get_settings
from booking_api.core.exceptions import BookingServiceError
from booking_api.models.enums import BookingStatus
from booking_api.schemas.common import Page
from booking_api.schemas.shipment import ShipmentAggregate, ShipmentSummary
from booking_api.services.booking import BookingOrchestrator

router = APIRouter()
settings = get_settings()


@router.get("/shipments", response_model=Page[ShipmentSummary])
async def list_shipments(
    carrier_booking_reference: Optional[str] = Query(None, alias="carrierBookingReference"),
    document_status: Optional[BookingStatus] = Query(None, alias="documentStatus"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> Page[ShipmentSummary]:
    try:
        return await orchestrator.list_shipment_summaries(
            carrier_booking_reference, document_status, page, page_size
        )
    except BookingServiceError as exc:
        raise http_error(exc)


@router.get("/shipments/{carrier_booking_reference}", response_model=ShipmentAggregate)
async def get_shipment(
    carrier_booking_reference: str,
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> ShipmentAggregate:
    try:
        return await orchestrator.get_shipment(carrier_booking_reference)
    except BookingServiceError as exc:
        raise http_error(exc)
