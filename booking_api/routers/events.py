from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from booking_api.api.deps import get_orchestrator, http_error
from booking_api.core.config import get_settings
from booking_api.core.exceptions import BookingServiceError
from booking_api.models.enums import DocumentType
from booking_api.schemas.event import ShipmentEventSchema
from booking_api.services.booking import BookingOrchestrator

router = APIRouter()
settings = get_settings()


@router.get("/events", response_model=List[ShipmentEventSchema])
async def list_events(
    shipment_event_type_code: Optional[str] = Query(None, alias="shipmentEventTypeCode"),
    document_type_code: Optional[DocumentType] = Query(None, alias="documentTypeCode"),
    document_id: Optional[str] = Query(None, alias="documentID"),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    orchestrator: BookingOrchestrator = Depends(get_orchestrator),
) -> List[ShipmentEventSchema]:
    try:
        return await orchestrator.list_events(
            event_type=shipment_event_type_code,
            document_type=document_type_code.value if document_type_code else None,
            document_id=document_id,
            limit=limit,
        )
    except BookingServiceError as exc:
        raise http_error(exc)
