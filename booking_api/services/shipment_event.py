import logging
from datetime import datetime, timezone
from typing import List, Optional

from booking_api.core.exceptions import CreateError, PersistenceError
from booking_api.models.booking import Booking
from booking_api.models.enums import DocumentType, EventClassifier
from booking_api.models.event import ShipmentEvent
from booking_api.repositories import ShipmentEventRepository
from booking_api.schemas.event import ShipmentEventSchema
from booking_api.services import mappers

logger = logging.getLogger(__name__)


class ShipmentEventService:
    """Writes and reads the booking lifecycle event log."""

    def __init__(self, events: ShipmentEventRepository) -> None:
        self.events = events

    async def create_for_booking(self, booking: Booking, reason: Optional[str] = None) -> ShipmentEvent:
        event = ShipmentEvent(
            shipment_event_type_code=booking.document_status,
            event_classifier_code=EventClassifier.ACTUAL.value,
            document_type_code=DocumentType.CARRIER_BOOKING_REQUEST.value,
            document_id=booking.carrier_booking_request_reference,
            event_datetime=booking.updated_datetime,
            event_created_datetime=datetime.now(timezone.utc),
            reason=reason,
        )
        try:
            saved = await self.events.save(event)
        except PersistenceError as e:
            raise CreateError(
                f"Failed to create shipment event for {booking.carrier_booking_request_reference}"
            ) from e
        if saved.id is None:
            raise CreateError(
                f"Failed to create shipment event for {booking.carrier_booking_request_reference}"
            )

        logger.debug(
            "Recorded %s event for booking %s",
            saved.shipment_event_type_code,
            saved.document_id,
        )
        return saved

    async def list_events(
        self,
        event_type: Optional[str] = None,
        document_type: Optional[str] = None,
        document_id: Optional[str] = None,
        limit: int = 100,
    ) -> List[ShipmentEventSchema]:
        rows = await self.events.find_filtered(
            event_type=event_type,
            document_type=document_type,
            document_id=document_id,
            limit=limit,
        )
        return [mappers.shipment_event_to_schema(row) for row in rows]
