"""
Booking status state machine.

Status changes are the only thing that produce lifecycle events. Every
event written during a unit of work is also kept on the controller so the
caller can publish it once the transaction has committed.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, FrozenSet, List, Optional

from booking_api.core.exceptions import StateTransitionError, UpdateError
from booking_api.models.booking import Booking
from booking_api.models.enums import BookingStatus
from booking_api.models.event import ShipmentEvent
from booking_api.repositories import BookingRepository
from booking_api.services.shipment_event import ShipmentEventService

logger = logging.getLogger(__name__)

TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.RECEIVED: frozenset({
        BookingStatus.PENDING_UPDATE,
        BookingStatus.PENDING_CONFIRMATION,
        BookingStatus.CONFIRMED,
        BookingStatus.CANCELLED,
    }),
    BookingStatus.PENDING_UPDATE: frozenset({
        BookingStatus.RECEIVED,
        BookingStatus.PENDING_CONFIRMATION,
        BookingStatus.CONFIRMED,
        BookingStatus.CANCELLED,
    }),
    BookingStatus.PENDING_CONFIRMATION: frozenset({
        BookingStatus.PENDING_UPDATE,
        BookingStatus.CONFIRMED,
        BookingStatus.CANCELLED,
    }),
    BookingStatus.CONFIRMED: frozenset({
        BookingStatus.PENDING_UPDATE,
        BookingStatus.PENDING_CONFIRMATION,
        BookingStatus.CANCELLED,
    }),
    BookingStatus.CANCELLED: frozenset(),
}

UPDATABLE_STATUSES = frozenset({BookingStatus.RECEIVED, BookingStatus.PENDING_UPDATE})

CANCELLABLE_STATUSES = frozenset(
    status for status, targets in TRANSITIONS.items() if BookingStatus.CANCELLED in targets
)


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def _status(booking: Booking) -> Optional[BookingStatus]:
    try:
        return BookingStatus(booking.document_status)
    except ValueError:
        return None


class LifecycleController:
    def __init__(self, bookings: BookingRepository, events: ShipmentEventService) -> None:
        self.bookings = bookings
        self.events = events
        self.emitted: List[ShipmentEvent] = []

    def ensure_can_update(self, booking: Booking) -> None:
        if _status(booking) not in UPDATABLE_STATUSES:
            raise StateTransitionError(
                "update", booking.document_status, [s.value for s in UPDATABLE_STATUSES]
            )

    def ensure_can_cancel(self, booking: Booking) -> None:
        if _status(booking) not in CANCELLABLE_STATUSES:
            raise StateTransitionError(
                "cancel", booking.document_status, [s.value for s in CANCELLABLE_STATUSES]
            )

    async def record_created(self, booking: Booking) -> ShipmentEvent:
        return await self._emit(booking)

    async def cancel(self, booking: Booking, reason: Optional[str] = None) -> Booking:
        self.ensure_can_cancel(booking)

        updated_at = datetime.now(timezone.utc)
        rows = await self.bookings.update_status_for_reference(
            booking.carrier_booking_request_reference,
            expected_status=booking.document_status,
            new_status=BookingStatus.CANCELLED.value,
            updated_datetime=updated_at,
        )
        if rows != 1:
            raise UpdateError("Cancellation of booking failed.")

        booking.document_status = BookingStatus.CANCELLED.value
        booking.updated_datetime = updated_at
        logger.info("Booking %s cancelled", booking.carrier_booking_request_reference)

        await self._emit(booking, reason)
        return booking

    async def _emit(self, booking: Booking, reason: Optional[str] = None) -> ShipmentEvent:
        event = await self.events.create_for_booking(booking, reason)
        self.emitted.append(event)
        return event
