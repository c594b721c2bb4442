"""
Booking orchestration.

Each public operation runs inside exactly one unit of work: either every
row it touches commits, or none do. Business-conditional validation happens
before the unit of work is opened. Lifecycle events recorded during the
transaction are published to the dispatcher only after it has committed.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional

from booking_api.core.concurrency import gather_or_fail
from booking_api.core.exceptions import NotFoundError
from booking_api.core.unit_of_work import UnitOfWork
from booking_api.models.booking import Booking
from booking_api.models.enums import BookingStatus
from booking_api.models.event import ShipmentEvent
from booking_api.schemas.booking import (
    BookingAggregate,
    BookingRequest,
    BookingResponse,
    BookingSummary,
)
from booking_api.schemas.common import Page
from booking_api.schemas.event import ShipmentEventSchema
from booking_api.schemas.shipment import ShipmentAggregate, ShipmentSummary
from booking_api.services import mappers
from booking_api.services.assembler import AggregateParts, merge_aggregate
from booking_api.services.components import BookingComponents
from booking_api.services.event_dispatcher import Event, EventDispatcher, get_dispatcher
from booking_api.services.shipment import ShipmentAssembler
from booking_api.services.update_replacer import UpdateReplacer
from booking_api.services.validation import validate_booking_request

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], UnitOfWork]


class BookingOrchestrator:
    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory = UnitOfWork,
        dispatcher: Optional[EventDispatcher] = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self.dispatcher = dispatcher or get_dispatcher()

    async def create_booking(self, request: BookingRequest) -> BookingAggregate:
        error = validate_booking_request(request)
        if error is not None:
            raise error

        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)

            now = datetime.now(timezone.utc)
            booking = mappers.apply_booking_request(Booking(), request)
            booking.document_status = BookingStatus.RECEIVED.value
            booking.booking_request_datetime = now
            booking.updated_datetime = now
            booking = await uow.bookings.save(booking)
            # Picks up the generated reference and anything else set on insert
            booking = await uow.bookings.refresh(booking)

            vessel = await c.vessel_resolver.resolve(
                booking.id, request.vessel_name, request.vessel_imo_number
            )

            (
                invoice_payable_at,
                place_of_issue,
                commodities,
                value_added_service_requests,
                references,
                requested_equipments,
                document_parties,
                shipment_locations,
            ) = await gather_or_fail(
                c.attach_invoice_payable_at(booking.id, request.invoice_payable_at),
                c.attach_place_of_issue(booking.id, request.place_of_issue),
                c.commodities.create(booking.id, request.commodities),
                c.value_added_service_requests.create(booking.id, request.value_added_service_requests),
                c.references.create(booking.id, request.references),
                c.requested_equipments.create(booking.id, request.requested_equipments),
                c.document_parties.create(booking.id, request.document_parties),
                c.shipment_locations.create(booking.id, request.shipment_locations),
            )

            await c.lifecycle.record_created(booking)

            aggregate = merge_aggregate(
                booking,
                AggregateParts(
                    vessel=vessel,
                    invoice_payable_at=invoice_payable_at,
                    place_of_issue=place_of_issue,
                    commodities=commodities,
                    value_added_service_requests=value_added_service_requests,
                    references=references,
                    requested_equipments=requested_equipments,
                    document_parties=document_parties,
                    shipment_locations=shipment_locations,
                ),
            )
            emitted = list(c.lifecycle.emitted)

        logger.info(f"Booking {aggregate.carrier_booking_request_reference} created")
        await self._publish(emitted)
        return aggregate

    async def update_booking(self, reference: str, request: BookingRequest) -> BookingAggregate:
        error = validate_booking_request(request)
        if error is not None:
            raise error

        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            aggregate = await UpdateReplacer(c).replace(reference, request)

        logger.info(f"Booking {reference} updated")
        return aggregate

    async def cancel_booking(self, reference: str, reason: Optional[str] = None) -> BookingResponse:
        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            booking = await self._get_booking_row(uow, reference)
            booking = await c.lifecycle.cancel(booking, reason)
            response = mappers.booking_to_response(booking)
            emitted = list(c.lifecycle.emitted)

        await self._publish(emitted)
        return response

    async def get_booking(self, reference: str) -> BookingAggregate:
        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            booking = await self._get_booking_row(uow, reference)
            return await c.assembler.assemble(booking)

    async def get_shipment(self, carrier_booking_reference: str) -> ShipmentAggregate:
        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            return await ShipmentAssembler(c).assemble(carrier_booking_reference)

    async def list_booking_summaries(
        self,
        status: Optional[BookingStatus] = None,
        page: int = 1,
        page_size: int = 100,
    ) -> Page[BookingSummary]:
        async with self._uow_factory() as uow:
            rows, total = await uow.bookings.find_page(
                status.value if status else None,
                offset=(page - 1) * page_size,
                limit=page_size,
            )
            vessels = await uow.vessels.find_by_ids(
                sorted({row.vessel_id for row in rows if row.vessel_id})
            )

        by_id = {vessel.id: vessel for vessel in vessels}
        return Page[BookingSummary](
            items=[mappers.booking_to_summary(row, by_id.get(row.vessel_id)) for row in rows],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size) if page_size else 0,
        )

    async def list_shipment_summaries(
        self,
        carrier_booking_reference: Optional[str] = None,
        document_status: Optional[BookingStatus] = None,
        page: int = 1,
        page_size: int = 100,
    ) -> Page[ShipmentSummary]:
        async with self._uow_factory() as uow:
            rows, total = await uow.shipments.find_page(
                carrier_booking_reference,
                document_status.value if document_status else None,
                offset=(page - 1) * page_size,
                limit=page_size,
            )

        return Page[ShipmentSummary](
            items=[
                ShipmentSummary(
                    carrier_booking_reference=shipment.carrier_booking_reference,
                    carrier_booking_request_reference=booking.carrier_booking_request_reference,
                    document_status=booking.document_status,
                    terms_and_conditions=shipment.terms_and_conditions,
                    shipment_created_date_time=mappers.to_utc(shipment.confirmation_datetime),
                    shipment_updated_date_time=mappers.to_utc(shipment.updated_datetime),
                )
                for shipment, booking in rows
            ],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size) if page_size else 0,
        )

    async def list_events(
        self,
        event_type: Optional[str] = None,
        document_type: Optional[str] = None,
        document_id: Optional[str] = None,
        limit: int = 100,
    ) -> List[ShipmentEventSchema]:
        async with self._uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            return await c.events.list_events(
                event_type=event_type,
                document_type=document_type,
                document_id=document_id,
                limit=limit,
            )

    async def _get_booking_row(self, uow: UnitOfWork, reference: str) -> Booking:
        booking = await uow.bookings.find_by_external_reference(reference)
        if booking is None:
            raise NotFoundError(f"No Booking found with carrierBookingRequestReference {reference}")
        return booking

    async def _publish(self, events: List[ShipmentEvent]) -> None:
        for event in events:
            payload = mappers.shipment_event_to_schema(event)
            await self.dispatcher.emit(
                Event(
                    type=BookingStatus(event.shipment_event_type_code),
                    data=payload.model_dump(mode="json", by_alias=True),
                    document_id=event.document_id,
                )
            )
