import logging
from datetime import datetime, timezone

from booking_api.core.concurrency import gather_or_fail
from booking_api.core.exceptions import NotFoundError
from booking_api.schemas.booking import BookingAggregate, BookingRequest
from booking_api.services import mappers
from booking_api.services.assembler import AggregateParts, merge_aggregate
from booking_api.services.components import BookingComponents

logger = logging.getLogger(__name__)


class UpdateReplacer:
    """Full replacement of an existing booking, found by its external reference.

    Root fields are overwritten in place. Every child collection is deleted
    and written again from the request, including collections the request
    leaves empty. Status, reference and creation time survive.
    """

    def __init__(self, components: BookingComponents) -> None:
        self.components = components
        self.bookings = components.uow.bookings

    async def replace(self, reference: str, request: BookingRequest) -> BookingAggregate:
        booking = await self.bookings.find_by_external_reference(reference, for_update=True)
        if booking is None:
            raise NotFoundError(f"No Booking found with carrierBookingRequestReference {reference}")

        self.components.lifecycle.ensure_can_update(booking)

        mappers.apply_booking_request(booking, request)
        booking.updated_datetime = datetime.now(timezone.utc)
        booking = await self.bookings.save(booking)

        c = self.components
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
            c.commodities.replace(booking.id, request.commodities),
            c.value_added_service_requests.replace(booking.id, request.value_added_service_requests),
            c.references.replace(booking.id, request.references),
            c.requested_equipments.replace(booking.id, request.requested_equipments),
            c.document_parties.replace(booking.id, request.document_parties),
            c.shipment_locations.replace(booking.id, request.shipment_locations),
        )
        logger.info("Booking %s replaced", reference)

        return merge_aggregate(
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
