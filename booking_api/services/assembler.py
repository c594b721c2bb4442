import logging
from dataclasses import dataclass, field
from typing import List, Optional

from booking_api.core.concurrency import gather_or_fail
from booking_api.models.booking import Booking
from booking_api.models.vessel import Vessel
from booking_api.repositories import VesselRepository
from booking_api.schemas.booking import (
    BookingAggregate,
    CommoditySchema,
    ReferenceSchema,
    RequestedEquipmentSchema,
    ValueAddedServiceRequestSchema,
)
from booking_api.schemas.location import LocationSchema, ShipmentLocationSchema
from booking_api.schemas.party import DocumentPartySchema
from booking_api.services import mappers
from booking_api.services.collections import (
    ChildCollectionManager,
    DocumentPartyManager,
    RequestedEquipmentManager,
    ShipmentLocationManager,
)
from booking_api.services.location import LocationService

logger = logging.getLogger(__name__)


@dataclass
class AggregateParts:
    """Everything that hangs off a booking root, absent parts left empty."""

    vessel: Optional[Vessel] = None
    invoice_payable_at: Optional[LocationSchema] = None
    place_of_issue: Optional[LocationSchema] = None
    commodities: List[CommoditySchema] = field(default_factory=list)
    value_added_service_requests: List[ValueAddedServiceRequestSchema] = field(default_factory=list)
    references: List[ReferenceSchema] = field(default_factory=list)
    requested_equipments: List[RequestedEquipmentSchema] = field(default_factory=list)
    document_parties: List[DocumentPartySchema] = field(default_factory=list)
    shipment_locations: List[ShipmentLocationSchema] = field(default_factory=list)


def merge_aggregate(booking: Booking, parts: AggregateParts) -> BookingAggregate:
    aggregate = mappers.booking_to_aggregate(booking)
    if parts.vessel is not None:
        aggregate.vessel_name = parts.vessel.vessel_name
        aggregate.vessel_imo_number = parts.vessel.vessel_imo_number
    aggregate.invoice_payable_at = parts.invoice_payable_at
    aggregate.place_of_issue = parts.place_of_issue
    aggregate.commodities = parts.commodities
    aggregate.value_added_service_requests = parts.value_added_service_requests
    aggregate.references = parts.references
    aggregate.requested_equipments = parts.requested_equipments
    aggregate.document_parties = parts.document_parties
    aggregate.shipment_locations = parts.shipment_locations
    return aggregate


class AggregateAssembler:
    """Loads every part of a stored booking concurrently and merges them."""

    def __init__(
        self,
        vessels: VesselRepository,
        location_service: LocationService,
        commodities: ChildCollectionManager,
        value_added_service_requests: ChildCollectionManager,
        references: ChildCollectionManager,
        requested_equipments: RequestedEquipmentManager,
        document_parties: DocumentPartyManager,
        shipment_locations: ShipmentLocationManager,
    ) -> None:
        self.vessels = vessels
        self.location_service = location_service
        self.commodities = commodities
        self.value_added_service_requests = value_added_service_requests
        self.references = references
        self.requested_equipments = requested_equipments
        self.document_parties = document_parties
        self.shipment_locations = shipment_locations

    async def assemble(self, booking: Booking) -> BookingAggregate:
        (
            vessel,
            invoice_payable_at,
            place_of_issue,
            commodities,
            value_added_service_requests,
            references,
            requested_equipments,
            document_parties,
            shipment_locations,
        ) = await gather_or_fail(
            self.vessels.find_by_id(booking.vessel_id),
            self.location_service.fetch_by_id(booking.invoice_payable_at_id),
            self.location_service.fetch_by_id(booking.place_of_issue_id),
            self.commodities.fetch(booking.id),
            self.value_added_service_requests.fetch(booking.id),
            self.references.fetch(booking.id),
            self.requested_equipments.fetch(booking.id),
            self.document_parties.fetch(booking.id),
            self.shipment_locations.fetch(booking.id),
        )
        logger.debug("Assembled booking %s", booking.carrier_booking_request_reference)
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
