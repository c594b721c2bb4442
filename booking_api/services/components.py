"""Collaborators for one unit of work, wired explicitly from its repositories."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from booking_api.core.unit_of_work import UnitOfWork
from booking_api.schemas.location import LocationSchema
from booking_api.services.assembler import AggregateAssembler
from booking_api.services.collections import (
    ChildCollectionManager,
    DocumentPartyManager,
    RequestedEquipmentManager,
    ShipmentLocationManager,
    commodity_manager,
    reference_manager,
    value_added_service_manager,
)
from booking_api.services.lifecycle import LifecycleController
from booking_api.services.location import AddressService, LocationService
from booking_api.services.party import PartyService
from booking_api.services.shipment_event import ShipmentEventService
from booking_api.services.vessel_resolver import VesselResolver


@dataclass
class BookingComponents:
    uow: UnitOfWork
    vessel_resolver: VesselResolver
    address_service: AddressService
    location_service: LocationService
    party_service: PartyService
    commodities: ChildCollectionManager
    value_added_service_requests: ChildCollectionManager
    references: ChildCollectionManager
    requested_equipments: RequestedEquipmentManager
    document_parties: DocumentPartyManager
    shipment_locations: ShipmentLocationManager
    assembler: AggregateAssembler
    events: ShipmentEventService
    lifecycle: LifecycleController

    @classmethod
    def from_unit_of_work(cls, uow: UnitOfWork) -> "BookingComponents":
        address_service = AddressService(uow.addresses)
        location_service = LocationService(uow.locations, address_service)
        party_service = PartyService(
            uow.parties,
            uow.party_contact_details,
            uow.party_identifying_codes,
            address_service,
        )
        commodities = commodity_manager(uow.commodities)
        value_added_service_requests = value_added_service_manager(
            uow.value_added_service_requests
        )
        references = reference_manager(uow.references)
        requested_equipments = RequestedEquipmentManager(
            uow.requested_equipments, uow.requested_equipment_equipments
        )
        document_parties = DocumentPartyManager(
            uow.document_parties, uow.displayed_addresses, party_service
        )
        shipment_locations = ShipmentLocationManager(uow.shipment_locations, location_service)
        events = ShipmentEventService(uow.shipment_events)

        return cls(
            uow=uow,
            vessel_resolver=VesselResolver(uow.vessels, uow.bookings),
            address_service=address_service,
            location_service=location_service,
            party_service=party_service,
            commodities=commodities,
            value_added_service_requests=value_added_service_requests,
            references=references,
            requested_equipments=requested_equipments,
            document_parties=document_parties,
            shipment_locations=shipment_locations,
            assembler=AggregateAssembler(
                uow.vessels,
                location_service,
                commodities,
                value_added_service_requests,
                references,
                requested_equipments,
                document_parties,
                shipment_locations,
            ),
            events=events,
            lifecycle=LifecycleController(uow.bookings, events),
        )

    async def attach_invoice_payable_at(
        self, booking_id: str, location: Optional[LocationSchema]
    ) -> Optional[LocationSchema]:
        return await self._attach_location(
            booking_id, location, self.uow.bookings.set_invoice_payable_at
        )

    async def attach_place_of_issue(
        self, booking_id: str, location: Optional[LocationSchema]
    ) -> Optional[LocationSchema]:
        return await self._attach_location(
            booking_id, location, self.uow.bookings.set_place_of_issue
        )

    async def _attach_location(
        self,
        booking_id: str,
        location: Optional[LocationSchema],
        link: Callable[[str, Optional[str]], Awaitable[int]],
    ) -> Optional[LocationSchema]:
        if location is None:
            return None
        resolved = await self.location_service.ensure_resolvable(location)
        await link(booking_id, resolved.id)
        return resolved
