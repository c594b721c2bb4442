"""
Create, replace and fetch for each child collection of a booking.

Every manager follows the same contract:

* ``create`` with no items returns an empty list and writes nothing.
* ``replace`` deletes every row the booking owns in that collection, then
  creates the new items. Deletion always happens even for an empty input.
* ``fetch`` returns the stored items, or an empty list.

Nested rows (equipment references, address lines, party details) are
written after their parent row has an id, inside the same call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from booking_api.core.concurrency import gather_or_fail
from booking_api.core.exceptions import ValidationError
from booking_api.models.booking import RequestedEquipmentEquipment
from booking_api.models.location import DisplayedAddress
from booking_api.models.party import DocumentParty
from booking_api.repositories import (
    CommodityRepository,
    DisplayedAddressRepository,
    DocumentPartyRepository,
    ReferenceRepository,
    RequestedEquipmentEquipmentRepository,
    RequestedEquipmentRepository,
    ShipmentLocationRepository,
    ValueAddedServiceRequestRepository,
)
from booking_api.repositories.base import BaseRepository
from booking_api.schemas.booking import RequestedEquipmentSchema
from booking_api.schemas.location import ShipmentLocationSchema
from booking_api.schemas.party import DocumentPartySchema
from booking_api.services import mappers
from booking_api.services.location import LocationService
from booking_api.services.party import PartyService
from booking_api.services.validation import check_requested_equipment

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


class ChildCollectionManager(ABC, Generic[ItemT]):
    name: str = "collection"

    async def create(self, booking_id: str, items: Optional[Sequence[ItemT]]) -> List[ItemT]:
        if not items:
            return []
        return await self._create_items(booking_id, list(items))

    async def replace(self, booking_id: str, items: Optional[Sequence[ItemT]]) -> List[ItemT]:
        deleted = await self._delete_all(booking_id)
        logger.debug("Removed %d %s row(s) from booking %s", deleted, self.name, booking_id)
        return await self.create(booking_id, items)

    @abstractmethod
    async def fetch(self, booking_id: str) -> List[ItemT]:
        ...

    @abstractmethod
    async def _create_items(self, booking_id: str, items: List[ItemT]) -> List[ItemT]:
        ...

    @abstractmethod
    async def _delete_all(self, booking_id: str) -> int:
        ...


class FlatCollectionManager(ChildCollectionManager[ItemT]):
    """A collection whose items map onto exactly one row each."""

    def __init__(
        self,
        name: str,
        repository: BaseRepository,
        to_model: Callable,
        to_schema: Callable,
    ) -> None:
        self.name = name
        self.repository = repository
        self._to_model = to_model
        self._to_schema = to_schema

    async def fetch(self, booking_id: str) -> List[ItemT]:
        rows = await self.repository.find_by_parent_id(booking_id)
        return [self._to_schema(row) for row in rows]

    async def _create_items(self, booking_id: str, items: List[ItemT]) -> List[ItemT]:
        saved = await self.repository.save_all(self._to_model(item, booking_id) for item in items)
        return [self._to_schema(row) for row in saved]

    async def _delete_all(self, booking_id: str) -> int:
        return await self.repository.delete_by_parent_id(booking_id)


def commodity_manager(repository: CommodityRepository) -> FlatCollectionManager:
    return FlatCollectionManager(
        "commodity", repository, mappers.commodity_to_model, mappers.commodity_to_schema
    )


def value_added_service_manager(
    repository: ValueAddedServiceRequestRepository,
) -> FlatCollectionManager:
    return FlatCollectionManager(
        "value added service request",
        repository,
        mappers.value_added_service_to_model,
        mappers.value_added_service_to_schema,
    )


def reference_manager(repository: ReferenceRepository) -> FlatCollectionManager:
    return FlatCollectionManager(
        "reference", repository, mappers.reference_to_model, mappers.reference_to_schema
    )


class RequestedEquipmentManager(ChildCollectionManager[RequestedEquipmentSchema]):
    name = "requested equipment"

    def __init__(
        self,
        requested_equipments: RequestedEquipmentRepository,
        equipment_references: RequestedEquipmentEquipmentRepository,
    ) -> None:
        self.requested_equipments = requested_equipments
        self.equipment_references = equipment_references

    async def _create_items(
        self, booking_id: str, items: List[RequestedEquipmentSchema]
    ) -> List[RequestedEquipmentSchema]:
        # One bad line rejects the whole collection before anything is written
        issues = check_requested_equipment(items)
        if issues:
            raise ValidationError(issues)

        created = []
        for item in items:
            saved = await self.requested_equipments.save(
                mappers.requested_equipment_to_model(item, booking_id)
            )
            references = await self.equipment_references.save_all(
                RequestedEquipmentEquipment(
                    requested_equipment_id=saved.id,
                    equipment_reference=reference,
                )
                for reference in item.equipment_references
            )
            created.append(
                mappers.requested_equipment_to_schema(
                    saved, [row.equipment_reference for row in references]
                )
            )
        return created

    async def fetch(self, booking_id: str) -> List[RequestedEquipmentSchema]:
        rows = await self.requested_equipments.find_by_parent_id(booking_id)
        links = await self.equipment_references.find_by_requested_equipment_ids(
            [row.id for row in rows]
        )
        by_parent = {}
        for link in links:
            by_parent.setdefault(link.requested_equipment_id, []).append(link.equipment_reference)
        return [
            mappers.requested_equipment_to_schema(row, by_parent.get(row.id, []))
            for row in rows
        ]

    async def _delete_all(self, booking_id: str) -> int:
        await self.equipment_references.delete_by_booking_id(booking_id)
        return await self.requested_equipments.delete_by_parent_id(booking_id)


class DocumentPartyManager(ChildCollectionManager[DocumentPartySchema]):
    """Replacing document parties leaves the old party rows behind unreferenced."""

    name = "document party"

    def __init__(
        self,
        document_parties: DocumentPartyRepository,
        displayed_addresses: DisplayedAddressRepository,
        party_service: PartyService,
    ) -> None:
        self.document_parties = document_parties
        self.displayed_addresses = displayed_addresses
        self.party_service = party_service

    async def _create_items(
        self, booking_id: str, items: List[DocumentPartySchema]
    ) -> List[DocumentPartySchema]:
        created = []
        for item in items:
            party = await self.party_service.create_party(item.party)
            document_party = await self.document_parties.save(
                DocumentParty(
                    booking_id=booking_id,
                    party_id=party.id,
                    party_function=item.party_function,
                    is_to_be_notified=item.is_to_be_notified,
                )
            )
            lines = await self.displayed_addresses.save_all(
                DisplayedAddress(
                    document_party_id=document_party.id,
                    address_line_number=number,
                    address_line=line,
                )
                for number, line in enumerate(item.displayed_address)
            )
            created.append(
                DocumentPartySchema(
                    party=party,
                    party_function=document_party.party_function,
                    displayed_address=[row.address_line for row in lines],
                    is_to_be_notified=document_party.is_to_be_notified,
                )
            )
        return created

    async def fetch(self, booking_id: str) -> List[DocumentPartySchema]:
        rows = await self.document_parties.find_by_parent_id(booking_id)
        return await gather_or_fail(*(self._fetch_one(row) for row in rows))

    async def _fetch_one(self, row: DocumentParty) -> DocumentPartySchema:
        party, lines = await gather_or_fail(
            self.party_service.fetch_party(row.party_id),
            self.displayed_addresses.find_by_parent_id(row.id),
        )
        return DocumentPartySchema(
            party=party,
            party_function=row.party_function,
            displayed_address=[line.address_line for line in lines],
            is_to_be_notified=row.is_to_be_notified,
        )

    async def _delete_all(self, booking_id: str) -> int:
        await self.displayed_addresses.delete_by_booking_id(booking_id)
        return await self.document_parties.delete_by_parent_id(booking_id)


class ShipmentLocationManager(ChildCollectionManager[ShipmentLocationSchema]):
    """Replacing shipment locations leaves the old location rows behind unreferenced."""

    name = "shipment location"

    def __init__(
        self,
        shipment_locations: ShipmentLocationRepository,
        location_service: LocationService,
    ) -> None:
        self.shipment_locations = shipment_locations
        self.location_service = location_service

    async def _create_items(
        self, booking_id: str, items: List[ShipmentLocationSchema]
    ) -> List[ShipmentLocationSchema]:
        created = []
        for item in items:
            location = await self.location_service.ensure_resolvable(item.location)
            saved = await self.shipment_locations.save(
                mappers.shipment_location_to_model(item, booking_id, location.id)
            )
            created.append(mappers.shipment_location_to_schema(saved, location))
        return created

    async def fetch(self, booking_id: str) -> List[ShipmentLocationSchema]:
        rows = await self.shipment_locations.find_by_parent_id(booking_id)
        locations = await gather_or_fail(
            *(self.location_service.fetch_by_id(row.location_id) for row in rows)
        )
        return [
            mappers.shipment_location_to_schema(row, location)
            for row, location in zip(rows, locations)
        ]

    async def _delete_all(self, booking_id: str) -> int:
        return await self.shipment_locations.delete_by_parent_id(booking_id)
