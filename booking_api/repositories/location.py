from typing import List

from sqlalchemy import delete, select

from booking_api.models.location import Address, DisplayedAddress, Location, ShipmentLocation
from booking_api.models.party import DocumentParty
from booking_api.repositories.base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    model = Address


class LocationRepository(BaseRepository[Location]):
    model = Location


class ShipmentLocationRepository(BaseRepository[ShipmentLocation]):
    model = ShipmentLocation
    parent_key = "booking_id"


class DisplayedAddressRepository(BaseRepository[DisplayedAddress]):
    model = DisplayedAddress
    parent_key = "document_party_id"

    async def find_by_parent_id(self, parent_id: str) -> List[DisplayedAddress]:
        # Address lines come back in the order they were supplied
        return await self.scalars(
            select(DisplayedAddress)
            .where(DisplayedAddress.document_party_id == parent_id)
            .order_by(DisplayedAddress.address_line_number)
        )

    async def delete_by_booking_id(self, booking_id: str) -> int:
        owned = select(DocumentParty.id).where(DocumentParty.booking_id == booking_id)
        result = await self.execute(
            delete(DisplayedAddress).where(DisplayedAddress.document_party_id.in_(owned))
        )
        return result.rowcount
