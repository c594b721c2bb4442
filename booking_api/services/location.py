import logging
from typing import Optional

from booking_api.core.exceptions import NotFoundError
from booking_api.repositories import AddressRepository, LocationRepository
from booking_api.schemas.location import AddressSchema, LocationSchema
from booking_api.services import mappers

logger = logging.getLogger(__name__)


class AddressService:
    """Create-or-resolve for addresses."""

    def __init__(self, addresses: AddressRepository) -> None:
        self.addresses = addresses

    async def ensure_resolvable(self, address: AddressSchema) -> AddressSchema:
        """Return the stored address, creating it unless an existing id was given."""
        if address.id:
            existing = await self.addresses.find_by_id(address.id)
            if existing is None:
                raise NotFoundError(f"Address {address.id} not found")
            return mappers.address_to_schema(existing)

        saved = await self.addresses.save(mappers.address_to_model(address))
        return mappers.address_to_schema(saved)

    async def fetch_by_id(self, address_id: Optional[str]) -> Optional[AddressSchema]:
        address = await self.addresses.find_by_id(address_id)
        return mappers.address_to_schema(address) if address else None


class LocationService:
    """Create-or-resolve for locations and their address."""

    def __init__(self, locations: LocationRepository, address_service: AddressService) -> None:
        self.locations = locations
        self.address_service = address_service

    async def ensure_resolvable(self, location: LocationSchema) -> LocationSchema:
        if location.id:
            existing = await self.locations.find_by_id(location.id)
            if existing is None:
                raise NotFoundError(f"Location {location.id} not found")
            address = await self.address_service.fetch_by_id(existing.address_id)
            return mappers.location_to_schema(existing, address)

        address = None
        if location.address is not None:
            address = await self.address_service.ensure_resolvable(location.address)

        saved = await self.locations.save(
            mappers.location_to_model(location, address.id if address else None)
        )
        logger.debug("Created location %s", saved.id)
        return mappers.location_to_schema(saved, address)

    async def fetch_by_id(self, location_id: Optional[str]) -> Optional[LocationSchema]:
        """Location with its address; None when the id is empty or unknown."""
        location = await self.locations.find_by_id(location_id)
        if location is None:
            return None
        address = await self.address_service.fetch_by_id(location.address_id)
        return mappers.location_to_schema(location, address)
