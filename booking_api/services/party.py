from typing import Optional

from booking_api.core.concurrency import gather_or_fail
from booking_api.repositories import (
    PartyContactDetailsRepository,
    PartyIdentifyingCodeRepository,
    PartyRepository,
)
from booking_api.schemas.party import PartySchema
from booking_api.services import mappers
from booking_api.services.location import AddressService


class PartyService:
    """Parties are never shared between bookings; every create writes a new row."""

    def __init__(
        self,
        parties: PartyRepository,
        contact_details: PartyContactDetailsRepository,
        identifying_codes: PartyIdentifyingCodeRepository,
        address_service: AddressService,
    ) -> None:
        self.parties = parties
        self.contact_details = contact_details
        self.identifying_codes = identifying_codes
        self.address_service = address_service

    async def create_party(self, party: PartySchema) -> PartySchema:
        address = None
        if party.address is not None:
            address = await self.address_service.ensure_resolvable(party.address)

        saved = await self.parties.save(
            mappers.party_to_model(party, address.id if address else None)
        )
        contacts = await self.contact_details.save_all(
            mappers.contact_details_to_model(item, saved.id)
            for item in party.party_contact_details
        )
        codes = await self.identifying_codes.save_all(
            mappers.identifying_code_to_model(item, saved.id)
            for item in party.identifying_codes
        )
        return mappers.party_to_schema(
            saved,
            address,
            [mappers.contact_details_to_schema(item) for item in contacts],
            [mappers.identifying_code_to_schema(item) for item in codes],
        )

    async def fetch_party(self, party_id: str) -> Optional[PartySchema]:
        party = await self.parties.find_by_id(party_id)
        if party is None:
            return None

        address, contacts, codes = await gather_or_fail(
            self.address_service.fetch_by_id(party.address_id),
            self.contact_details.find_by_parent_id(party.id),
            self.identifying_codes.find_by_parent_id(party.id),
        )
        return mappers.party_to_schema(
            party,
            address,
            [mappers.contact_details_to_schema(item) for item in contacts],
            [mappers.identifying_code_to_schema(item) for item in codes],
        )
