from booking_api.models.party import DocumentParty, Party, PartyContactDetails, PartyIdentifyingCode
from booking_api.repositories.base import BaseRepository


class PartyRepository(BaseRepository[Party]):
    model = Party


class PartyContactDetailsRepository(BaseRepository[PartyContactDetails]):
    model = PartyContactDetails
    parent_key = "party_id"


class PartyIdentifyingCodeRepository(BaseRepository[PartyIdentifyingCode]):
    model = PartyIdentifyingCode
    parent_key = "party_id"


class DocumentPartyRepository(BaseRepository[DocumentParty]):
    model = DocumentParty
    parent_key = "booking_id"
