from typing import List, Optional

from pydantic import Field, field_validator

from booking_api.schemas.common import CamelModel
from booking_api.schemas.location import AddressSchema


class PartyContactDetailsSchema(CamelModel):
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)


class IdentifyingCodeSchema(CamelModel):
    dcsa_responsible_agency_code: str = Field(..., max_length=5, alias="DCSAResponsibleAgencyCode")
    party_code: str = Field(..., max_length=100)
    code_list_name: Optional[str] = Field(None, max_length=100)


class PartySchema(CamelModel):
    id: Optional[str] = None
    party_name: Optional[str] = Field(None, max_length=100)
    tax_reference_1: Optional[str] = Field(None, max_length=20)
    tax_reference_2: Optional[str] = Field(None, max_length=20)
    public_key: Optional[str] = Field(None, max_length=500)
    address: Optional[AddressSchema] = None
    party_contact_details: List[PartyContactDetailsSchema] = Field(default_factory=list)
    identifying_codes: List[IdentifyingCodeSchema] = Field(default_factory=list)

    @field_validator("party_contact_details", "identifying_codes", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class DocumentPartySchema(CamelModel):
    party: PartySchema
    party_function: str = Field(..., max_length=3)
    # Printed address lines, kept in the order given
    displayed_address: List[str] = Field(default_factory=list)
    is_to_be_notified: bool = False

    @field_validator("displayed_address", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
