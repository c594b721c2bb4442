from datetime import datetime
from typing import Optional

from pydantic import Field

from booking_api.schemas.common import CamelModel


class AddressSchema(CamelModel):
    # A supplied id resolves to an existing address instead of creating one
    id: Optional[str] = None
    name: Optional[str] = Field(None, max_length=100)
    street: Optional[str] = Field(None, max_length=100)
    street_number: Optional[str] = Field(None, max_length=50)
    floor: Optional[str] = Field(None, max_length=50)
    postal_code: Optional[str] = Field(None, max_length=10)
    city: Optional[str] = Field(None, max_length=65)
    state_region: Optional[str] = Field(None, max_length=65)
    country: Optional[str] = Field(None, max_length=75)


class LocationSchema(CamelModel):
    id: Optional[str] = None
    location_name: Optional[str] = Field(None, max_length=100)
    latitude: Optional[str] = Field(None, max_length=10)
    longitude: Optional[str] = Field(None, max_length=11)
    un_location_code: Optional[str] = Field(None, max_length=5, alias="UNLocationCode")
    address: Optional[AddressSchema] = None


class ShipmentLocationSchema(CamelModel):
    location: LocationSchema
    shipment_location_type_code: str = Field(..., max_length=3)
    displayed_name: Optional[str] = Field(None, max_length=250)
    event_date_time: Optional[datetime] = None
