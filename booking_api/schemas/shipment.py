from datetime import datetime
from typing import List, Optional

from pydantic import Field

from booking_api.models.enums import BookingStatus
from booking_api.schemas.booking import BookingAggregate
from booking_api.schemas.common import CamelModel
from booking_api.schemas.location import LocationSchema, ShipmentLocationSchema


class ShipmentCutOffTimeSchema(CamelModel):
    cut_off_date_time_code: str
    cut_off_date_time: datetime


class CarrierClauseSchema(CamelModel):
    clause_content: str


class ConfirmedEquipmentSchema(CamelModel):
    confirmed_equipment_sizetype: str
    confirmed_equipment_units: int


class ChargeSchema(CamelModel):
    charge_type: str
    currency_amount: float
    currency_code: str
    payment_term_code: str
    calculation_basis: str
    unit_price: float
    quantity: float


class TransportSchema(CamelModel):
    transport_plan_stage: str
    transport_plan_stage_sequence_number: int
    load_location: Optional[LocationSchema] = None
    discharge_location: Optional[LocationSchema] = None
    planned_departure_date: Optional[datetime] = None
    planned_arrival_date: Optional[datetime] = None
    mode_of_transport: Optional[str] = None
    vessel_name: Optional[str] = None
    vessel_imo_number: Optional[str] = Field(None, alias="vesselIMONumber")
    carrier_voyage_number: Optional[str] = None
    transport_reference: Optional[str] = None
    transport_name: Optional[str] = None
    is_under_shippers_responsibility: bool = False


class ShipmentAggregate(CamelModel):
    carrier_booking_reference: str
    terms_and_conditions: Optional[str] = None
    shipment_created_date_time: datetime
    shipment_updated_date_time: datetime
    booking: Optional[BookingAggregate] = None
    shipment_cut_off_times: List[ShipmentCutOffTimeSchema] = Field(default_factory=list)
    shipment_locations: List[ShipmentLocationSchema] = Field(default_factory=list)
    carrier_clauses: List[CarrierClauseSchema] = Field(default_factory=list)
    confirmed_equipments: List[ConfirmedEquipmentSchema] = Field(default_factory=list)
    charges: List[ChargeSchema] = Field(default_factory=list)
    transports: List[TransportSchema] = Field(default_factory=list)


class ShipmentSummary(CamelModel):
    carrier_booking_reference: str
    carrier_booking_request_reference: str
    document_status: BookingStatus
    terms_and_conditions: Optional[str] = None
    shipment_created_date_time: datetime
    shipment_updated_date_time: datetime
