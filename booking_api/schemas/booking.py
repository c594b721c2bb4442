from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from booking_api.models.enums import (
    BookingStatus,
    CargoMovementType,
    CommunicationChannel,
    PaymentTerm,
    ReceiptDeliveryType,
    TransportDocumentType,
    WeightUnit,
)
from booking_api.schemas.common import CamelModel
from booking_api.schemas.location import LocationSchema, ShipmentLocationSchema
from booking_api.schemas.party import DocumentPartySchema


class CommoditySchema(CamelModel):
    commodity_type: str = Field(..., max_length=20)
    hs_code: str = Field(..., max_length=10, alias="HSCode")
    cargo_gross_weight: float
    cargo_gross_weight_unit: WeightUnit
    export_license_issue_date: Optional[date] = None
    export_license_expiry_date: Optional[date] = None


class ValueAddedServiceRequestSchema(CamelModel):
    value_added_service_code: str = Field(..., max_length=5)


class ReferenceSchema(CamelModel):
    reference_type: str = Field(..., max_length=3)
    reference_value: str = Field(..., max_length=100)


class RequestedEquipmentSchema(CamelModel):
    requested_equipment_sizetype: str = Field(..., max_length=4)
    requested_equipment_units: int = Field(..., ge=1)
    is_shipper_owned: bool = False
    equipment_references: List[str] = Field(default_factory=list)

    @field_validator("equipment_references", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class BookingBase(CamelModel):
    receipt_delivery_type_at_origin: ReceiptDeliveryType
    delivery_type_at_destination: ReceiptDeliveryType
    cargo_movement_type_at_origin: CargoMovementType
    cargo_movement_type_at_destination: CargoMovementType
    service_contract_reference: str = Field(..., max_length=30)
    payment_term_code: Optional[PaymentTerm] = None
    is_partial_load_allowed: bool = False
    is_export_declaration_required: bool = False
    export_declaration_reference: Optional[str] = Field(None, max_length=35)
    is_import_license_required: bool = False
    import_license_reference: Optional[str] = Field(None, max_length=35)
    contract_quotation_reference: Optional[str] = Field(None, max_length=35)
    transport_document_type_code: Optional[TransportDocumentType] = None
    transport_document_reference: Optional[str] = Field(None, max_length=20)
    booking_channel_reference: Optional[str] = Field(None, max_length=20)
    inco_terms: Optional[str] = Field(None, max_length=3)
    communication_channel: CommunicationChannel
    is_equipment_substitution_allowed: bool = False
    cargo_gross_weight_unit: Optional[WeightUnit] = None
    expected_departure_date: Optional[date] = None
    expected_arrival_date_start: Optional[date] = None
    expected_arrival_date_end: Optional[date] = None
    export_voyage_number: Optional[str] = Field(None, max_length=50)
    vessel_name: Optional[str] = Field(None, max_length=35)
    vessel_imo_number: Optional[str] = Field(None, max_length=7, alias="vesselIMONumber")

    invoice_payable_at: Optional[LocationSchema] = None
    place_of_issue: Optional[LocationSchema] = None

    commodities: List[CommoditySchema] = Field(default_factory=list)
    value_added_service_requests: List[ValueAddedServiceRequestSchema] = Field(default_factory=list)
    references: List[ReferenceSchema] = Field(default_factory=list)
    requested_equipments: List[RequestedEquipmentSchema] = Field(default_factory=list)
    document_parties: List[DocumentPartySchema] = Field(default_factory=list)
    shipment_locations: List[ShipmentLocationSchema] = Field(default_factory=list)

    @field_validator(
        "commodities",
        "value_added_service_requests",
        "references",
        "requested_equipments",
        "document_parties",
        "shipment_locations",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class BookingRequest(BookingBase):
    """Body of create and update calls."""

    pass


class BookingAggregate(BookingBase):
    """A booking root together with every child collection."""

    carrier_booking_request_reference: str
    document_status: BookingStatus
    booking_request_datetime: datetime
    updated_datetime: datetime


class BookingCancellationRequest(CamelModel):
    document_status: BookingStatus
    reason: Optional[str] = Field(None, max_length=250)

    @field_validator("document_status")
    @classmethod
    def _must_cancel(cls, value: BookingStatus) -> BookingStatus:
        if value != BookingStatus.CANCELLED:
            raise ValueError(f"documentStatus must be {BookingStatus.CANCELLED.value}")
        return value


class BookingResponse(CamelModel):
    carrier_booking_request_reference: str
    document_status: BookingStatus
    booking_request_datetime: datetime
    updated_datetime: datetime


class BookingSummary(CamelModel):
    carrier_booking_request_reference: str
    document_status: BookingStatus
    receipt_delivery_type_at_origin: ReceiptDeliveryType
    delivery_type_at_destination: ReceiptDeliveryType
    cargo_movement_type_at_origin: CargoMovementType
    cargo_movement_type_at_destination: CargoMovementType
    service_contract_reference: str
    vessel_imo_number: Optional[str] = Field(None, alias="vesselIMONumber")
    export_voyage_number: Optional[str] = None
    expected_departure_date: Optional[date] = None
    booking_request_datetime: datetime
    updated_datetime: datetime
