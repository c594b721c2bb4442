"""
Explicit conversions between transfer shapes and mapped rows.

Every field is listed by hand; nothing is copied by reflection. Datetimes
are stored in UTC and always come back timezone aware, whatever the
backend returns.
"""

from datetime import datetime, timezone
from typing import List, Optional

from booking_api.models.booking import (
    Booking,
    Commodity,
    Reference,
    RequestedEquipment,
    ValueAddedServiceRequest,
)
from booking_api.models.event import ShipmentEvent
from booking_api.models.location import Address, Location, ShipmentLocation
from booking_api.models.party import Party, PartyContactDetails, PartyIdentifyingCode
from booking_api.models.vessel import Vessel
from booking_api.schemas.booking import (
    BookingAggregate,
    BookingRequest,
    BookingResponse,
    BookingSummary,
    CommoditySchema,
    ReferenceSchema,
    RequestedEquipmentSchema,
    ValueAddedServiceRequestSchema,
)
from booking_api.schemas.event import ShipmentEventSchema
from booking_api.schemas.location import AddressSchema, LocationSchema, ShipmentLocationSchema
from booking_api.schemas.party import (
    IdentifyingCodeSchema,
    PartyContactDetailsSchema,
    PartySchema,
)


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _code(value) -> Optional[str]:
    return getattr(value, "value", value)


# Booking root

def apply_booking_request(booking: Booking, request: BookingRequest) -> Booking:
    """Copy root fields from a request onto a row.

    Status, timestamps and the external reference are left alone. Vessel and
    root-level locations are cleared; they are attached separately.
    """
    booking.receipt_delivery_type_at_origin = _code(request.receipt_delivery_type_at_origin)
    booking.delivery_type_at_destination = _code(request.delivery_type_at_destination)
    booking.cargo_movement_type_at_origin = _code(request.cargo_movement_type_at_origin)
    booking.cargo_movement_type_at_destination = _code(request.cargo_movement_type_at_destination)
    booking.service_contract_reference = request.service_contract_reference
    booking.payment_term_code = _code(request.payment_term_code)
    booking.is_partial_load_allowed = request.is_partial_load_allowed
    booking.is_export_declaration_required = request.is_export_declaration_required
    booking.export_declaration_reference = request.export_declaration_reference
    booking.is_import_license_required = request.is_import_license_required
    booking.import_license_reference = request.import_license_reference
    booking.contract_quotation_reference = request.contract_quotation_reference
    booking.transport_document_type_code = _code(request.transport_document_type_code)
    booking.transport_document_reference = request.transport_document_reference
    booking.booking_channel_reference = request.booking_channel_reference
    booking.inco_terms = request.inco_terms
    booking.communication_channel = _code(request.communication_channel)
    booking.is_equipment_substitution_allowed = request.is_equipment_substitution_allowed
    booking.cargo_gross_weight_unit = _code(request.cargo_gross_weight_unit)
    booking.expected_departure_date = request.expected_departure_date
    booking.expected_arrival_date_start = request.expected_arrival_date_start
    booking.expected_arrival_date_end = request.expected_arrival_date_end
    booking.export_voyage_number = request.export_voyage_number
    booking.vessel_id = None
    booking.invoice_payable_at_id = None
    booking.place_of_issue_id = None
    return booking


def booking_to_aggregate(booking: Booking) -> BookingAggregate:
    """Root fields only; collections, vessel and locations start empty."""
    return BookingAggregate(
        carrier_booking_request_reference=booking.carrier_booking_request_reference,
        document_status=booking.document_status,
        booking_request_datetime=to_utc(booking.booking_request_datetime),
        updated_datetime=to_utc(booking.updated_datetime),
        receipt_delivery_type_at_origin=booking.receipt_delivery_type_at_origin,
        delivery_type_at_destination=booking.delivery_type_at_destination,
        cargo_movement_type_at_origin=booking.cargo_movement_type_at_origin,
        cargo_movement_type_at_destination=booking.cargo_movement_type_at_destination,
        service_contract_reference=booking.service_contract_reference,
        payment_term_code=booking.payment_term_code,
        is_partial_load_allowed=booking.is_partial_load_allowed,
        is_export_declaration_required=booking.is_export_declaration_required,
        export_declaration_reference=booking.export_declaration_reference,
        is_import_license_required=booking.is_import_license_required,
        import_license_reference=booking.import_license_reference,
        contract_quotation_reference=booking.contract_quotation_reference,
        transport_document_type_code=booking.transport_document_type_code,
        transport_document_reference=booking.transport_document_reference,
        booking_channel_reference=booking.booking_channel_reference,
        inco_terms=booking.inco_terms,
        communication_channel=booking.communication_channel,
        is_equipment_substitution_allowed=booking.is_equipment_substitution_allowed,
        cargo_gross_weight_unit=booking.cargo_gross_weight_unit,
        expected_departure_date=booking.expected_departure_date,
        expected_arrival_date_start=booking.expected_arrival_date_start,
        expected_arrival_date_end=booking.expected_arrival_date_end,
        export_voyage_number=booking.export_voyage_number,
    )


def booking_to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        carrier_booking_request_reference=booking.carrier_booking_request_reference,
        document_status=booking.document_status,
        booking_request_datetime=to_utc(booking.booking_request_datetime),
        updated_datetime=to_utc(booking.updated_datetime),
    )


def booking_to_summary(booking: Booking, vessel: Optional[Vessel]) -> BookingSummary:
    return BookingSummary(
        carrier_booking_request_reference=booking.carrier_booking_request_reference,
        document_status=booking.document_status,
        receipt_delivery_type_at_origin=booking.receipt_delivery_type_at_origin,
        delivery_type_at_destination=booking.delivery_type_at_destination,
        cargo_movement_type_at_origin=booking.cargo_movement_type_at_origin,
        cargo_movement_type_at_destination=booking.cargo_movement_type_at_destination,
        service_contract_reference=booking.service_contract_reference,
        vessel_imo_number=vessel.vessel_imo_number if vessel else None,
        export_voyage_number=booking.export_voyage_number,
        expected_departure_date=booking.expected_departure_date,
        booking_request_datetime=to_utc(booking.booking_request_datetime),
        updated_datetime=to_utc(booking.updated_datetime),
    )


# Booking children

def commodity_to_model(schema: CommoditySchema, booking_id: str) -> Commodity:
    return Commodity(
        booking_id=booking_id,
        commodity_type=schema.commodity_type,
        hs_code=schema.hs_code,
        cargo_gross_weight=schema.cargo_gross_weight,
        cargo_gross_weight_unit=_code(schema.cargo_gross_weight_unit),
        export_license_issue_date=schema.export_license_issue_date,
        export_license_expiry_date=schema.export_license_expiry_date,
    )


def commodity_to_schema(model: Commodity) -> CommoditySchema:
    return CommoditySchema(
        commodity_type=model.commodity_type,
        hs_code=model.hs_code,
        cargo_gross_weight=model.cargo_gross_weight,
        cargo_gross_weight_unit=model.cargo_gross_weight_unit,
        export_license_issue_date=model.export_license_issue_date,
        export_license_expiry_date=model.export_license_expiry_date,
    )


def value_added_service_to_model(
    schema: ValueAddedServiceRequestSchema, booking_id: str
) -> ValueAddedServiceRequest:
    return ValueAddedServiceRequest(
        booking_id=booking_id,
        value_added_service_code=schema.value_added_service_code,
    )


def value_added_service_to_schema(model: ValueAddedServiceRequest) -> ValueAddedServiceRequestSchema:
    return ValueAddedServiceRequestSchema(value_added_service_code=model.value_added_service_code)


def reference_to_model(schema: ReferenceSchema, booking_id: str) -> Reference:
    return Reference(
        booking_id=booking_id,
        reference_type=schema.reference_type,
        reference_value=schema.reference_value,
    )


def reference_to_schema(model: Reference) -> ReferenceSchema:
    return ReferenceSchema(
        reference_type=model.reference_type,
        reference_value=model.reference_value,
    )


def requested_equipment_to_model(
    schema: RequestedEquipmentSchema, booking_id: str
) -> RequestedEquipment:
    return RequestedEquipment(
        booking_id=booking_id,
        requested_equipment_sizetype=schema.requested_equipment_sizetype,
        requested_equipment_units=schema.requested_equipment_units,
        is_shipper_owned=schema.is_shipper_owned,
    )


def requested_equipment_to_schema(
    model: RequestedEquipment, equipment_references: List[str]
) -> RequestedEquipmentSchema:
    return RequestedEquipmentSchema(
        requested_equipment_sizetype=model.requested_equipment_sizetype,
        requested_equipment_units=model.requested_equipment_units,
        is_shipper_owned=model.is_shipper_owned,
        equipment_references=equipment_references,
    )


# Addresses and locations

def address_to_model(schema: AddressSchema) -> Address:
    return Address(
        name=schema.name,
        street=schema.street,
        street_number=schema.street_number,
        floor=schema.floor,
        postal_code=schema.postal_code,
        city=schema.city,
        state_region=schema.state_region,
        country=schema.country,
    )


def address_to_schema(model: Address) -> AddressSchema:
    return AddressSchema(
        id=model.id,
        name=model.name,
        street=model.street,
        street_number=model.street_number,
        floor=model.floor,
        postal_code=model.postal_code,
        city=model.city,
        state_region=model.state_region,
        country=model.country,
    )


def location_to_model(schema: LocationSchema, address_id: Optional[str]) -> Location:
    return Location(
        location_name=schema.location_name,
        latitude=schema.latitude,
        longitude=schema.longitude,
        un_location_code=schema.un_location_code,
        address_id=address_id,
    )


def location_to_schema(model: Location, address: Optional[AddressSchema]) -> LocationSchema:
    return LocationSchema(
        id=model.id,
        location_name=model.location_name,
        latitude=model.latitude,
        longitude=model.longitude,
        un_location_code=model.un_location_code,
        address=address,
    )


def shipment_location_to_model(
    schema: ShipmentLocationSchema, booking_id: str, location_id: str
) -> ShipmentLocation:
    return ShipmentLocation(
        booking_id=booking_id,
        location_id=location_id,
        shipment_location_type_code=schema.shipment_location_type_code,
        displayed_name=schema.displayed_name,
        event_date_time=to_utc(schema.event_date_time),
    )


def shipment_location_to_schema(
    model: ShipmentLocation, location: LocationSchema
) -> ShipmentLocationSchema:
    return ShipmentLocationSchema(
        location=location,
        shipment_location_type_code=model.shipment_location_type_code,
        displayed_name=model.displayed_name,
        event_date_time=to_utc(model.event_date_time),
    )


# Parties

def party_to_model(schema: PartySchema, address_id: Optional[str]) -> Party:
    return Party(
        party_name=schema.party_name,
        tax_reference_1=schema.tax_reference_1,
        tax_reference_2=schema.tax_reference_2,
        public_key=schema.public_key,
        address_id=address_id,
    )


def party_to_schema(
    model: Party,
    address: Optional[AddressSchema],
    contact_details: List[PartyContactDetailsSchema],
    identifying_codes: List[IdentifyingCodeSchema],
) -> PartySchema:
    return PartySchema(
        id=model.id,
        party_name=model.party_name,
        tax_reference_1=model.tax_reference_1,
        tax_reference_2=model.tax_reference_2,
        public_key=model.public_key,
        address=address,
        party_contact_details=contact_details,
        identifying_codes=identifying_codes,
    )


def contact_details_to_model(schema: PartyContactDetailsSchema, party_id: str) -> PartyContactDetails:
    return PartyContactDetails(
        party_id=party_id,
        name=schema.name,
        email=schema.email,
        phone=schema.phone,
    )


def contact_details_to_schema(model: PartyContactDetails) -> PartyContactDetailsSchema:
    return PartyContactDetailsSchema(name=model.name, email=model.email, phone=model.phone)


def identifying_code_to_model(schema: IdentifyingCodeSchema, party_id: str) -> PartyIdentifyingCode:
    return PartyIdentifyingCode(
        party_id=party_id,
        dcsa_responsible_agency_code=schema.dcsa_responsible_agency_code,
        party_code=schema.party_code,
        code_list_name=schema.code_list_name,
    )


def identifying_code_to_schema(model: PartyIdentifyingCode) -> IdentifyingCodeSchema:
    return IdentifyingCodeSchema(
        dcsa_responsible_agency_code=model.dcsa_responsible_agency_code,
        party_code=model.party_code,
        code_list_name=model.code_list_name,
    )


# Events

def shipment_event_to_schema(model: ShipmentEvent) -> ShipmentEventSchema:
    return ShipmentEventSchema(
        event_id=model.id,
        shipment_event_type_code=model.shipment_event_type_code,
        event_classifier_code=model.event_classifier_code,
        document_type_code=model.document_type_code,
        document_id=model.document_id,
        event_date_time=to_utc(model.event_datetime),
        event_created_date_time=to_utc(model.event_created_datetime),
        reason=model.reason,
    )
