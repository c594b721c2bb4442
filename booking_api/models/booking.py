from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Text

from booking_api.models.base import Base, generate_id


def generate_booking_reference() -> str:
    return generate_id()


class Booking(Base):
    """Root of the booking aggregate. Children reference it by booking_id."""
    __tablename__ = "booking"

    id = Column(String, primary_key=True, default=generate_id)
    # External reference, filled in by the storage default on insert
    carrier_booking_request_reference = Column(
        String(100), nullable=False, unique=True, index=True, default=generate_booking_reference
    )
    document_status = Column(String(4), nullable=False, index=True)

    receipt_delivery_type_at_origin = Column(String(3), nullable=False)
    delivery_type_at_destination = Column(String(3), nullable=False)
    cargo_movement_type_at_origin = Column(String(3), nullable=False)
    cargo_movement_type_at_destination = Column(String(3), nullable=False)

    service_contract_reference = Column(String(30), nullable=False)
    payment_term_code = Column(String(3), nullable=True)
    is_partial_load_allowed = Column(Boolean, nullable=False, default=False)
    is_export_declaration_required = Column(Boolean, nullable=False, default=False)
    export_declaration_reference = Column(String(35), nullable=True)
    is_import_license_required = Column(Boolean, nullable=False, default=False)
    import_license_reference = Column(String(35), nullable=True)
    contract_quotation_reference = Column(String(35), nullable=True)
    transport_document_type_code = Column(String(3), nullable=True)
    transport_document_reference = Column(String(20), nullable=True)
    booking_channel_reference = Column(String(20), nullable=True)
    inco_terms = Column(String(3), nullable=True)
    communication_channel = Column(String(2), nullable=False)
    is_equipment_substitution_allowed = Column(Boolean, nullable=False, default=False)
    cargo_gross_weight_unit = Column(String(3), nullable=True)

    expected_departure_date = Column(Date, nullable=True)
    expected_arrival_date_start = Column(Date, nullable=True)
    expected_arrival_date_end = Column(Date, nullable=True)
    export_voyage_number = Column(String(50), nullable=True)

    vessel_id = Column(String, ForeignKey("vessel.id"), nullable=True)
    invoice_payable_at_id = Column(String, ForeignKey("location.id"), nullable=True)
    place_of_issue_id = Column(String, ForeignKey("location.id"), nullable=True)

    booking_request_datetime = Column(DateTime(timezone=True), nullable=False)
    updated_datetime = Column(DateTime(timezone=True), nullable=False)


class Commodity(Base):
    __tablename__ = "commodity"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)

    commodity_type = Column(String(20), nullable=False)
    hs_code = Column(String(10), nullable=False)
    cargo_gross_weight = Column(Float, nullable=False)
    cargo_gross_weight_unit = Column(String(3), nullable=False)
    export_license_issue_date = Column(Date, nullable=True)
    export_license_expiry_date = Column(Date, nullable=True)


class ValueAddedServiceRequest(Base):
    __tablename__ = "value_added_service_request"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)
    value_added_service_code = Column(String(5), nullable=False)


class Reference(Base):
    __tablename__ = "reference"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)
    reference_type = Column(String(3), nullable=False)
    reference_value = Column(Text, nullable=False)


class RequestedEquipment(Base):
    __tablename__ = "requested_equipment"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)

    requested_equipment_sizetype = Column(String(4), nullable=False)
    requested_equipment_units = Column(Integer, nullable=False)
    is_shipper_owned = Column(Boolean, nullable=False, default=False)


class RequestedEquipmentEquipment(Base):
    """Join row between a requested equipment line and an equipment reference."""
    __tablename__ = "requested_equipment_equipment"

    id = Column(String, primary_key=True, default=generate_id)
    requested_equipment_id = Column(
        String, ForeignKey("requested_equipment.id"), nullable=False, index=True
    )
    equipment_reference = Column(String(15), nullable=False)
