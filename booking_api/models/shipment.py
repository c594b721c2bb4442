from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text

from booking_api.models.base import Base, generate_id


class Shipment(Base):
    """Confirmed counterpart of a booking, produced by the carrier's confirmation process."""
    __tablename__ = "shipment"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)
    carrier_id = Column(String, nullable=True)
    carrier_booking_reference = Column(String(35), nullable=False, unique=True, index=True)
    terms_and_conditions = Column(Text, nullable=True)
    confirmation_datetime = Column(DateTime(timezone=True), nullable=False)
    updated_datetime = Column(DateTime(timezone=True), nullable=False)


class ShipmentCutOffTime(Base):
    __tablename__ = "shipment_cutoff_time"

    id = Column(String, primary_key=True, default=generate_id)
    shipment_id = Column(String, ForeignKey("shipment.id"), nullable=False, index=True)
    cut_off_time_code = Column(String(3), nullable=False)
    cut_off_datetime = Column(DateTime(timezone=True), nullable=False)


class CarrierClause(Base):
    __tablename__ = "carrier_clauses"

    id = Column(String, primary_key=True, default=generate_id)
    clause_content = Column(Text, nullable=False)


class ShipmentCarrierClause(Base):
    __tablename__ = "shipment_carrier_clauses"

    id = Column(String, primary_key=True, default=generate_id)
    shipment_id = Column(String, ForeignKey("shipment.id"), nullable=False, index=True)
    carrier_clause_id = Column(String, ForeignKey("carrier_clauses.id"), nullable=False)


class Charge(Base):
    __tablename__ = "charge"

    id = Column(String, primary_key=True, default=generate_id)
    shipment_id = Column(String, ForeignKey("shipment.id"), nullable=False, index=True)
    charge_type = Column(String(20), nullable=False)
    currency_amount = Column(Float, nullable=False)
    currency_code = Column(String(3), nullable=False)
    payment_term_code = Column(String(3), nullable=False)
    calculation_basis = Column(String(50), nullable=False)
    unit_price = Column(Float, nullable=False)
    quantity = Column(Float, nullable=False)


class TransportCall(Base):
    __tablename__ = "transport_call"

    id = Column(String, primary_key=True, default=generate_id)
    location_id = Column(String, ForeignKey("location.id"), nullable=True)
    vessel_id = Column(String, ForeignKey("vessel.id"), nullable=True)
    mode_of_transport = Column(String(50), nullable=True)  # VESSEL, RAIL, TRUCK, BARGE
    export_voyage_number = Column(String(50), nullable=True)
    import_voyage_number = Column(String(50), nullable=True)


class TransportEvent(Base):
    __tablename__ = "transport_event"

    id = Column(String, primary_key=True, default=generate_id)
    transport_call_id = Column(String, ForeignKey("transport_call.id"), nullable=False, index=True)
    event_type_code = Column(String(4), nullable=False)  # ARRI, DEPA
    event_classifier_code = Column(String(3), nullable=False)  # PLN, EST, ACT
    event_datetime = Column(DateTime(timezone=True), nullable=False)


class Transport(Base):
    __tablename__ = "transport"

    id = Column(String, primary_key=True, default=generate_id)
    transport_reference = Column(String(50), nullable=True)
    transport_name = Column(String(100), nullable=True)
    load_transport_call_id = Column(String, ForeignKey("transport_call.id"), nullable=False)
    discharge_transport_call_id = Column(String, ForeignKey("transport_call.id"), nullable=False)


class ShipmentTransport(Base):
    __tablename__ = "shipment_transport"

    id = Column(String, primary_key=True, default=generate_id)
    shipment_id = Column(String, ForeignKey("shipment.id"), nullable=False, index=True)
    transport_id = Column(String, ForeignKey("transport.id"), nullable=False)
    transport_plan_stage_sequence_number = Column(Integer, nullable=False)
    transport_plan_stage_code = Column(String(3), nullable=False)
    is_under_shippers_responsibility = Column(Boolean, nullable=False, default=False)
