from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from booking_api.models.base import Base, generate_id


class Address(Base):
    __tablename__ = "address"

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String(100), nullable=True)
    street = Column(String(100), nullable=True)
    street_number = Column(String(50), nullable=True)
    floor = Column(String(50), nullable=True)
    postal_code = Column(String(10), nullable=True)
    city = Column(String(65), nullable=True)
    state_region = Column(String(65), nullable=True)
    country = Column(String(75), nullable=True)


class Location(Base):
    __tablename__ = "location"

    id = Column(String, primary_key=True, default=generate_id)
    location_name = Column(String(100), nullable=True)
    latitude = Column(String(10), nullable=True)
    longitude = Column(String(11), nullable=True)
    un_location_code = Column(String(5), nullable=True)
    address_id = Column(String, ForeignKey("address.id"), nullable=True)


class ShipmentLocation(Base):
    __tablename__ = "shipment_location"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)
    location_id = Column(String, ForeignKey("location.id"), nullable=False)

    shipment_location_type_code = Column(String(3), nullable=False)
    displayed_name = Column(String(250), nullable=True)
    event_date_time = Column(DateTime(timezone=True), nullable=True)


class DisplayedAddress(Base):
    """One printed address line of a document party; order is significant."""
    __tablename__ = "displayed_address"

    id = Column(String, primary_key=True, default=generate_id)
    document_party_id = Column(String, ForeignKey("document_party.id"), nullable=False, index=True)
    address_line_number = Column(Integer, nullable=False)
    address_line = Column(String(250), nullable=False)
