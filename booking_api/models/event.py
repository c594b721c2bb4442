"""
Lifecycle event log.

One row is written for every booking status change (create, cancel), inside
the same transaction as the change itself.
"""

from sqlalchemy import Column, DateTime, String, Text

from booking_api.models.base import Base, generate_id


class ShipmentEvent(Base):
    __tablename__ = "shipment_event"

    id = Column(String, primary_key=True, default=generate_id)
    shipment_event_type_code = Column(String(4), nullable=False, index=True)
    event_classifier_code = Column(String(3), nullable=False)
    document_type_code = Column(String(3), nullable=False, index=True)
    document_id = Column(String(100), nullable=False, index=True)
    event_datetime = Column(DateTime(timezone=True), nullable=False)
    event_created_datetime = Column(DateTime(timezone=True), nullable=False)
    reason = Column(Text, nullable=True)
