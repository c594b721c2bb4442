from sqlalchemy import Column, String

from booking_api.models.base import Base, generate_id


class Vessel(Base):
    """Vessels are reference data; bookings point at them but never create them."""
    __tablename__ = "vessel"

    id = Column(String, primary_key=True, default=generate_id)
    vessel_imo_number = Column(String(7), nullable=True, unique=True, index=True)
    vessel_name = Column(String(35), nullable=True, index=True)
    vessel_flag = Column(String(2), nullable=True)
    vessel_call_sign_number = Column(String(10), nullable=True)
    vessel_operator_carrier_code = Column(String(10), nullable=True)
