from sqlalchemy import Boolean, Column, ForeignKey, String

from booking_api.models.base import Base, generate_id


class Party(Base):
    __tablename__ = "party"

    id = Column(String, primary_key=True, default=generate_id)
    party_name = Column(String(100), nullable=True)
    tax_reference_1 = Column(String(20), nullable=True)
    tax_reference_2 = Column(String(20), nullable=True)
    public_key = Column(String(500), nullable=True)
    address_id = Column(String, ForeignKey("address.id"), nullable=True)


class PartyContactDetails(Base):
    __tablename__ = "party_contact_details"

    id = Column(String, primary_key=True, default=generate_id)
    party_id = Column(String, ForeignKey("party.id"), nullable=False, index=True)
    name = Column(String(100), nullable=True)
    email = Column(String(100), nullable=True)
    phone = Column(String(30), nullable=True)


class PartyIdentifyingCode(Base):
    __tablename__ = "party_identifying_code"

    id = Column(String, primary_key=True, default=generate_id)
    party_id = Column(String, ForeignKey("party.id"), nullable=False, index=True)
    dcsa_responsible_agency_code = Column(String(5), nullable=False)
    party_code = Column(String(100), nullable=False)
    code_list_name = Column(String(100), nullable=True)


class DocumentParty(Base):
    __tablename__ = "document_party"

    id = Column(String, primary_key=True, default=generate_id)
    booking_id = Column(String, ForeignKey("booking.id"), nullable=False, index=True)
    party_id = Column(String, ForeignKey("party.id"), nullable=False)
    party_function = Column(String(3), nullable=False)
    is_to_be_notified = Column(Boolean, nullable=False, default=False)
