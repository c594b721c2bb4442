"""SQLAlchemy models for the booking service."""

from booking_api.models.booking import (  # noqa: F401
    Booking,
    Commodity,
    Reference,
    RequestedEquipment,
    RequestedEquipmentEquipment,
    ValueAddedServiceRequest,
)
from booking_api.models.event import ShipmentEvent  # noqa: F401
from booking_api.models.location import Address, DisplayedAddress, Location, ShipmentLocation  # noqa: F401
from booking_api.models.party import DocumentParty, Party, PartyContactDetails, PartyIdentifyingCode  # noqa: F401
from booking_api.models.shipment import (  # noqa: F401
    CarrierClause,
    Charge,
    Shipment,
    ShipmentCarrierClause,
    ShipmentCutOffTime,
    ShipmentTransport,
    Transport,
    TransportCall,
    TransportEvent,
)
from booking_api.models.vessel import Vessel  # noqa: F401
