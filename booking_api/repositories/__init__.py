from booking_api.repositories.booking import (
    BookingRepository,
    CommodityRepository,
    ReferenceRepository,
    RequestedEquipmentEquipmentRepository,
    RequestedEquipmentRepository,
    ValueAddedServiceRequestRepository,
    VesselRepository,
)
from booking_api.repositories.event import ShipmentEventRepository
from booking_api.repositories.location import (
    AddressRepository,
    DisplayedAddressRepository,
    LocationRepository,
    ShipmentLocationRepository,
)
from booking_api.repositories.party import (
    DocumentPartyRepository,
    PartyContactDetailsRepository,
    PartyIdentifyingCodeRepository,
    PartyRepository,
)
from booking_api.repositories.shipment import (
    CarrierClauseRepository,
    ChargeRepository,
    ShipmentCutOffTimeRepository,
    ShipmentRepository,
    ShipmentTransportRepository,
    TransportCallRepository,
    TransportEventRepository,
    TransportRepository,
)

__all__ = [
    "AddressRepository",
    "BookingRepository",
    "CarrierClauseRepository",
    "ChargeRepository",
    "CommodityRepository",
    "DisplayedAddressRepository",
    "DocumentPartyRepository",
    "LocationRepository",
    "PartyContactDetailsRepository",
    "PartyIdentifyingCodeRepository",
    "PartyRepository",
    "ReferenceRepository",
    "RequestedEquipmentEquipmentRepository",
    "RequestedEquipmentRepository",
    "ShipmentCutOffTimeRepository",
    "ShipmentEventRepository",
    "ShipmentLocationRepository",
    "ShipmentRepository",
    "ShipmentTransportRepository",
    "TransportCallRepository",
    "TransportEventRepository",
    "TransportRepository",
    "ValueAddedServiceRequestRepository",
    "VesselRepository",
]
