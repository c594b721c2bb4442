"""
Unit of Work for booking operations.

One unit of work owns one AsyncSession and therefore one transaction. Every
repository it exposes shares that session, so all writes made while the unit
is active commit or roll back together. Leaving the ``async with`` block
cleanly commits; leaving it with an exception rolls everything back.
"""

import asyncio
import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.core.exceptions import PersistenceError
from booking_api.repositories import (
    AddressRepository,
    BookingRepository,
    CarrierClauseRepository,
    ChargeRepository,
    CommodityRepository,
    DisplayedAddressRepository,
    DocumentPartyRepository,
    LocationRepository,
    PartyContactDetailsRepository,
    PartyIdentifyingCodeRepository,
    PartyRepository,
    ReferenceRepository,
    RequestedEquipmentEquipmentRepository,
    RequestedEquipmentRepository,
    ShipmentCutOffTimeRepository,
    ShipmentEventRepository,
    ShipmentLocationRepository,
    ShipmentRepository,
    ShipmentTransportRepository,
    TransportCallRepository,
    TransportEventRepository,
    TransportRepository,
    ValueAddedServiceRequestRepository,
    VesselRepository,
)

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncSession]


class UnitOfWork:
    def __init__(self, session_factory: Optional[SessionFactory] = None):
        if session_factory is None:
            from booking_api.core.db import AsyncSessionFactory

            session_factory = AsyncSessionFactory
        self._session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        # An AsyncSession does not allow concurrent operations
        self.lock = asyncio.Lock()

    async def __aenter__(self) -> "UnitOfWork":
        if self.session is not None:
            raise RuntimeError("UnitOfWork is already active")
        self.session = self._session_factory()
        self._bind_repositories(self.session)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
                logger.warning(
                    "Transaction rolled back due to %s: %s", exc_type.__name__, exc_val
                )
        finally:
            await self.session.close()
            self.session = None
        return False

    async def commit(self) -> None:
        try:
            await self.session.commit()
            logger.debug("Transaction committed")
        except SQLAlchemyError as e:
            await self.rollback()
            raise PersistenceError(f"Failed to commit transaction: {e}") from e

    async def rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error("Rollback failed: %s", e)

    def _bind_repositories(self, session: AsyncSession) -> None:
        lock = self.lock
        self.bookings = BookingRepository(session, lock)
        self.commodities = CommodityRepository(session, lock)
        self.value_added_service_requests = ValueAddedServiceRequestRepository(session, lock)
        self.references = ReferenceRepository(session, lock)
        self.requested_equipments = RequestedEquipmentRepository(session, lock)
        self.requested_equipment_equipments = RequestedEquipmentEquipmentRepository(session, lock)
        self.vessels = VesselRepository(session, lock)

        self.addresses = AddressRepository(session, lock)
        self.locations = LocationRepository(session, lock)
        self.shipment_locations = ShipmentLocationRepository(session, lock)
        self.displayed_addresses = DisplayedAddressRepository(session, lock)

        self.parties = PartyRepository(session, lock)
        self.party_contact_details = PartyContactDetailsRepository(session, lock)
        self.party_identifying_codes = PartyIdentifyingCodeRepository(session, lock)
        self.document_parties = DocumentPartyRepository(session, lock)

        self.shipments = ShipmentRepository(session, lock)
        self.shipment_cut_off_times = ShipmentCutOffTimeRepository(session, lock)
        self.carrier_clauses = CarrierClauseRepository(session, lock)
        self.charges = ChargeRepository(session, lock)
        self.transports = TransportRepository(session, lock)
        self.shipment_transports = ShipmentTransportRepository(session, lock)
        self.transport_calls = TransportCallRepository(session, lock)
        self.transport_events = TransportEventRepository(session, lock)

        self.shipment_events = ShipmentEventRepository(session, lock)
