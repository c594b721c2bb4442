from typing import List, Optional, Tuple

from sqlalchemy import func, select

from booking_api.models.booking import Booking
from booking_api.models.shipment import (
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
from booking_api.repositories.base import BaseRepository


class ShipmentRepository(BaseRepository[Shipment]):
    model = Shipment

    async def find_by_carrier_booking_reference(self, reference: str) -> Optional[Shipment]:
        return await self.scalar_one_or_none(
            select(Shipment).where(Shipment.carrier_booking_reference == reference)
        )

    async def find_page(
        self,
        carrier_booking_reference: Optional[str],
        document_status: Optional[str],
        offset: int,
        limit: int,
    ) -> Tuple[List[Tuple[Shipment, Booking]], int]:
        """Shipments joined to their booking, optionally filtered."""
        query = select(Shipment, Booking).join(Booking, Shipment.booking_id == Booking.id)
        count_query = select(func.count(Shipment.id)).join(
            Booking, Shipment.booking_id == Booking.id
        )
        if carrier_booking_reference:
            query = query.where(Shipment.carrier_booking_reference == carrier_booking_reference)
            count_query = count_query.where(
                Shipment.carrier_booking_reference == carrier_booking_reference
            )
        if document_status:
            query = query.where(Booking.document_status == document_status)
            count_query = count_query.where(Booking.document_status == document_status)

        total = await self.scalar_one_or_none(count_query) or 0
        result = await self.execute(
            query.order_by(Shipment.confirmation_datetime.desc(), Shipment.id)
            .offset(offset)
            .limit(limit)
        )
        return [(row[0], row[1]) for row in result.all()], total


class ShipmentCutOffTimeRepository(BaseRepository[ShipmentCutOffTime]):
    model = ShipmentCutOffTime
    parent_key = "shipment_id"


class CarrierClauseRepository(BaseRepository[CarrierClause]):
    model = CarrierClause

    async def find_by_shipment_id(self, shipment_id: str) -> List[CarrierClause]:
        return await self.scalars(
            select(CarrierClause)
            .join(ShipmentCarrierClause, ShipmentCarrierClause.carrier_clause_id == CarrierClause.id)
            .where(ShipmentCarrierClause.shipment_id == shipment_id)
        )


class ChargeRepository(BaseRepository[Charge]):
    model = Charge
    parent_key = "shipment_id"


class TransportCallRepository(BaseRepository[TransportCall]):
    model = TransportCall


class TransportEventRepository(BaseRepository[TransportEvent]):
    model = TransportEvent
    parent_key = "transport_call_id"

    async def find_latest(
        self,
        transport_call_id: Optional[str],
        event_type_code: str,
        event_classifier_code: str,
    ) -> Optional[TransportEvent]:
        if transport_call_id is None:
            return None
        rows = await self.scalars(
            select(TransportEvent)
            .where(
                TransportEvent.transport_call_id == transport_call_id,
                TransportEvent.event_type_code == event_type_code,
                TransportEvent.event_classifier_code == event_classifier_code,
            )
            .order_by(TransportEvent.event_datetime.desc())
            .limit(1)
        )
        return rows[0] if rows else None


class TransportRepository(BaseRepository[Transport]):
    model = Transport


class ShipmentTransportRepository(BaseRepository[ShipmentTransport]):
    model = ShipmentTransport
    parent_key = "shipment_id"

    async def find_by_parent_id(self, parent_id: str) -> List[ShipmentTransport]:
        return await self.scalars(
            select(ShipmentTransport)
            .where(ShipmentTransport.shipment_id == parent_id)
            .order_by(ShipmentTransport.transport_plan_stage_sequence_number)
        )
