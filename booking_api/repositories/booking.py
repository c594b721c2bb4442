from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import delete, func, select, update

from booking_api.models.booking import (
    Booking,
    Commodity,
    Reference,
    RequestedEquipment,
    RequestedEquipmentEquipment,
    ValueAddedServiceRequest,
)
from booking_api.models.vessel import Vessel
from booking_api.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    model = Booking

    async def find_by_external_reference(
        self, reference: str, for_update: bool = False
    ) -> Optional[Booking]:
        """Look up a booking by its external reference.

        ``for_update`` holds a row lock until the transaction ends.
        """
        query = select(Booking).where(Booking.carrier_booking_request_reference == reference)
        if for_update:
            query = query.with_for_update()
        return await self.scalar_one_or_none(query)

    async def set_vessel_id(self, booking_id: str, vessel_id: Optional[str]) -> int:
        return await self._set_column(booking_id, vessel_id=vessel_id)

    async def set_invoice_payable_at(self, booking_id: str, location_id: Optional[str]) -> int:
        return await self._set_column(booking_id, invoice_payable_at_id=location_id)

    async def set_place_of_issue(self, booking_id: str, location_id: Optional[str]) -> int:
        return await self._set_column(booking_id, place_of_issue_id=location_id)

    async def update_status_for_reference(
        self,
        reference: str,
        expected_status: str,
        new_status: str,
        updated_datetime: datetime,
    ) -> int:
        """Conditionally move a booking to a new status; returns rows affected."""
        result = await self.execute(
            update(Booking)
            .where(
                Booking.carrier_booking_request_reference == reference,
                Booking.document_status == expected_status,
            )
            .values(document_status=new_status, updated_datetime=updated_datetime)
        )
        return result.rowcount

    async def find_page(
        self,
        status: Optional[str],
        offset: int,
        limit: int,
    ) -> Tuple[List[Booking], int]:
        query = select(Booking)
        count_query = select(func.count(Booking.id))
        if status:
            query = query.where(Booking.document_status == status)
            count_query = count_query.where(Booking.document_status == status)

        total = await self.scalar_one_or_none(count_query) or 0
        items = await self.scalars(
            query.order_by(Booking.booking_request_datetime.desc(), Booking.id)
            .offset(offset)
            .limit(limit)
        )
        return items, total

    async def _set_column(self, booking_id: str, **values) -> int:
        result = await self.execute(
            update(Booking).where(Booking.id == booking_id).values(**values)
        )
        return result.rowcount


class CommodityRepository(BaseRepository[Commodity]):
    model = Commodity
    parent_key = "booking_id"


class ValueAddedServiceRequestRepository(BaseRepository[ValueAddedServiceRequest]):
    model = ValueAddedServiceRequest
    parent_key = "booking_id"


class ReferenceRepository(BaseRepository[Reference]):
    model = Reference
    parent_key = "booking_id"


class RequestedEquipmentRepository(BaseRepository[RequestedEquipment]):
    model = RequestedEquipment
    parent_key = "booking_id"


class RequestedEquipmentEquipmentRepository(BaseRepository[RequestedEquipmentEquipment]):
    model = RequestedEquipmentEquipment
    parent_key = "requested_equipment_id"

    async def find_by_requested_equipment_ids(
        self, requested_equipment_ids: List[str]
    ) -> List[RequestedEquipmentEquipment]:
        if not requested_equipment_ids:
            return []
        return await self.scalars(
            select(RequestedEquipmentEquipment).where(
                RequestedEquipmentEquipment.requested_equipment_id.in_(requested_equipment_ids)
            )
        )

    async def delete_by_booking_id(self, booking_id: str) -> int:
        owned = select(RequestedEquipment.id).where(RequestedEquipment.booking_id == booking_id)
        result = await self.execute(
            delete(RequestedEquipmentEquipment).where(
                RequestedEquipmentEquipment.requested_equipment_id.in_(owned)
            )
        )
        return result.rowcount


class VesselRepository(BaseRepository[Vessel]):
    model = Vessel

    async def find_by_imo_number(self, imo_number: str) -> Optional[Vessel]:
        return await self.scalar_one_or_none(
            select(Vessel).where(Vessel.vessel_imo_number == imo_number)
        )

    async def find_by_name(self, name: str) -> List[Vessel]:
        return await self.scalars(select(Vessel).where(Vessel.vessel_name == name))
