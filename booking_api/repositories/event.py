from typing import List, Optional

from sqlalchemy import select

from booking_api.models.event import ShipmentEvent
from booking_api.repositories.base import BaseRepository


class ShipmentEventRepository(BaseRepository[ShipmentEvent]):
    model = ShipmentEvent

    async def find_filtered(
        self,
        event_type: Optional[str] = None,
        document_type: Optional[str] = None,
        document_id: Optional[str] = None,
        limit: int = 100,
    ) -> List[ShipmentEvent]:
        query = select(ShipmentEvent)
        if event_type:
            query = query.where(ShipmentEvent.shipment_event_type_code == event_type)
        if document_type:
            query = query.where(ShipmentEvent.document_type_code == document_type)
        if document_id:
            query = query.where(ShipmentEvent.document_id == document_id)

        return await self.scalars(
            query.order_by(
                ShipmentEvent.event_created_datetime.desc(), ShipmentEvent.id
            ).limit(limit)
        )
