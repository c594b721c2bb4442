from datetime import datetime
from typing import Optional

from booking_api.models.enums import DocumentType, EventClassifier
from booking_api.schemas.common import CamelModel


class ShipmentEventSchema(CamelModel):
    event_id: str
    shipment_event_type_code: str
    event_classifier_code: EventClassifier
    document_type_code: DocumentType
    document_id: str
    event_date_time: datetime
    event_created_date_time: datetime
    reason: Optional[str] = None
