import pytest

from booking_api.core.exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from booking_api.models.booking import Booking, Commodity, RequestedEquipment
from booking_api.models.enums import BookingStatus
from booking_api.models.event import ShipmentEvent
from booking_api.models.location import Location
from booking_api.models.party import DocumentParty
from booking_api.services.collections import ShipmentLocationManager
from tests.factories import ESSEN_IMO, ESSEN_NAME, booking_request


async def test_create_then_get_returns_the_same_aggregate(orchestrator):
    created = await orchestrator.create_booking(booking_request())
    fetched = await orchestrator.get_booking(created.carrier_booking_request_reference)

    assert created.model_dump() == fetched.model_dump()


async def test_create_defaults(orchestrator):
    created = await orchestrator.create_booking(booking_request())

    assert created.carrier_booking_request_reference
    assert created.document_status == BookingStatus.RECEIVED
    assert created.booking_request_datetime == created.updated_datetime
    assert created.vessel_name == ESSEN_NAME
    assert created.vessel_imo_number == ESSEN_IMO
    assert created.invoice_payable_at.address.city == "Hamburg"
    assert created.place_of_issue is None
    assert created.requested_equipments[0].equipment_references == ["APZU4812090"]


async def test_create_without_collections(orchestrator):
    request = booking_request(
        commodities=None,
        valueAddedServiceRequests=[],
        references=None,
        requestedEquipments=[],
        documentParties=None,
        shipmentLocations=[],
        invoicePayableAt=None,
    )
    created = await orchestrator.create_booking(request)
    fetched = await orchestrator.get_booking(created.carrier_booking_request_reference)

    assert fetched.commodities == []
    assert fetched.document_parties == []
    assert fetched.invoice_payable_at is None
    assert created.model_dump() == fetched.model_dump()


async def test_conditional_rule_rejects_before_any_write(orchestrator, count_rows):
    with pytest.raises(ValidationError):
        await orchestrator.create_booking(booking_request(importLicenseReference=None))

    assert await count_rows(Booking) == 0
    assert await count_rows(ShipmentEvent) == 0


async def test_failing_collection_rolls_back_everything(orchestrator, count_rows, monkeypatch):
    async def broken(self, booking_id, items):
        raise PersistenceError("disk full")

    monkeypatch.setattr(ShipmentLocationManager, "_create_items", broken)

    with pytest.raises(PersistenceError):
        await orchestrator.create_booking(booking_request())

    for model in (Booking, Commodity, RequestedEquipment, DocumentParty, Location, ShipmentEvent):
        assert await count_rows(model) == 0


async def test_unknown_location_id_rolls_back(orchestrator, count_rows):
    request = booking_request(
        shipmentLocations=[
            {
                "location": {"id": "no-such-location"},
                "shipmentLocationTypeCode": "POD",
            }
        ]
    )
    with pytest.raises(NotFoundError):
        await orchestrator.create_booking(request)

    assert await count_rows(Booking) == 0


async def test_vessel_conflict_rolls_back(orchestrator, count_rows):
    with pytest.raises(ConflictError):
        await orchestrator.create_booking(booking_request(vesselName="EMMA MAERSK"))

    assert await count_rows(Booking) == 0


async def test_existing_location_is_reused(orchestrator, count_rows):
    first = await orchestrator.create_booking(booking_request())
    location_id = first.shipment_locations[0].location.id
    locations_before = await count_rows(Location)

    second = await orchestrator.create_booking(
        booking_request(
            invoicePayableAt=None,
            shipmentLocations=[
                {"location": {"id": location_id}, "shipmentLocationTypeCode": "POD"}
            ],
        )
    )

    assert second.shipment_locations[0].location.id == location_id
    assert second.shipment_locations[0].location.location_name == "Port of Hamburg"
    assert await count_rows(Location) == locations_before


async def test_get_unknown_booking(orchestrator):
    with pytest.raises(NotFoundError):
        await orchestrator.get_booking("does-not-exist")


async def test_booking_summaries(orchestrator):
    first = await orchestrator.create_booking(booking_request())
    await orchestrator.create_booking(booking_request(vesselName=None, vesselIMONumber=None))
    await orchestrator.create_booking(booking_request())
    await orchestrator.cancel_booking(first.carrier_booking_request_reference)

    page = await orchestrator.list_booking_summaries(page=1, page_size=2)
    assert page.total == 3
    assert page.total_pages == 2
    assert len(page.items) == 2

    cancelled = await orchestrator.list_booking_summaries(status=BookingStatus.CANCELLED)
    assert [item.carrier_booking_request_reference for item in cancelled.items] == [
        first.carrier_booking_request_reference
    ]
    assert cancelled.items[0].vessel_imo_number == ESSEN_IMO
