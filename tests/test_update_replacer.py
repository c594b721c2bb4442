import pytest
from sqlalchemy import update
from sqlalchemy.dialects import postgresql

from booking_api.core.exceptions import (
    NotFoundError,
    PersistenceError,
    StateTransitionError,
    ValidationError,
)
from booking_api.models.booking import Booking, Commodity, RequestedEquipmentEquipment
from booking_api.models.enums import BookingStatus
from booking_api.models.event import ShipmentEvent
from booking_api.models.location import DisplayedAddress
from booking_api.repositories import BookingRepository
from booking_api.services.collections import ShipmentLocationManager
from tests.factories import booking_request


async def _set_status(session_factory, reference, status):
    async with session_factory() as session:
        await session.execute(
            update(Booking)
            .where(Booking.carrier_booking_request_reference == reference)
            .values(document_status=status.value)
        )
        await session.commit()


async def test_update_replaces_every_collection(orchestrator, count_rows):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    updated = await orchestrator.update_booking(
        reference,
        booking_request(
            serviceContractReference="SC-2026-002",
            commodities=[
                {
                    "commodityType": "Furniture",
                    "HSCode": "940360",
                    "cargoGrossWeight": 800.0,
                    "cargoGrossWeightUnit": "KGM",
                },
                {
                    "commodityType": "Textiles",
                    "HSCode": "610910",
                    "cargoGrossWeight": 450.5,
                    "cargoGrossWeightUnit": "KGM",
                },
            ],
            requestedEquipments=[],
            documentParties=None,
            references=[],
        ),
    )
    fetched = await orchestrator.get_booking(reference)

    assert updated.service_contract_reference == "SC-2026-002"
    assert sorted(c.commodity_type for c in fetched.commodities) == ["Furniture", "Textiles"]
    assert fetched.requested_equipments == []
    assert fetched.document_parties == []
    assert fetched.references == []
    assert [v.value_added_service_code for v in fetched.value_added_service_requests] == ["CDECL"]
    assert await count_rows(RequestedEquipmentEquipment) == 0
    assert await count_rows(DisplayedAddress) == 0


async def test_update_keeps_identity_status_and_creation_time(orchestrator):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    updated = await orchestrator.update_booking(reference, booking_request(incoTerms="FOB"))

    assert updated.carrier_booking_request_reference == reference
    assert updated.document_status == BookingStatus.RECEIVED
    assert updated.booking_request_datetime == created.booking_request_datetime
    assert updated.updated_datetime >= created.updated_datetime
    assert updated.inco_terms == "FOB"


async def test_update_result_matches_stored_aggregate(orchestrator):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    updated = await orchestrator.update_booking(reference, booking_request(placeOfIssue={
        "locationName": "Rotterdam office",
        "UNLocationCode": "NLRTM",
    }))
    fetched = await orchestrator.get_booking(reference)

    assert updated.model_dump() == fetched.model_dump()
    assert fetched.place_of_issue.un_location_code == "NLRTM"


async def test_update_without_vessel_clears_it(orchestrator):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    await orchestrator.update_booking(
        reference, booking_request(vesselName=None, vesselIMONumber=None)
    )
    fetched = await orchestrator.get_booking(reference)

    assert fetched.vessel_name is None
    assert fetched.vessel_imo_number is None


async def test_update_allowed_from_pending_update(orchestrator, session_factory):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference
    await _set_status(session_factory, reference, BookingStatus.PENDING_UPDATE)

    updated = await orchestrator.update_booking(reference, booking_request())

    assert updated.document_status == BookingStatus.PENDING_UPDATE


@pytest.mark.parametrize(
    "status",
    [BookingStatus.CONFIRMED, BookingStatus.PENDING_CONFIRMATION, BookingStatus.CANCELLED],
)
async def test_update_refused_from_other_statuses(orchestrator, session_factory, status):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference
    await _set_status(session_factory, reference, status)

    with pytest.raises(StateTransitionError) as excinfo:
        await orchestrator.update_booking(reference, booking_request(incoTerms="FOB"))

    assert excinfo.value.allowed_statuses == ["PENU", "RECE"]
    fetched = await orchestrator.get_booking(reference)
    assert fetched.inco_terms is None


async def test_update_unknown_booking(orchestrator):
    with pytest.raises(NotFoundError):
        await orchestrator.update_booking("does-not-exist", booking_request())


async def test_update_validates_before_writing(orchestrator):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    with pytest.raises(ValidationError):
        await orchestrator.update_booking(
            reference, booking_request(importLicenseReference=None, incoTerms="FOB")
        )

    fetched = await orchestrator.get_booking(reference)
    assert fetched.inco_terms is None


async def test_update_emits_no_event(orchestrator, count_rows):
    created = await orchestrator.create_booking(booking_request())
    await orchestrator.update_booking(created.carrier_booking_request_reference, booking_request())

    assert await count_rows(ShipmentEvent) == 1


async def test_failed_update_leaves_booking_untouched(orchestrator, count_rows, monkeypatch):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference
    before = await orchestrator.get_booking(reference)

    async def broken(self, booking_id, items):
        raise PersistenceError("disk full")

    monkeypatch.setattr(ShipmentLocationManager, "_create_items", broken)

    with pytest.raises(PersistenceError):
        await orchestrator.update_booking(
            reference, booking_request(incoTerms="FOB", commodities=[])
        )

    after = await orchestrator.get_booking(reference)
    assert after.model_dump() == before.model_dump()
    assert after.inco_terms is None
    assert len(after.commodities) == 1
    assert await count_rows(Commodity) == 1


async def test_update_locks_the_booking_row_before_checking_status(orchestrator, monkeypatch):
    created = await orchestrator.create_booking(booking_request())
    reference = created.carrier_booking_request_reference

    lookups = []
    original = BookingRepository.scalar_one_or_none

    async def recording(self, stmt):
        lookups.append(stmt)
        return await original(self, stmt)

    monkeypatch.setattr(BookingRepository, "scalar_one_or_none", recording)

    await orchestrator.update_booking(reference, booking_request(incoTerms="FOB"))

    compiled = str(lookups[0].compile(dialect=postgresql.dialect()))
    assert "FOR UPDATE" in compiled
