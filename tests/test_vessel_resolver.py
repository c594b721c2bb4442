import pytest

from booking_api.core.exceptions import AmbiguousReferenceError, ConflictError, NotFoundError
from booking_api.models.booking import Booking
from booking_api.services.vessel_resolver import VesselResolver
from tests.factories import ESSEN_IMO, ESSEN_NAME, TWIN_NAME, utc


@pytest.fixture
async def booking_id(session_factory):
    booking = Booking(
        document_status="RECE",
        receipt_delivery_type_at_origin="CY",
        delivery_type_at_destination="CY",
        cargo_movement_type_at_origin="FCL",
        cargo_movement_type_at_destination="FCL",
        service_contract_reference="SC-1",
        communication_channel="AO",
        booking_request_datetime=utc(2026, 10, 1),
        updated_datetime=utc(2026, 10, 1),
    )
    async with session_factory() as session:
        session.add(booking)
        await session.commit()
    return booking.id


async def _resolve(uow_factory, booking_id, name, imo):
    async with uow_factory() as uow:
        vessel = await VesselResolver(uow.vessels, uow.bookings).resolve(booking_id, name, imo)
        booking = await uow.bookings.find_by_id(booking_id)
        return vessel, booking.vessel_id


async def test_imo_number_and_matching_name(uow_factory, booking_id):
    vessel, linked = await _resolve(uow_factory, booking_id, ESSEN_NAME, ESSEN_IMO)
    assert vessel.vessel_imo_number == ESSEN_IMO
    assert linked == vessel.id


async def test_imo_number_alone(uow_factory, booking_id):
    vessel, _ = await _resolve(uow_factory, booking_id, None, ESSEN_IMO)
    assert vessel.vessel_name == ESSEN_NAME


async def test_name_contradicting_imo_number(uow_factory, booking_id):
    with pytest.raises(ConflictError, match="does not match"):
        await _resolve(uow_factory, booking_id, "EMMA MAERSK", ESSEN_IMO)


async def test_unknown_imo_number(uow_factory, booking_id):
    with pytest.raises(NotFoundError):
        await _resolve(uow_factory, booking_id, None, "0000000")


async def test_unique_name(uow_factory, booking_id):
    vessel, linked = await _resolve(uow_factory, booking_id, "EMMA MAERSK", None)
    assert vessel.vessel_imo_number == "9321483"
    assert linked == vessel.id


async def test_name_shared_by_two_vessels(uow_factory, booking_id):
    with pytest.raises(AmbiguousReferenceError, match="vesselIMONumber"):
        await _resolve(uow_factory, booking_id, TWIN_NAME, None)


async def test_unknown_name(uow_factory, booking_id):
    with pytest.raises(NotFoundError):
        await _resolve(uow_factory, booking_id, "FLYING DUTCHMAN", None)


async def test_no_vessel_given(uow_factory, booking_id):
    vessel, linked = await _resolve(uow_factory, booking_id, None, None)
    assert vessel is None
    assert linked is None
