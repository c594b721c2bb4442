import pytest
from sqlalchemy import select

from booking_api.core.exceptions import NotFoundError
from booking_api.models.booking import Booking
from booking_api.models.enums import BookingStatus
from booking_api.models.location import Location
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
from booking_api.models.vessel import Vessel
from tests.factories import ESSEN_IMO, booking_request, utc


@pytest.fixture
async def shipment_reference(orchestrator, session_factory):
    created = await orchestrator.create_booking(booking_request())

    async with session_factory() as session:
        booking = (
            await session.execute(
                select(Booking).where(
                    Booking.carrier_booking_request_reference
                    == created.carrier_booking_request_reference
                )
            )
        ).scalar_one()
        vessel = (
            await session.execute(select(Vessel).where(Vessel.vessel_imo_number == ESSEN_IMO))
        ).scalar_one()

        shipment = Shipment(
            booking_id=booking.id,
            carrier_booking_reference="CBR-0001",
            terms_and_conditions="Carrier standard terms apply",
            confirmation_datetime=utc(2026, 10, 20, 9),
            updated_datetime=utc(2026, 10, 20, 9),
        )
        hamburg = Location(location_name="Hamburg CTA", un_location_code="DEHAM")
        singapore = Location(location_name="Pasir Panjang", un_location_code="SGSIN")
        clause = CarrierClause(clause_content="Subject to space availability")
        session.add_all([shipment, hamburg, singapore, clause])
        await session.flush()

        load_call = TransportCall(
            location_id=hamburg.id,
            vessel_id=vessel.id,
            mode_of_transport="VESSEL",
            export_voyage_number="2611W",
        )
        discharge_call = TransportCall(location_id=singapore.id, vessel_id=vessel.id)
        session.add_all([load_call, discharge_call])
        await session.flush()

        transport = Transport(
            transport_reference="TR-1",
            transport_name="Asia Express",
            load_transport_call_id=load_call.id,
            discharge_transport_call_id=discharge_call.id,
        )
        session.add(transport)
        await session.flush()

        session.add_all([
            ShipmentCutOffTime(
                shipment_id=shipment.id,
                cut_off_time_code="DCO",
                cut_off_datetime=utc(2026, 10, 30, 12),
            ),
            ShipmentCarrierClause(shipment_id=shipment.id, carrier_clause_id=clause.id),
            Charge(
                shipment_id=shipment.id,
                charge_type="OFR",
                currency_amount=1850.0,
                currency_code="USD",
                payment_term_code="PRE",
                calculation_basis="PER CONTAINER",
                unit_price=925.0,
                quantity=2,
            ),
            ShipmentTransport(
                shipment_id=shipment.id,
                transport_id=transport.id,
                transport_plan_stage_sequence_number=1,
                transport_plan_stage_code="MNC",
                is_under_shippers_responsibility=False,
            ),
            TransportEvent(
                transport_call_id=load_call.id,
                event_type_code="DEPA",
                event_classifier_code="PLN",
                event_datetime=utc(2026, 11, 1, 18),
            ),
            TransportEvent(
                transport_call_id=load_call.id,
                event_type_code="DEPA",
                event_classifier_code="PLN",
                event_datetime=utc(2026, 11, 2, 6),
            ),
            TransportEvent(
                transport_call_id=load_call.id,
                event_type_code="DEPA",
                event_classifier_code="EST",
                event_datetime=utc(2026, 11, 5, 6),
            ),
            TransportEvent(
                transport_call_id=discharge_call.id,
                event_type_code="ARRI",
                event_classifier_code="PLN",
                event_datetime=utc(2026, 11, 21, 7),
            ),
        ])
        await session.commit()

    return "CBR-0001", created


async def test_get_shipment(orchestrator, shipment_reference):
    reference, created = shipment_reference

    shipment = await orchestrator.get_shipment(reference)

    assert shipment.carrier_booking_reference == reference
    assert shipment.terms_and_conditions == "Carrier standard terms apply"
    assert shipment.booking.model_dump() == created.model_dump()
    assert [c.cut_off_date_time_code for c in shipment.shipment_cut_off_times] == ["DCO"]
    assert [c.clause_content for c in shipment.carrier_clauses] == ["Subject to space availability"]
    assert shipment.charges[0].currency_amount == 1850.0
    assert [
        (e.confirmed_equipment_sizetype, e.confirmed_equipment_units)
        for e in shipment.confirmed_equipments
    ] == [("22GP", 2)]
    assert [s.model_dump() for s in shipment.shipment_locations] == [
        s.model_dump() for s in created.shipment_locations
    ]


async def test_shipment_transport_leg(orchestrator, shipment_reference):
    reference, _ = shipment_reference

    transport = (await orchestrator.get_shipment(reference)).transports[0]

    assert transport.transport_plan_stage == "MNC"
    assert transport.transport_plan_stage_sequence_number == 1
    assert transport.load_location.un_location_code == "DEHAM"
    assert transport.discharge_location.un_location_code == "SGSIN"
    assert transport.planned_departure_date == utc(2026, 11, 2, 6)
    assert transport.planned_arrival_date == utc(2026, 11, 21, 7)
    assert transport.mode_of_transport == "VESSEL"
    assert transport.vessel_imo_number == ESSEN_IMO
    assert transport.carrier_voyage_number == "2611W"


async def test_unknown_shipment(orchestrator):
    with pytest.raises(NotFoundError):
        await orchestrator.get_shipment("CBR-9999")


async def test_shipment_summaries(orchestrator, shipment_reference):
    reference, created = shipment_reference

    page = await orchestrator.list_shipment_summaries()
    assert page.total == 1
    assert page.items[0].carrier_booking_reference == reference
    assert page.items[0].carrier_booking_request_reference == (
        created.carrier_booking_request_reference
    )

    await orchestrator.cancel_booking(created.carrier_booking_request_reference)

    received = await orchestrator.list_shipment_summaries(
        document_status=BookingStatus.RECEIVED
    )
    cancelled = await orchestrator.list_shipment_summaries(
        document_status=BookingStatus.CANCELLED
    )
    assert received.total == 0
    assert cancelled.items[0].document_status == BookingStatus.CANCELLED
    assert (await orchestrator.list_shipment_summaries(carrier_booking_reference="X")).total == 0
