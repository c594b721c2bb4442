import pytest

from booking_api.core.exceptions import ValidationError
from booking_api.models.booking import RequestedEquipment, RequestedEquipmentEquipment
from booking_api.models.location import DisplayedAddress
from booking_api.schemas.booking import CommoditySchema, RequestedEquipmentSchema
from booking_api.services.components import BookingComponents
from tests.factories import booking_request


async def test_empty_or_missing_items_create_nothing(uow_factory):
    async with uow_factory() as uow:
        c = BookingComponents.from_unit_of_work(uow)
        assert await c.commodities.create("b-1", []) == []
        assert await c.commodities.create("b-1", None) == []
        assert await c.document_parties.create("b-1", None) == []
        assert await c.commodities.fetch("b-1") == []


async def test_equipment_over_unit_count_rejects_whole_collection(uow_factory, count_rows):
    items = [
        RequestedEquipmentSchema(
            requested_equipment_sizetype="22GP",
            requested_equipment_units=2,
            equipment_references=["APZU4812090"],
        ),
        RequestedEquipmentSchema(
            requested_equipment_sizetype="45GP",
            requested_equipment_units=1,
            equipment_references=["MSKU1234565", "MSKU7654321"],
        ),
    ]

    with pytest.raises(ValidationError):
        async with uow_factory() as uow:
            c = BookingComponents.from_unit_of_work(uow)
            await c.requested_equipments.create("b-1", items)

    assert await count_rows(RequestedEquipment) == 0
    assert await count_rows(RequestedEquipmentEquipment) == 0


async def test_nested_rows_follow_their_parent(orchestrator, uow_factory):
    created = await orchestrator.create_booking(booking_request())

    async with uow_factory() as uow:
        c = BookingComponents.from_unit_of_work(uow)
        booking = await uow.bookings.find_by_external_reference(
            created.carrier_booking_request_reference
        )
        equipments = await c.requested_equipments.fetch(booking.id)
        parties = await c.document_parties.fetch(booking.id)

    assert equipments[0].equipment_references == ["APZU4812090"]
    assert parties[0].displayed_address == ["Shipper GmbH", "Kaiserkai 1", "20457 Hamburg"]
    assert parties[0].party.identifying_codes[0].party_code == "SHP01"


async def test_replace_removes_rows_even_when_new_list_is_empty(
    orchestrator, uow_factory, count_rows
):
    created = await orchestrator.create_booking(booking_request())

    async with uow_factory() as uow:
        c = BookingComponents.from_unit_of_work(uow)
        booking = await uow.bookings.find_by_external_reference(
            created.carrier_booking_request_reference
        )
        assert await c.requested_equipments.replace(booking.id, []) == []
        assert await c.document_parties.replace(booking.id, None) == []
        replaced = await c.commodities.replace(
            booking.id,
            [
                CommoditySchema(
                    commodity_type="Furniture",
                    hs_code="940360",
                    cargo_gross_weight=800.0,
                    cargo_gross_weight_unit="KGM",
                )
            ],
        )

    assert [item.commodity_type for item in replaced] == ["Furniture"]
    assert await count_rows(RequestedEquipment) == 0
    assert await count_rows(RequestedEquipmentEquipment) == 0
    assert await count_rows(DisplayedAddress) == 0


async def test_equipment_references_up_to_unit_count(uow_factory):
    item = RequestedEquipmentSchema(
        requested_equipment_sizetype="45GP",
        requested_equipment_units=2,
        equipment_references=["MSKU1234565", "MSKU7654321"],
    )

    async with uow_factory() as uow:
        c = BookingComponents.from_unit_of_work(uow)
        created = await c.requested_equipments.create("b-1", [item])
        fetched = await c.requested_equipments.fetch("b-1")

    assert [c.model_dump() for c in created] == [item.model_dump()]
    assert sorted(fetched[0].equipment_references) == ["MSKU1234565", "MSKU7654321"]
