import pytest
from httpx import ASGITransport, AsyncClient

from booking_api.api.deps import get_orchestrator
from booking_api.main import app
from tests.factories import booking_payload


@pytest.fixture
async def client(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _create(client) -> dict:
    response = await client.post("/v1/bookings", json=booking_payload())
    assert response.status_code == 201
    return response.json()


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_create_and_get_booking(client):
    created = await _create(client)
    reference = created["carrierBookingRequestReference"]

    assert created["documentStatus"] == "RECE"
    assert created["vesselIMONumber"] == "9632179"
    assert created["commodities"][0]["HSCode"] == "851712"

    response = await client.get(f"/v1/bookings/{reference}")
    assert response.status_code == 200
    assert response.json() == created


async def test_create_rejects_missing_conditional_reference(client):
    response = await client.post(
        "/v1/bookings", json=booking_payload(importLicenseReference=None)
    )

    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "importLicenseReference"


async def test_create_rejects_ambiguous_vessel(client):
    response = await client.post(
        "/v1/bookings",
        json=booking_payload(vesselName="EVER GIVEN", vesselIMONumber=None),
    )
    assert response.status_code == 400


async def test_malformed_body_is_rejected_by_schema(client):
    payload = booking_payload()
    del payload["serviceContractReference"]
    response = await client.post("/v1/bookings", json=payload)
    assert response.status_code == 422


async def test_update_booking(client):
    created = await _create(client)
    reference = created["carrierBookingRequestReference"]

    response = await client.put(
        f"/v1/bookings/{reference}", json=booking_payload(references=[])
    )

    assert response.status_code == 200
    assert response.json()["references"] == []
    assert response.json()["carrierBookingRequestReference"] == reference


async def test_cancel_booking(client):
    created = await _create(client)
    reference = created["carrierBookingRequestReference"]

    response = await client.patch(
        f"/v1/bookings/{reference}",
        json={"documentStatus": "CANC", "reason": "Shipper withdrew"},
    )
    assert response.status_code == 200
    assert response.json()["documentStatus"] == "CANC"

    again = await client.patch(f"/v1/bookings/{reference}", json={"documentStatus": "CANC"})
    assert again.status_code == 409
    assert again.json()["detail"]["currentStatus"] == "CANC"

    update = await client.put(f"/v1/bookings/{reference}", json=booking_payload())
    assert update.status_code == 409

    events = await client.get("/v1/events", params={"documentID": reference})
    assert sorted(e["shipmentEventTypeCode"] for e in events.json()) == ["CANC", "RECE"]


async def test_cancel_requires_cancelled_status(client):
    created = await _create(client)
    response = await client.patch(
        f"/v1/bookings/{created['carrierBookingRequestReference']}",
        json={"documentStatus": "CONF"},
    )
    assert response.status_code == 422


async def test_unknown_booking(client):
    assert (await client.get("/v1/bookings/nope")).status_code == 404
    assert (
        await client.patch("/v1/bookings/nope", json={"documentStatus": "CANC"})
    ).status_code == 404


async def test_list_bookings(client):
    await _create(client)
    await _create(client)

    response = await client.get("/v1/bookings", params={"documentStatus": "RECE", "page_size": 1})

    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 2
    assert body["totalPages"] == 2
    assert len(body["items"]) == 1


async def test_unknown_shipment(client):
    response = await client.get("/v1/shipments/CBR-404")
    assert response.status_code == 404
    assert (await client.get("/v1/shipments")).json()["total"] == 0
