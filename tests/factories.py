"""Request payloads and seed rows shared by the test modules."""

import copy
from datetime import datetime, timezone

from booking_api.models.vessel import Vessel
from booking_api.schemas.booking import BookingRequest

ESSEN_IMO = "9632179"
ESSEN_NAME = "MAERSK ESSEN"
TWIN_NAME = "EVER GIVEN"

BASE_PAYLOAD = {
    "receiptDeliveryTypeAtOrigin": "CY",
    "deliveryTypeAtDestination": "CY",
    "cargoMovementTypeAtOrigin": "FCL",
    "cargoMovementTypeAtDestination": "FCL",
    "serviceContractReference": "SC-2026-001",
    "paymentTermCode": "PRE",
    "isPartialLoadAllowed": False,
    "isExportDeclarationRequired": True,
    "exportDeclarationReference": "EXP-123",
    "isImportLicenseRequired": True,
    "importLicenseReference": "IMP-456",
    "communicationChannel": "AO",
    "isEquipmentSubstitutionAllowed": False,
    "cargoGrossWeightUnit": "KGM",
    "expectedDepartureDate": "2026-11-02",
    "expectedArrivalDateStart": "2026-11-20",
    "expectedArrivalDateEnd": "2026-11-22",
    "exportVoyageNumber": "2611W",
    "vesselName": ESSEN_NAME,
    "vesselIMONumber": ESSEN_IMO,
    "invoicePayableAt": {
        "locationName": "Hamburg office",
        "UNLocationCode": "DEHAM",
        "address": {
            "name": "Finance",
            "street": "Grosse Elbstrasse",
            "streetNumber": "145",
            "postalCode": "22767",
            "city": "Hamburg",
            "country": "Germany",
        },
    },
    "placeOfIssue": None,
    "commodities": [
        {
            "commodityType": "Electronics",
            "HSCode": "851712",
            "cargoGrossWeight": 12000.0,
            "cargoGrossWeightUnit": "KGM",
        }
    ],
    "valueAddedServiceRequests": [{"valueAddedServiceCode": "CDECL"}],
    "references": [{"referenceType": "FF", "referenceValue": "FWD-778"}],
    "requestedEquipments": [
        {
            "requestedEquipmentSizetype": "22GP",
            "requestedEquipmentUnits": 2,
            "isShipperOwned": False,
            "equipmentReferences": ["APZU4812090"],
        }
    ],
    "documentParties": [
        {
            "party": {
                "partyName": "Shipper GmbH",
                "taxReference1": "DE123456789",
                "address": {
                    "street": "Kaiserkai",
                    "streetNumber": "1",
                    "city": "Hamburg",
                    "country": "Germany",
                },
                "partyContactDetails": [{"name": "Ann Weber", "email": "ann@shipper.example"}],
                "identifyingCodes": [
                    {"DCSAResponsibleAgencyCode": "SMDG", "partyCode": "SHP01"}
                ],
            },
            "partyFunction": "OS",
            "displayedAddress": ["Shipper GmbH", "Kaiserkai 1", "20457 Hamburg"],
            "isToBeNotified": True,
        }
    ],
    "shipmentLocations": [
        {
            "location": {"locationName": "Port of Hamburg", "UNLocationCode": "DEHAM"},
            "shipmentLocationTypeCode": "POL",
            "displayedName": "Hamburg",
            "eventDateTime": "2026-11-02T08:00:00+00:00",
        }
    ],
}


def booking_payload(**overrides) -> dict:
    payload = copy.deepcopy(BASE_PAYLOAD)
    payload.update(overrides)
    return payload


def booking_request(**overrides) -> BookingRequest:
    return BookingRequest.model_validate(booking_payload(**overrides))


def vessels() -> list:
    return [
        Vessel(vessel_imo_number=ESSEN_IMO, vessel_name=ESSEN_NAME, vessel_flag="DK"),
        Vessel(vessel_imo_number="9811000", vessel_name=TWIN_NAME, vessel_flag="PA"),
        Vessel(vessel_imo_number="9811001", vessel_name=TWIN_NAME, vessel_flag="PA"),
        Vessel(vessel_imo_number="9321483", vessel_name="EMMA MAERSK", vessel_flag="DK"),
    ]


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
