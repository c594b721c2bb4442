from datetime import date

from booking_api.core.exceptions import ValidationError
from booking_api.services.validation import validate_booking_request
from tests.factories import booking_request


def test_valid_request_has_no_error():
    assert validate_booking_request(booking_request()) is None


def test_import_license_reference_required():
    error = validate_booking_request(booking_request(importLicenseReference=None))

    assert isinstance(error, ValidationError)
    assert [issue.field for issue in error.issues] == ["importLicenseReference"]


def test_import_license_reference_optional_when_not_required():
    request = booking_request(isImportLicenseRequired=False, importLicenseReference=None)
    assert validate_booking_request(request) is None


def test_export_declaration_reference_required():
    error = validate_booking_request(booking_request(exportDeclarationReference=None))
    assert [issue.field for issue in error.issues] == ["exportDeclarationReference"]


def test_schedule_or_vessel_must_be_given():
    request = booking_request(
        expectedArrivalDateStart=None,
        expectedArrivalDateEnd=None,
        expectedDepartureDate=None,
        vesselIMONumber=None,
        exportVoyageNumber=None,
    )
    error = validate_booking_request(request)
    assert [issue.field for issue in error.issues] == ["expectedDepartureDate"]


def test_arrival_window_must_not_be_reversed():
    request = booking_request(
        expectedArrivalDateStart="2026-11-25", expectedArrivalDateEnd="2026-11-20"
    )
    error = validate_booking_request(request)
    assert [issue.field for issue in error.issues] == ["expectedArrivalDateEnd"]


def test_single_day_arrival_window_is_fine():
    request = booking_request(
        expectedArrivalDateStart="2026-11-20", expectedArrivalDateEnd="2026-11-20"
    )
    assert request.expected_arrival_date_start == date(2026, 11, 20)
    assert validate_booking_request(request) is None


def test_more_equipment_references_than_units():
    request = booking_request(
        requestedEquipments=[
            {
                "requestedEquipmentSizetype": "45GP",
                "requestedEquipmentUnits": 1,
                "equipmentReferences": ["APZU4812090", "MSKU1234565"],
            }
        ]
    )
    error = validate_booking_request(request)
    assert error.issues[0].field == "requestedEquipments[0].equipmentReferences"
    assert "Requested Equipment Units" in error.message


def test_every_broken_rule_is_reported():
    request = booking_request(importLicenseReference=None, exportDeclarationReference=None)
    error = validate_booking_request(request)
    assert {issue.field for issue in error.issues} == {
        "importLicenseReference",
        "exportDeclarationReference",
    }
