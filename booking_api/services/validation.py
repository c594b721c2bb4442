"""Business-conditional checks run on a booking request before any write."""

from typing import List, Optional

from booking_api.core.exceptions import ValidationError, ValidationIssue
from booking_api.schemas.booking import BookingRequest, RequestedEquipmentSchema


def check_requested_equipment(
    requested_equipments: Optional[List[RequestedEquipmentSchema]],
) -> List[ValidationIssue]:
    issues = []
    for index, equipment in enumerate(requested_equipments or []):
        if len(equipment.equipment_references) > equipment.requested_equipment_units:
            issues.append(
                ValidationIssue(
                    field=f"requestedEquipments[{index}].equipmentReferences",
                    message="Requested Equipment Units cannot be lower than quantity of Equipment References.",
                )
            )
    return issues


def validate_booking_request(request: BookingRequest) -> Optional[ValidationError]:
    """Return a ValidationError listing every broken rule, or None."""
    issues: List[ValidationIssue] = []

    if request.is_import_license_required and request.import_license_reference is None:
        issues.append(
            ValidationIssue(
                field="importLicenseReference",
                message="The attribute importLicenseReference cannot be null if isImportLicenseRequired is true.",
            )
        )

    if request.is_export_declaration_required and request.export_declaration_reference is None:
        issues.append(
            ValidationIssue(
                field="exportDeclarationReference",
                message="The attribute exportDeclarationReference cannot be null if isExportDeclarationRequired is true.",
            )
        )

    if (
        request.expected_arrival_date_start is None
        and request.expected_arrival_date_end is None
        and request.expected_departure_date is None
        and request.vessel_imo_number is None
        and request.export_voyage_number is None
    ):
        issues.append(
            ValidationIssue(
                field="expectedDepartureDate",
                message=(
                    "The attributes expectedArrivalDateStart, expectedArrivalDateEnd, "
                    "expectedDepartureDate and vesselIMONumber/exportVoyageNumber cannot all be "
                    "null at the same time. At least one of them must be provided."
                ),
            )
        )

    if (
        request.expected_arrival_date_start is not None
        and request.expected_arrival_date_end is not None
        and request.expected_arrival_date_start > request.expected_arrival_date_end
    ):
        issues.append(
            ValidationIssue(
                field="expectedArrivalDateEnd",
                message="The attribute expectedArrivalDateEnd must be the same or after expectedArrivalDateStart.",
            )
        )

    issues.extend(check_requested_equipment(request.requested_equipments))

    if issues:
        return ValidationError(issues)
    return None
