"""Initial booking, shipment and reference tables

Revision ID: 20261018_000001
Revises:
Create Date: 2026-10-18 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261018_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Reference data
    op.create_table(
        "vessel",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("vessel_imo_number", sa.String(7), nullable=True, unique=True),
        sa.Column("vessel_name", sa.String(35), nullable=True),
        sa.Column("vessel_flag", sa.String(2), nullable=True),
        sa.Column("vessel_call_sign_number", sa.String(10), nullable=True),
        sa.Column("vessel_operator_carrier_code", sa.String(10), nullable=True),
    )
    op.create_index("ix_vessel_vessel_imo_number", "vessel", ["vessel_imo_number"])
    op.create_index("ix_vessel_vessel_name", "vessel", ["vessel_name"])

    op.create_table(
        "address",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("street", sa.String(100), nullable=True),
        sa.Column("street_number", sa.String(50), nullable=True),
        sa.Column("floor", sa.String(50), nullable=True),
        sa.Column("postal_code", sa.String(10), nullable=True),
        sa.Column("city", sa.String(65), nullable=True),
        sa.Column("state_region", sa.String(65), nullable=True),
        sa.Column("country", sa.String(75), nullable=True),
    )

    op.create_table(
        "location",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("location_name", sa.String(100), nullable=True),
        sa.Column("latitude", sa.String(10), nullable=True),
        sa.Column("longitude", sa.String(11), nullable=True),
        sa.Column("un_location_code", sa.String(5), nullable=True),
        sa.Column("address_id", sa.String(), sa.ForeignKey("address.id"), nullable=True),
    )

    op.create_table(
        "party",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("party_name", sa.String(100), nullable=True),
        sa.Column("tax_reference_1", sa.String(20), nullable=True),
        sa.Column("tax_reference_2", sa.String(20), nullable=True),
        sa.Column("public_key", sa.String(500), nullable=True),
        sa.Column("address_id", sa.String(), sa.ForeignKey("address.id"), nullable=True),
    )

    op.create_table(
        "party_contact_details",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("party_id", sa.String(), sa.ForeignKey("party.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
    )
    op.create_index("ix_party_contact_details_party_id", "party_contact_details", ["party_id"])

    op.create_table(
        "party_identifying_code",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("party_id", sa.String(), sa.ForeignKey("party.id"), nullable=False),
        sa.Column("dcsa_responsible_agency_code", sa.String(5), nullable=False),
        sa.Column("party_code", sa.String(100), nullable=False),
        sa.Column("code_list_name", sa.String(100), nullable=True),
    )
    op.create_index("ix_party_identifying_code_party_id", "party_identifying_code", ["party_id"])

    # Booking aggregate
    op.create_table(
        "booking",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("carrier_booking_request_reference", sa.String(100), nullable=False, unique=True),
        sa.Column("document_status", sa.String(4), nullable=False),
        sa.Column("receipt_delivery_type_at_origin", sa.String(3), nullable=False),
        sa.Column("delivery_type_at_destination", sa.String(3), nullable=False),
        sa.Column("cargo_movement_type_at_origin", sa.String(3), nullable=False),
        sa.Column("cargo_movement_type_at_destination", sa.String(3), nullable=False),
        sa.Column("service_contract_reference", sa.String(30), nullable=False),
        sa.Column("payment_term_code", sa.String(3), nullable=True),
        sa.Column("is_partial_load_allowed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_export_declaration_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("export_declaration_reference", sa.String(35), nullable=True),
        sa.Column("is_import_license_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("import_license_reference", sa.String(35), nullable=True),
        sa.Column("contract_quotation_reference", sa.String(35), nullable=True),
        sa.Column("transport_document_type_code", sa.String(3), nullable=True),
        sa.Column("transport_document_reference", sa.String(20), nullable=True),
        sa.Column("booking_channel_reference", sa.String(20), nullable=True),
        sa.Column("inco_terms", sa.String(3), nullable=True),
        sa.Column("communication_channel", sa.String(2), nullable=False),
        sa.Column("is_equipment_substitution_allowed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("cargo_gross_weight_unit", sa.String(3), nullable=True),
        sa.Column("expected_departure_date", sa.Date(), nullable=True),
        sa.Column("expected_arrival_date_start", sa.Date(), nullable=True),
        sa.Column("expected_arrival_date_end", sa.Date(), nullable=True),
        sa.Column("export_voyage_number", sa.String(50), nullable=True),
        sa.Column("vessel_id", sa.String(), sa.ForeignKey("vessel.id"), nullable=True),
        sa.Column("invoice_payable_at_id", sa.String(), sa.ForeignKey("location.id"), nullable=True),
        sa.Column("place_of_issue_id", sa.String(), sa.ForeignKey("location.id"), nullable=True),
        sa.Column("booking_request_datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_datetime", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_booking_carrier_booking_request_reference", "booking", ["carrier_booking_request_reference"]
    )
    op.create_index("ix_booking_document_status", "booking", ["document_status"])

    op.create_table(
        "commodity",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("commodity_type", sa.String(20), nullable=False),
        sa.Column("hs_code", sa.String(10), nullable=False),
        sa.Column("cargo_gross_weight", sa.Float(), nullable=False),
        sa.Column("cargo_gross_weight_unit", sa.String(3), nullable=False),
        sa.Column("export_license_issue_date", sa.Date(), nullable=True),
        sa.Column("export_license_expiry_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_commodity_booking_id", "commodity", ["booking_id"])

    op.create_table(
        "value_added_service_request",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("value_added_service_code", sa.String(5), nullable=False),
    )
    op.create_index(
        "ix_value_added_service_request_booking_id", "value_added_service_request", ["booking_id"]
    )

    op.create_table(
        "reference",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("reference_type", sa.String(3), nullable=False),
        sa.Column("reference_value", sa.Text(), nullable=False),
    )
    op.create_index("ix_reference_booking_id", "reference", ["booking_id"])

    op.create_table(
        "requested_equipment",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("requested_equipment_sizetype", sa.String(4), nullable=False),
        sa.Column("requested_equipment_units", sa.Integer(), nullable=False),
        sa.Column("is_shipper_owned", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_requested_equipment_booking_id", "requested_equipment", ["booking_id"])

    op.create_table(
        "requested_equipment_equipment",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "requested_equipment_id", sa.String(), sa.ForeignKey("requested_equipment.id"), nullable=False
        ),
        sa.Column("equipment_reference", sa.String(15), nullable=False),
    )
    op.create_index(
        "ix_requested_equipment_equipment_requested_equipment_id",
        "requested_equipment_equipment",
        ["requested_equipment_id"],
    )

    op.create_table(
        "document_party",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("party_id", sa.String(), sa.ForeignKey("party.id"), nullable=False),
        sa.Column("party_function", sa.String(3), nullable=False),
        sa.Column("is_to_be_notified", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_document_party_booking_id", "document_party", ["booking_id"])

    op.create_table(
        "displayed_address",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("document_party_id", sa.String(), sa.ForeignKey("document_party.id"), nullable=False),
        sa.Column("address_line_number", sa.Integer(), nullable=False),
        sa.Column("address_line", sa.String(250), nullable=False),
    )
    op.create_index("ix_displayed_address_document_party_id", "displayed_address", ["document_party_id"])

    op.create_table(
        "shipment_location",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("location_id", sa.String(), sa.ForeignKey("location.id"), nullable=False),
        sa.Column("shipment_location_type_code", sa.String(3), nullable=False),
        sa.Column("displayed_name", sa.String(250), nullable=True),
        sa.Column("event_date_time", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_shipment_location_booking_id", "shipment_location", ["booking_id"])

    # Shipments, written by the confirmation process
    op.create_table(
        "shipment",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("booking_id", sa.String(), sa.ForeignKey("booking.id"), nullable=False),
        sa.Column("carrier_id", sa.String(), nullable=True),
        sa.Column("carrier_booking_reference", sa.String(35), nullable=False, unique=True),
        sa.Column("terms_and_conditions", sa.Text(), nullable=True),
        sa.Column("confirmation_datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_datetime", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_shipment_booking_id", "shipment", ["booking_id"])
    op.create_index("ix_shipment_carrier_booking_reference", "shipment", ["carrier_booking_reference"])

    op.create_table(
        "shipment_cutoff_time",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("shipment_id", sa.String(), sa.ForeignKey("shipment.id"), nullable=False),
        sa.Column("cut_off_time_code", sa.String(3), nullable=False),
        sa.Column("cut_off_datetime", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_shipment_cutoff_time_shipment_id", "shipment_cutoff_time", ["shipment_id"])

    op.create_table(
        "carrier_clauses",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("clause_content", sa.Text(), nullable=False),
    )

    op.create_table(
        "shipment_carrier_clauses",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("shipment_id", sa.String(), sa.ForeignKey("shipment.id"), nullable=False),
        sa.Column("carrier_clause_id", sa.String(), sa.ForeignKey("carrier_clauses.id"), nullable=False),
    )
    op.create_index("ix_shipment_carrier_clauses_shipment_id", "shipment_carrier_clauses", ["shipment_id"])

    op.create_table(
        "charge",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("shipment_id", sa.String(), sa.ForeignKey("shipment.id"), nullable=False),
        sa.Column("charge_type", sa.String(20), nullable=False),
        sa.Column("currency_amount", sa.Float(), nullable=False),
        sa.Column("currency_code", sa.String(3), nullable=False),
        sa.Column("payment_term_code", sa.String(3), nullable=False),
        sa.Column("calculation_basis", sa.String(50), nullable=False),
        sa.Column("unit_price", sa.Float(), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=False),
    )
    op.create_index("ix_charge_shipment_id", "charge", ["shipment_id"])

    op.create_table(
        "transport_call",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("location_id", sa.String(), sa.ForeignKey("location.id"), nullable=True),
        sa.Column("vessel_id", sa.String(), sa.ForeignKey("vessel.id"), nullable=True),
        sa.Column("mode_of_transport", sa.String(50), nullable=True),
        sa.Column("export_voyage_number", sa.String(50), nullable=True),
        sa.Column("import_voyage_number", sa.String(50), nullable=True),
    )

    op.create_table(
        "transport_event",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("transport_call_id", sa.String(), sa.ForeignKey("transport_call.id"), nullable=False),
        sa.Column("event_type_code", sa.String(4), nullable=False),
        sa.Column("event_classifier_code", sa.String(3), nullable=False),
        sa.Column("event_datetime", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_transport_event_transport_call_id", "transport_event", ["transport_call_id"])

    op.create_table(
        "transport",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("transport_reference", sa.String(50), nullable=True),
        sa.Column("transport_name", sa.String(100), nullable=True),
        sa.Column("load_transport_call_id", sa.String(), sa.ForeignKey("transport_call.id"), nullable=False),
        sa.Column(
            "discharge_transport_call_id", sa.String(), sa.ForeignKey("transport_call.id"), nullable=False
        ),
    )

    op.create_table(
        "shipment_transport",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("shipment_id", sa.String(), sa.ForeignKey("shipment.id"), nullable=False),
        sa.Column("transport_id", sa.String(), sa.ForeignKey("transport.id"), nullable=False),
        sa.Column("transport_plan_stage_sequence_number", sa.Integer(), nullable=False),
        sa.Column("transport_plan_stage_code", sa.String(3), nullable=False),
        sa.Column("is_under_shippers_responsibility", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_shipment_transport_shipment_id", "shipment_transport", ["shipment_id"])

    # Lifecycle event log
    op.create_table(
        "shipment_event",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("shipment_event_type_code", sa.String(4), nullable=False),
        sa.Column("event_classifier_code", sa.String(3), nullable=False),
        sa.Column("document_type_code", sa.String(3), nullable=False),
        sa.Column("document_id", sa.String(100), nullable=False),
        sa.Column("event_datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("event_created_datetime", sa.DateTime(timezone=True), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
    )
    op.create_index("ix_shipment_event_shipment_event_type_code", "shipment_event", ["shipment_event_type_code"])
    op.create_index("ix_shipment_event_document_type_code", "shipment_event", ["document_type_code"])
    op.create_index("ix_shipment_event_document_id", "shipment_event", ["document_id"])


def downgrade() -> None:
    for table in (
        "shipment_event",
        "shipment_transport",
        "transport",
        "transport_event",
        "transport_call",
        "charge",
        "shipment_carrier_clauses",
        "carrier_clauses",
        "shipment_cutoff_time",
        "shipment",
        "shipment_location",
        "displayed_address",
        "document_party",
        "requested_equipment_equipment",
        "requested_equipment",
        "reference",
        "value_added_service_request",
        "commodity",
        "booking",
        "party_identifying_code",
        "party_contact_details",
        "party",
        "location",
        "address",
        "vessel",
    ):
        op.drop_table(table)
