"""
Shipment view: a confirmed booking as the carrier sees it.

Shipments are written by the confirmation process, never through this
package; this module only reads them.
"""

import logging
from typing import List, Optional

from booking_api.core.concurrency import gather_or_fail
from booking_api.core.exceptions import NotFoundError
from booking_api.models.enums import EventClassifier, TransportEventType
from booking_api.models.shipment import ShipmentTransport
from booking_api.schemas.booking import BookingAggregate
from booking_api.schemas.shipment import (
    CarrierClauseSchema,
    ChargeSchema,
    ConfirmedEquipmentSchema,
    ShipmentAggregate,
    ShipmentCutOffTimeSchema,
    TransportSchema,
)
from booking_api.services import mappers
from booking_api.services.components import BookingComponents

logger = logging.getLogger(__name__)


class ShipmentAssembler:
    def __init__(self, components: BookingComponents) -> None:
        self.components = components
        self.uow = components.uow

    async def assemble(self, carrier_booking_reference: str) -> ShipmentAggregate:
        shipment = await self.uow.shipments.find_by_carrier_booking_reference(
            carrier_booking_reference
        )
        if shipment is None:
            raise NotFoundError(
                f"No Shipment found with carrierBookingReference {carrier_booking_reference}"
            )

        (
            cut_off_times,
            shipment_locations,
            carrier_clauses,
            confirmed_equipments,
            charges,
            booking,
            transports,
        ) = await gather_or_fail(
            self._cut_off_times(shipment.id),
            self.components.shipment_locations.fetch(shipment.booking_id),
            self._carrier_clauses(shipment.id),
            self._confirmed_equipments(shipment.booking_id),
            self._charges(shipment.id),
            self._booking(shipment.booking_id),
            self._transports(shipment.id),
        )

        return ShipmentAggregate(
            carrier_booking_reference=shipment.carrier_booking_reference,
            terms_and_conditions=shipment.terms_and_conditions,
            shipment_created_date_time=mappers.to_utc(shipment.confirmation_datetime),
            shipment_updated_date_time=mappers.to_utc(shipment.updated_datetime),
            booking=booking,
            shipment_cut_off_times=cut_off_times,
            shipment_locations=shipment_locations,
            carrier_clauses=carrier_clauses,
            confirmed_equipments=confirmed_equipments,
            charges=charges,
            transports=transports,
        )

    async def _cut_off_times(self, shipment_id: str) -> List[ShipmentCutOffTimeSchema]:
        rows = await self.uow.shipment_cut_off_times.find_by_parent_id(shipment_id)
        return [
            ShipmentCutOffTimeSchema(
                cut_off_date_time_code=row.cut_off_time_code,
                cut_off_date_time=mappers.to_utc(row.cut_off_datetime),
            )
            for row in rows
        ]

    async def _carrier_clauses(self, shipment_id: str) -> List[CarrierClauseSchema]:
        rows = await self.uow.carrier_clauses.find_by_shipment_id(shipment_id)
        return [CarrierClauseSchema(clause_content=row.clause_content) for row in rows]

    async def _confirmed_equipments(self, booking_id: str) -> List[ConfirmedEquipmentSchema]:
        # Confirmed equipment mirrors what the booking requested
        rows = await self.uow.requested_equipments.find_by_parent_id(booking_id)
        return [
            ConfirmedEquipmentSchema(
                confirmed_equipment_sizetype=row.requested_equipment_sizetype,
                confirmed_equipment_units=row.requested_equipment_units,
            )
            for row in rows
        ]

    async def _charges(self, shipment_id: str) -> List[ChargeSchema]:
        rows = await self.uow.charges.find_by_parent_id(shipment_id)
        return [
            ChargeSchema(
                charge_type=row.charge_type,
                currency_amount=row.currency_amount,
                currency_code=row.currency_code,
                payment_term_code=row.payment_term_code,
                calculation_basis=row.calculation_basis,
                unit_price=row.unit_price,
                quantity=row.quantity,
            )
            for row in rows
        ]

    async def _booking(self, booking_id: str) -> Optional[BookingAggregate]:
        booking = await self.uow.bookings.find_by_id(booking_id)
        if booking is None:
            logger.warning("Shipment references missing booking %s", booking_id)
            return None
        return await self.components.assembler.assemble(booking)

    async def _transports(self, shipment_id: str) -> List[TransportSchema]:
        links = await self.uow.shipment_transports.find_by_parent_id(shipment_id)
        return await gather_or_fail(*(self._transport(link) for link in links))

    async def _transport(self, link: ShipmentTransport) -> TransportSchema:
        transport = await self.uow.transports.find_by_id(link.transport_id)
        if transport is None:
            raise NotFoundError(f"Transport {link.transport_id} not found")

        load_call, discharge_call, departure, arrival = await gather_or_fail(
            self.uow.transport_calls.find_by_id(transport.load_transport_call_id),
            self.uow.transport_calls.find_by_id(transport.discharge_transport_call_id),
            self.uow.transport_events.find_latest(
                transport.load_transport_call_id,
                TransportEventType.DEPARTURE.value,
                EventClassifier.PLANNED.value,
            ),
            self.uow.transport_events.find_latest(
                transport.discharge_transport_call_id,
                TransportEventType.ARRIVAL.value,
                EventClassifier.PLANNED.value,
            ),
        )

        locations = self.components.location_service
        load_location, discharge_location, vessel = await gather_or_fail(
            locations.fetch_by_id(load_call.location_id if load_call else None),
            locations.fetch_by_id(discharge_call.location_id if discharge_call else None),
            self.uow.vessels.find_by_id(load_call.vessel_id if load_call else None),
        )

        return TransportSchema(
            transport_plan_stage=link.transport_plan_stage_code,
            transport_plan_stage_sequence_number=link.transport_plan_stage_sequence_number,
            load_location=load_location,
            discharge_location=discharge_location,
            planned_departure_date=mappers.to_utc(departure.event_datetime) if departure else None,
            planned_arrival_date=mappers.to_utc(arrival.event_datetime) if arrival else None,
            mode_of_transport=load_call.mode_of_transport if load_call else None,
            vessel_name=vessel.vessel_name if vessel else None,
            vessel_imo_number=vessel.vessel_imo_number if vessel else None,
            carrier_voyage_number=load_call.export_voyage_number if load_call else None,
            transport_reference=transport.transport_reference,
            transport_name=transport.transport_name,
            is_under_shippers_responsibility=link.is_under_shippers_responsibility,
        )
