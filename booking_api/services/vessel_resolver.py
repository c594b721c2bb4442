import logging
from typing import Optional

from booking_api.core.exceptions import AmbiguousReferenceError, ConflictError, NotFoundError
from booking_api.models.vessel import Vessel
from booking_api.repositories import BookingRepository, VesselRepository

logger = logging.getLogger(__name__)


class VesselResolver:
    """Maps the vessel name and/or IMO number on a request to a vessel row.

    The IMO number is authoritative. A name on its own only resolves when it
    matches exactly one vessel.
    """

    def __init__(self, vessels: VesselRepository, bookings: BookingRepository) -> None:
        self.vessels = vessels
        self.bookings = bookings

    async def resolve(
        self,
        booking_id: str,
        vessel_name: Optional[str],
        vessel_imo_number: Optional[str],
    ) -> Optional[Vessel]:
        """Resolve a vessel and link it to the booking; None when neither key is given."""
        if vessel_imo_number:
            vessel = await self._by_imo_number(vessel_imo_number, vessel_name)
        elif vessel_name:
            vessel = await self._by_name(vessel_name)
        else:
            return None

        await self.bookings.set_vessel_id(booking_id, vessel.id)
        logger.debug("Booking %s linked to vessel %s", booking_id, vessel.vessel_imo_number)
        return vessel

    async def _by_imo_number(self, imo_number: str, vessel_name: Optional[str]) -> Vessel:
        vessel = await self.vessels.find_by_imo_number(imo_number)
        if vessel is None:
            raise NotFoundError(f"No vessel found with vesselIMONumber {imo_number}.")
        if vessel_name and vessel_name != vessel.vessel_name:
            raise ConflictError(
                "Provided vessel name does not match vessel name of existing vesselIMONumber."
            )
        return vessel

    async def _by_name(self, vessel_name: str) -> Vessel:
        candidates = await self.vessels.find_by_name(vessel_name)
        if not candidates:
            raise NotFoundError(f"No vessel found with vesselName {vessel_name}.")
        if len(candidates) > 1:
            raise AmbiguousReferenceError(
                "Unable to identify unique vessel, please provide a vesselIMONumber."
            )
        return candidates[0]
