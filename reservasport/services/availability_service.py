"""Availability service for deriving slot status from the reservation ledger."""
import logging
from typing import Any, List, Set

from reservasport.core.exceptions import InvalidInput, NotFound
from reservasport.models.court import Court, TimeSlot
from reservasport.models.snapshot import Snapshot
from reservasport.schemas.availability import AvailabilitySlot, AvailabilityResponse
from reservasport.services.validation import is_blank, is_valid_date, parse_int_id

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Service for court listings and per-slot availability."""

    def list_courts(self, snapshot: Snapshot) -> List[Court]:
        """Return active courts in document order."""
        return [court for court in snapshot.courts if court.activa]

    def get_availability(
        self,
        snapshot: Snapshot,
        court_id: Any,
        date: Any,
    ) -> AvailabilityResponse:
        """
        Get booked/free status of every slot a court offers on a date.

        Args:
            snapshot: Current application state
            court_id: Court id as received from the client
            date: Date as YYYY-MM-DD

        Returns:
            The court, the date and its slots in the court's order

        Raises:
            InvalidInput: If court_id or date is missing or date is malformed
            NotFound: If the court does not exist or is inactive
        """
        if is_blank(court_id) or is_blank(date) or not is_valid_date(date):
            raise InvalidInput("Parámetros inválidos. Usa courtId y date=YYYY-MM-DD.")

        court = snapshot.find_active_court(parse_int_id(court_id))
        if not court:
            raise NotFound("Cancha no encontrada o inactiva.")

        taken = self._taken_slots(snapshot, court.id, date)
        catalog = snapshot.slot_catalog()

        slots = []
        for slot_id in court.time_slots:
            meta = catalog.get(slot_id)
            if meta is None:
                logger.debug(f"Slot {slot_id} of court {court.id} missing from catalog")
                meta = TimeSlot(id=slot_id, label=slot_id)
            slots.append(
                AvailabilitySlot(
                    id=meta.id,
                    label=meta.label,
                    disponible=slot_id not in taken,
                )
            )

        return AvailabilityResponse(court=court, date=date, slots=slots)

    def _taken_slots(self, snapshot: Snapshot, court_id: int, date: str) -> Set[str]:
        """Slot ids already reserved for a court on a date."""
        return {
            r.slot_id
            for r in snapshot.reservations
            if r.court_id == court_id and r.date == date
        }


# Singleton instance
availability_service = AvailabilityService()
