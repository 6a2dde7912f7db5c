"""Reservation admission and admin reservation management."""
import logging
from datetime import datetime
from typing import Any, List, Optional

from reservasport.core.clock import today_iso, utc_now
from reservasport.core.exceptions import Conflict, InvalidInput, NotFound
from reservasport.models.reservation import Reservation
from reservasport.models.snapshot import Snapshot
from reservasport.services.validation import (
    is_blank,
    is_valid_date,
    is_valid_phone,
    parse_int_id,
)

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for creating, listing and cancelling reservations."""

    def create(
        self,
        snapshot: Snapshot,
        court_id: Any,
        date: Any,
        slot_id: Any,
        cliente_nombre: Any,
        cliente_telefono: Any,
        today: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Reservation:
        """
        Validate and commit a new reservation into the snapshot.

        Checks run in a fixed order and the first failure is reported:
        required fields, date format, past date, phone format, court,
        slot membership and finally slot uniqueness.

        Args:
            snapshot: Current application state, mutated on success
            court_id: Court id as received from the client
            date: Reservation date as YYYY-MM-DD
            slot_id: Slot id, one of the court's time_slots
            cliente_nombre: Client name
            cliente_telefono: Client phone, 6 to 15 digits
            today: Override for today's date (YYYY-MM-DD)
            now: Override for the creation timestamp

        Returns:
            The created reservation

        Raises:
            InvalidInput: If a field is missing or malformed
            NotFound: If the court does not exist or is inactive
            Conflict: If the slot is already reserved
        """
        if any(
            is_blank(value)
            for value in (court_id, date, slot_id, cliente_nombre, cliente_telefono)
        ):
            raise InvalidInput("Faltan campos obligatorios.")
        if not is_valid_date(date):
            raise InvalidInput("Fecha inválida. Usa YYYY-MM-DD.")
        if date < (today or today_iso()):
            raise InvalidInput("No se permiten reservas en fechas pasadas.")
        if not is_valid_phone(cliente_telefono):
            raise InvalidInput("Teléfono inválido. Usa solo números (6-15 dígitos).")

        court = snapshot.find_active_court(parse_int_id(court_id))
        if not court:
            raise NotFound("Cancha no encontrada.")
        if slot_id not in court.time_slots:
            raise InvalidInput("Franja horaria inválida para esta cancha.")
        if any(r.matches(court.id, date, slot_id) for r in snapshot.reservations):
            raise Conflict("La franja ya está reservada.")

        reservation = Reservation(
            id=snapshot.next_reservation_id,
            court_id=court.id,
            date=date,
            slot_id=slot_id,
            cliente_nombre=cliente_nombre,
            cliente_telefono=cliente_telefono,
            created_at=now or utc_now(),
        )
        snapshot.next_reservation_id += 1
        snapshot.reservations.append(reservation)

        logger.info(
            f"Created reservation {reservation.id} for court {court.id} "
            f"on {date} at {slot_id}"
        )
        return reservation

    def list_reservations(
        self, snapshot: Snapshot, date: Optional[str] = None
    ) -> List[Reservation]:
        """
        List reservations in ledger order.

        Args:
            snapshot: Current application state
            date: Optional exact date filter (YYYY-MM-DD)

        Raises:
            InvalidInput: If date is given but malformed
        """
        if is_blank(date):
            return list(snapshot.reservations)
        if not is_valid_date(date):
            raise InvalidInput("Fecha inválida.")
        return [r for r in snapshot.reservations if r.date == date]

    def cancel(self, snapshot: Snapshot, reservation_id: Any) -> Reservation:
        """
        Remove a reservation by id.

        The id counter is not rewound, so ids are never reused.

        Raises:
            NotFound: If no reservation has this id
        """
        reservation_id = parse_int_id(reservation_id)
        for index, reservation in enumerate(snapshot.reservations):
            if reservation.id == reservation_id:
                removed = snapshot.reservations.pop(index)
                logger.info(
                    f"Cancelled reservation {removed.id} for court {removed.court_id} "
                    f"on {removed.date} at {removed.slot_id}"
                )
                return removed
        raise NotFound("Reserva no encontrada.")


# Singleton instance
reservation_service = ReservationService()
