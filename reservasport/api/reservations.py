"""Public reservation endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query

from reservasport.core.store import JsonStore, get_store
from reservasport.models.reservation import Reservation
from reservasport.schemas.reservation import ReservationCreate, ReservationCreated
from reservasport.services.reservation_service import reservation_service

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


@router.post("", response_model=ReservationCreated, status_code=201)
async def create_reservation(
    payload: Optional[ReservationCreate] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    """
    Reserve a slot of a court on a date.

    The check for an existing reservation and the write of the new one
    happen inside a single store transaction.

    Args:
        payload: courtId, date, slotId, clienteNombre and clienteTelefono
        store: Application store

    Returns:
        Confirmation message and the created reservation
    """
    payload = payload or ReservationCreate()

    async with store.transaction() as snapshot:
        reservation = reservation_service.create(
            snapshot,
            court_id=payload.court_id,
            date=payload.date,
            slot_id=payload.slot_id,
            cliente_nombre=payload.cliente_nombre,
            cliente_telefono=payload.cliente_telefono,
        )

    return ReservationCreated(message="Reserva creada con éxito.", reservation=reservation)


@router.get("", response_model=List[Reservation])
async def list_reservations(
    date: Optional[str] = Query(default=None, description="Filter by date (YYYY-MM-DD)"),
    store: JsonStore = Depends(get_store),
):
    """
    List reservations, optionally for a single date.

    Args:
        date: Optional date filter
        store: Application store

    Returns:
        Reservations in the order they were made
    """
    snapshot = await store.read()
    return reservation_service.list_reservations(snapshot, date)
