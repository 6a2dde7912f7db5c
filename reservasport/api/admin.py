"""Admin endpoints: login and reservation management."""
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Header, Query

from reservasport.core.exceptions import Unauthorized
from reservasport.core.store import JsonStore, get_store
from reservasport.models.reservation import Reservation
from reservasport.schemas.admin import LoginRequest, LoginResponse, MessageResponse
from reservasport.schemas.reservation import ReservationCancelled
from reservasport.services.admin_session import admin_session
from reservasport.services.reservation_service import reservation_service

router = APIRouter(prefix="/api/admin", tags=["admin"])

BEARER_PREFIX = "Bearer "


async def require_admin(
    authorization: Optional[str] = Header(default=None),
    store: JsonStore = Depends(get_store),
) -> str:
    """
    Dependency that checks the admin bearer token.

    Runs inside a store transaction because an expired token is deleted
    as part of the check.

    Returns:
        The validated token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthorized("No autorizado.")
    token = authorization[len(BEARER_PREFIX):]

    failure = None
    async with store.transaction() as snapshot:
        try:
            admin_session.validate(snapshot, token)
        except Unauthorized as e:
            failure = e

    if failure is not None:
        raise failure
    return token


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: Optional[LoginRequest] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    """
    Exchange the admin password for a bearer token.

    Args:
        credentials: Object containing the password
        store: Application store

    Returns:
        A token valid for the configured TTL
    """
    credentials = credentials or LoginRequest()

    async with store.transaction() as snapshot:
        token = admin_session.login(snapshot, credentials.password)

    return LoginResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str = Depends(require_admin),
    store: JsonStore = Depends(get_store),
):
    """Revoke the token used for this request."""
    async with store.transaction() as snapshot:
        admin_session.logout(snapshot, token)

    return MessageResponse(message="Sesión cerrada.")


@router.get("/reservations", response_model=List[Reservation])
async def list_reservations(
    date: Optional[str] = Query(default=None, description="Filter by date (YYYY-MM-DD)"),
    _token: str = Depends(require_admin),
    store: JsonStore = Depends(get_store),
):
    """
    List reservations for the admin panel.

    Args:
        date: Optional date filter
        store: Application store

    Returns:
        Reservations in the order they were made
    """
    snapshot = await store.read()
    return reservation_service.list_reservations(snapshot, date)


@router.delete("/reservations/{reservation_id}", response_model=ReservationCancelled)
async def cancel_reservation(
    reservation_id: str,
    _token: str = Depends(require_admin),
    store: JsonStore = Depends(get_store),
):
    """
    Cancel a reservation, freeing its slot.

    Args:
        reservation_id: Reservation ID
        store: Application store

    Returns:
        Confirmation message and the removed reservation
    """
    async with store.transaction() as snapshot:
        removed = reservation_service.cancel(snapshot, reservation_id)

    return ReservationCancelled(message="Reserva cancelada.", removed=removed)
