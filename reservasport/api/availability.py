"""Court and availability endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from reservasport.core.store import JsonStore, get_store
from reservasport.models.court import Court
from reservasport.schemas.availability import AvailabilityResponse
from reservasport.services.availability_service import availability_service

router = APIRouter(prefix="/api", tags=["availability"])


@router.get("/courts", response_model=List[Court])
async def list_courts(store: JsonStore = Depends(get_store)):
    """
    List active courts.

    Inactive courts are never shown to clients.
    """
    snapshot = await store.read()
    return availability_service.list_courts(snapshot)


@router.get("/availability", response_model=AvailabilityResponse)
async def get_availability(
    court_id: Optional[str] = Query(default=None, alias="courtId"),
    date: Optional[str] = Query(default=None, description="Date as YYYY-MM-DD"),
    store: JsonStore = Depends(get_store),
):
    """
    Get slot availability for a court on a date.

    Args:
        court_id: Court ID
        date: Date as YYYY-MM-DD
        store: Application store

    Returns:
        The court and its slots, each flagged as available or taken
    """
    snapshot = await store.read()
    return availability_service.get_availability(snapshot, court_id, date)
