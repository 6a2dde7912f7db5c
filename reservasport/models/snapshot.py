"""Snapshot model: the whole persisted application state."""
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from reservasport.models.court import Court, TimeSlot
from reservasport.models.reservation import Reservation


class AdminToken(BaseModel):
    """Issue record of an admin bearer token."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    created_at: datetime = Field(alias="createdAt")


class Snapshot(BaseModel):
    """
    Entire application state, read and written as a single document.

    Services receive a snapshot, mutate it in place and leave persisting
    it to the store.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    courts: List[Court] = []
    time_slots: List[TimeSlot] = []
    reservations: List[Reservation] = []
    next_reservation_id: int = Field(default=1, alias="nextReservationId")
    admin_tokens: Dict[str, AdminToken] = Field(default_factory=dict, alias="adminTokens")

    def find_active_court(self, court_id: Optional[int]) -> Optional[Court]:
        """Return the active court with the given id, if any."""
        if court_id is None:
            return None
        for court in self.courts:
            if court.id == court_id and court.activa:
                return court
        return None

    def slot_catalog(self) -> Dict[str, TimeSlot]:
        return {slot.id: slot for slot in self.time_slots}
