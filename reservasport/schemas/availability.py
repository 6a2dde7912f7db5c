"""Availability schemas."""
from pydantic import BaseModel
from typing import List

from reservasport.models.court import Court


class AvailabilitySlot(BaseModel):
    """Schema for a single slot of a court on a date."""

    id: str
    label: str
    disponible: bool


class AvailabilityResponse(BaseModel):
    """Schema for availability response."""

    court: Court
    date: str
    slots: List[AvailabilitySlot]
