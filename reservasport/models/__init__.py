"""Persisted state models."""
from reservasport.models.court import Court, TimeSlot
from reservasport.models.reservation import Reservation
from reservasport.models.snapshot import AdminToken, Snapshot

__all__ = ["Court", "TimeSlot", "Reservation", "AdminToken", "Snapshot"]
