"""API schemas."""
from reservasport.schemas.availability import (
    AvailabilitySlot,
    AvailabilityResponse,
)
from reservasport.schemas.reservation import (
    ReservationCreate,
    ReservationCreated,
    ReservationCancelled,
)
from reservasport.schemas.admin import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
)

__all__ = [
    "AvailabilitySlot",
    "AvailabilityResponse",
    "ReservationCreate",
    "ReservationCreated",
    "ReservationCancelled",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
]
