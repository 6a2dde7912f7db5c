"""Reservation schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

from reservasport.models.reservation import Reservation


class ReservationCreate(BaseModel):
    """
    Schema for creating a reservation.

    Every field is optional here: presence and format are checked by the
    reservation service so that errors come back in a fixed order.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    court_id: Optional[Union[int, float, str]] = Field(default=None, alias="courtId")
    date: Optional[str] = None
    slot_id: Optional[str] = Field(default=None, alias="slotId")
    cliente_nombre: Optional[str] = Field(default=None, alias="clienteNombre")
    cliente_telefono: Optional[str] = Field(default=None, alias="clienteTelefono")


class ReservationCreated(BaseModel):
    """Schema for a successful reservation."""

    message: str
    reservation: Reservation


class ReservationCancelled(BaseModel):
    """Schema for a cancelled reservation."""

    message: str
    removed: Reservation
