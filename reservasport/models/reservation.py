"""Reservation model."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Reservation(BaseModel):
    """Binds one client to one (court, date, slot) triple."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int
    court_id: int = Field(alias="courtId")
    date: str  # YYYY-MM-DD
    slot_id: str = Field(alias="slotId")
    cliente_nombre: str = Field(alias="clienteNombre")
    cliente_telefono: str = Field(alias="clienteTelefono")
    created_at: datetime = Field(alias="createdAt")

    def matches(self, court_id: int, date: str, slot_id: str) -> bool:
        return (
            self.court_id == court_id
            and self.date == date
            and self.slot_id == slot_id
        )
