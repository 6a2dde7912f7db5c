"""Court and time slot models."""
from pydantic import BaseModel, ConfigDict
from typing import List, Union


class TimeSlot(BaseModel):
    """Catalog entry for a named time range shared by courts."""

    model_config = ConfigDict(extra="allow")

    id: str
    label: str


class Court(BaseModel):
    """Represents a bookable court."""

    model_config = ConfigDict(extra="allow")

    id: int
    nombre: str
    tipo: str
    tarifa: Union[int, float]
    activa: bool = True
    time_slots: List[str] = []  # Ordered slot ids offered by this court
