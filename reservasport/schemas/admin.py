"""Admin session schemas."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class LoginRequest(BaseModel):
    """Schema for admin login."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
