"""Domain errors raised by the services and rendered by the API layer."""


class ReservaSportError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ReservaSportError):
    """Missing or malformed client data."""

    status_code = 400


class Unauthorized(ReservaSportError):
    status_code = 401


class NotFound(ReservaSportError):
    """Referenced court or reservation does not exist."""

    status_code = 404


class Conflict(ReservaSportError):
    """The requested slot is already taken."""

    status_code = 409


class StoreError(ReservaSportError):
    """The data file could not be read, parsed or written."""

    status_code = 500
