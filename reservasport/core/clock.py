"""Current time helpers."""
from datetime import date, datetime
from typing import Optional
import pytz

from reservasport.core.config import settings


def utc_now() -> datetime:
    return datetime.now(pytz.UTC)


def today_iso(timezone: Optional[str] = None) -> str:
    """
    Return today's date as YYYY-MM-DD.

    Uses the given timezone, falling back to settings.TIMEZONE and then to
    the server's local time.
    """
    timezone = timezone or settings.TIMEZONE
    if timezone:
        return datetime.now(pytz.timezone(timezone)).date().isoformat()
    return date.today().isoformat()


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Render a UTC moment as 2030-01-01T12:00:00.000Z."""
    moment = (moment or utc_now()).astimezone(pytz.UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
