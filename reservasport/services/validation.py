"""Input format checks shared by the services."""
import re
from typing import Any, Optional

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
PHONE_PATTERN = re.compile(r"\d{6,15}", re.ASCII)


def is_valid_date(value: Any) -> bool:
    """
    Check the YYYY-MM-DD shape of a date string.

    Only the shape is checked: "2024-13-99" is accepted.
    """
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: Any) -> bool:
    return isinstance(value, str) and PHONE_PATTERN.fullmatch(value) is not None


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def parse_int_id(value: Any) -> Optional[int]:
    """
    Convert an id from a path, query string or JSON body to an int.

    Returns None for values that can never name a record, such as "abc"
    or 1.5.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)
