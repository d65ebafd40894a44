"""
Parsing of raw user input into record field values.

Failures here are input-shape errors: they are raised before any business
rule is checked.
"""

import math
from datetime import date, datetime

from rxlog.config import DATE_FORMAT

DATE_FORMAT_MESSAGE = "Invalid date format. Please enter in DD/MM/YYYY format."


class InputError(ValueError):
    """Raw input could not be turned into a field value."""


class DateFormatError(InputError):
    """The examination date is not a real DD/MM/YYYY date."""

    def __init__(self, text=None):
        super().__init__(DATE_FORMAT_MESSAGE)
        self.text = text


def parse_examination_date(text: str) -> date:
    """Parse a strict ``DD/MM/YYYY`` string; impossible dates are rejected."""
    if not isinstance(text, str):
        raise DateFormatError(text)
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise DateFormatError(text) from e


def parse_measurement(text, field: str) -> float:
    """Coerce a sphere/cylinder/axis input to float."""
    if isinstance(text, bool):
        raise InputError(f"Invalid {field} value: {text!r} is not a number.")
    try:
        value = float(text.strip() if isinstance(text, str) else text)
    except (TypeError, ValueError) as e:
        raise InputError(f"Invalid {field} value: {text!r} is not a number.") from e
    if math.isnan(value) or math.isinf(value):
        raise InputError(f"Invalid {field} value: {text!r} is not a number.")
    return value


def parse_record_id(text) -> int:
    if isinstance(text, bool):
        raise InputError(f"Invalid prescription ID: {text!r} is not a whole number.")
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except (TypeError, ValueError) as e:
        raise InputError(f"Invalid prescription ID: {text!r} is not a whole number.") from e
