"""Calendar date identity.

Every date entering the pricing rules goes through resolve() first, so the
rules only ever see CalendarDate. The calendar fields of the input are read
as written: a time of day or a UTC offset is dropped, never applied, so
"2019-02-18T23:30:00-05:00" is the 18th and not the 19th.
"""

import re
from datetime import date, datetime

from prices.domain.errors import InvalidDateError
from prices.domain.value_objects import CalendarDate

MONDAY = 1

_DECODED_PLUS_OFFSET = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?) (\d{2}(?::?\d{2})?)$"
)


def resolve(value: CalendarDate | date | str | None) -> CalendarDate | None:
    """Return the calendar day carried by value, or None when no date was given.

    Raises:
        InvalidDateError: If value is not a readable date.
    """
    if value is None:
        return None
    if isinstance(value, CalendarDate):
        return value
    # datetime is a subclass of date, fields are the local wall-clock ones
    if isinstance(value, date):
        return CalendarDate.from_date(value)
    if isinstance(value, str):
        return _resolve_string(value)
    raise InvalidDateError(value)


def _resolve_string(value: str) -> CalendarDate | None:
    text = value.strip()
    if not text:
        return None
    # an unescaped "+" in a query string arrives as a space
    text = _DECODED_PLUS_OFFSET.sub(r"\1+\2", text)
    try:
        if "T" in text or " " in text:
            return CalendarDate.from_date(datetime.fromisoformat(text).date())
        return CalendarDate.from_string(text)
    except ValueError:
        raise InvalidDateError(value) from None


def same_day(a: CalendarDate, b: CalendarDate) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_monday(value: CalendarDate) -> bool:
    return value.iso_weekday == MONDAY
