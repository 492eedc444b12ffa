"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Self

from prices.domain.errors import UnknownCategoryError


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A day in the Gregorian calendar, with no time of day or zone."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # date() raises ValueError for 2019-02-30 and friends
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls.from_date(date.fromisoformat(value))

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def iso_weekday(self) -> int:
        """Day of week, Monday is 1 and Sunday is 7."""
        return self.to_date().isoweekday()

    def __str__(self) -> str:
        return self.to_date().isoformat()


class TicketCategory(Enum):
    """Kind of lift pass."""

    DAY = "day"
    NIGHT = "night"

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a category code, accepting the legacy "1jour" code for day passes."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownCategoryError(value)
        code = value.strip().lower()
        if code == "1jour":
            return cls.DAY
        try:
            return cls(code)
        except ValueError:
            raise UnknownCategoryError(value) from None


def _check_whole_number(value: object, name: str) -> None:
    # bool is an int subclass, True is not an age
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be a whole number")


@dataclass(frozen=True)
class Age:
    """Age of the pass holder in whole years."""

    value: int

    def __post_init__(self) -> None:
        _check_whole_number(self.value, "Age")
        if self.value < 0:
            raise ValueError("Age cannot be negative")


@dataclass(frozen=True)
class BaseCost:
    """Undiscounted price of a category, in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        _check_whole_number(self.amount, "Base cost")
        if self.amount < 0:
            raise ValueError("Base cost cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class Percentage:
    """Reduction expressed as a whole percentage between 0 and 100."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError("Percentage must be between 0 and 100")

    @property
    def multiplier(self) -> Decimal:
        """Factor left to pay once the reduction is taken off."""
        return 1 - Decimal(self.value) / 100
