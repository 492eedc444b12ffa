"""Domain models for lift pass pricing.

These are pure domain objects with no API input rules.
Django ORM models are in prices/models.py (persistence layer).
"""

from dataclasses import dataclass

from prices.domain.value_objects import Age, BaseCost, CalendarDate, TicketCategory


@dataclass(frozen=True)
class PricingRequest:
    """Everything the evaluator needs to price one pass."""

    category: TicketCategory
    base_cost: BaseCost
    age: Age | None = None
    date: CalendarDate | None = None


@dataclass(frozen=True)
class BasePrice:
    """Stored base cost of a ticket category."""

    category: TicketCategory
    cost: BaseCost


@dataclass(frozen=True)
class Holiday:
    """A day on which the weekday discount is suppressed."""

    date: CalendarDate
    description: str = ""


@dataclass(frozen=True)
class Quote:
    """Computed price of a pass and the weekday reduction of the requested day."""

    category: TicketCategory
    cost: int
    reduction: int = 0
