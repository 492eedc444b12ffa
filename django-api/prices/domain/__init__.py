from prices.domain.models import BasePrice, Holiday, PricingRequest, Quote
from prices.domain.value_objects import (
    Age,
    BaseCost,
    CalendarDate,
    Percentage,
    TicketCategory,
)

__all__ = [
    "BasePrice",
    "Holiday",
    "PricingRequest",
    "Quote",
    "Age",
    "BaseCost",
    "CalendarDate",
    "Percentage",
    "TicketCategory",
]
