"""Pricing service - orchestration around the pricing rules.

Services:
- Depend only on interfaces (stores)
- Turn raw input into domain values once, at the boundary
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging
from datetime import date as date_type

from prices.domain import (
    Age,
    BaseCost,
    BasePrice,
    CalendarDate,
    Holiday,
    PricingRequest,
    Quote,
    TicketCategory,
)
from prices.domain import rules
from prices.domain.calendar import resolve
from prices.domain.errors import InvalidAgeError, InvalidCostError, UnknownBasePriceError
from prices.stores.interfaces import HolidayStore, PriceStore

logger = logging.getLogger(__name__)


def _parse_non_negative_int(value: int | str) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, str):
        value = int(value.strip())
    if not isinstance(value, int) or value < 0:
        raise ValueError(value)
    return value


class PricingService:
    """Service for lift pass pricing operations."""

    def __init__(self, price_store: PriceStore, holiday_store: HolidayStore) -> None:
        self._prices = price_store
        self._holidays = holiday_store

    def update_base_price(self, category: str, cost: int | str) -> BasePrice:
        """Create or replace the base cost of a category.

        Raises:
            UnknownCategoryError: If category is neither day nor night.
            InvalidCostError: If cost is not a non-negative integer.
        """
        ticket_category = TicketCategory.from_string(category)
        try:
            base_cost = BaseCost(amount=_parse_non_negative_int(cost))
        except ValueError:
            raise InvalidCostError(cost) from None
        base_price = self._prices.set_base_price(ticket_category, base_cost)
        logger.info("Base price for %s set to %s", ticket_category.value, base_cost)
        return base_price

    def quote(
        self,
        category: str,
        age: int | str | None = None,
        date: CalendarDate | date_type | str | None = None,
    ) -> Quote:
        """Return the price of a pass.

        Raises:
            UnknownCategoryError: If category is neither day nor night.
            InvalidAgeError: If age is given but not a non-negative integer.
            InvalidDateError: If date is given but malformed.
            UnknownBasePriceError: If no base price is stored for the category.
        """
        ticket_category = TicketCategory.from_string(category)
        request_age = self._parse_age(age)
        request_date = resolve(date)

        base_cost = self._prices.find_base_price(ticket_category)
        if base_cost is None:
            raise UnknownBasePriceError(ticket_category.value)

        request = PricingRequest(
            category=ticket_category,
            base_cost=base_cost,
            age=request_age,
            date=request_date,
        )
        # night passes never look at the date
        holidays = self._holidays.get_holidays() if ticket_category is TicketCategory.DAY else []
        result = rules.quote(request, holidays)
        logger.debug(
            "Quoted %s pass age=%s date=%s base=%s reduction=%s%% cost=%s",
            ticket_category.value,
            age,
            request_date,
            base_cost,
            result.reduction,
            result.cost,
        )
        return result

    def list_base_prices(self) -> list[BasePrice]:
        return self._prices.list_base_prices()

    def list_holidays(self) -> list[Holiday]:
        return self._holidays.list_holidays()

    @staticmethod
    def _parse_age(age: int | str | None) -> Age | None:
        if age is None or age == "":
            return None
        try:
            return Age(value=_parse_non_negative_int(age))
        except ValueError:
            raise InvalidAgeError(age) from None
