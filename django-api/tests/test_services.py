"""Unit tests for PricingService.

These test boundary parsing and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from prices.domain import BaseCost, BasePrice, CalendarDate, Holiday, TicketCategory
from prices.domain.errors import (
    InvalidAgeError,
    InvalidCostError,
    InvalidDateError,
    UnknownBasePriceError,
    UnknownCategoryError,
)
from prices.services import PricingService
from prices.stores import HolidayStore, InMemoryHolidayStore, InMemoryPriceStore


class CountingHolidayStore(InMemoryHolidayStore):
    def __init__(self, holidays=()) -> None:
        super().__init__(holidays)
        self.calls = 0

    def get_holidays(self) -> list[CalendarDate]:
        self.calls += 1
        return super().get_holidays()


class TestPricingServiceQuote:
    """Tests for PricingService.quote."""

    def test_day_pass_without_age_or_date(self, pricing_service: PricingService):
        assert pricing_service.quote("day").cost == 35

    def test_legacy_day_code(self, pricing_service: PricingService):
        assert pricing_service.quote("1jour", age=10).cost == 25

    def test_monday_discount(self, pricing_service: PricingService):
        quote = pricing_service.quote("day", age=40, date="2019-02-11")
        assert quote.cost == 23
        assert quote.reduction == 35
        assert quote.category is TicketCategory.DAY

    def test_holiday_monday(self, pricing_service: PricingService):
        quote = pricing_service.quote("day", date="2019-02-18")
        assert quote.cost == 35
        assert quote.reduction == 0

    def test_age_as_query_string(self, pricing_service: PricingService):
        assert pricing_service.quote("night", age="70").cost == 8

    def test_empty_age_and_date_are_absent(self, pricing_service: PricingService):
        assert pricing_service.quote("night", age="", date="").cost == 0

    def test_aware_datetime_late_in_the_day(self, pricing_service: PricingService):
        """A Monday evening west of UTC is still a Monday."""
        monday_evening = datetime(2019, 2, 11, 23, 0, tzinfo=timezone(timedelta(hours=-8)))
        assert pricing_service.quote("day", age=30, date=monday_evening).reduction == 35

    def test_night_pass_never_reads_holidays(self):
        holidays = CountingHolidayStore([CalendarDate(2019, 2, 18)])
        service = PricingService(InMemoryPriceStore({TicketCategory.NIGHT: 19}), holidays)
        service.quote("night", age=30, date="2019-02-18")
        assert holidays.calls == 0

    def test_day_pass_reads_holidays_once(self):
        holidays = CountingHolidayStore([CalendarDate(2019, 2, 18)])
        service = PricingService(InMemoryPriceStore({TicketCategory.DAY: 35}), holidays)
        service.quote("day", age=70, date="2019-02-11")
        assert holidays.calls == 1

    def test_unknown_category_raises_error(self, pricing_service: PricingService):
        with pytest.raises(UnknownCategoryError):
            pricing_service.quote("week")

    def test_missing_base_price_raises_error(self):
        service = PricingService(InMemoryPriceStore(), InMemoryHolidayStore())
        with pytest.raises(UnknownBasePriceError) as excinfo:
            service.quote("night")
        assert excinfo.value.category == "night"

    @pytest.mark.parametrize("age", ["-1", "ten", "1.5", -3, True])
    def test_invalid_age_raises_error(self, pricing_service: PricingService, age):
        with pytest.raises(InvalidAgeError):
            pricing_service.quote("day", age=age)

    def test_invalid_date_raises_error(self, pricing_service: PricingService):
        with pytest.raises(InvalidDateError):
            pricing_service.quote("day", date="2019-02-30")

    def test_invalid_date_rejected_for_night_pass(self, pricing_service: PricingService):
        """Malformed dates are rejected even where the date does not matter."""
        with pytest.raises(InvalidDateError):
            pricing_service.quote("night", date="someday")

    def test_repeated_quotes_are_identical(self, pricing_service: PricingService):
        first = pricing_service.quote("day", age=70, date="2019-02-11")
        second = pricing_service.quote("day", age=70, date="2019-02-11")
        assert first == second


class TestPricingServiceUpdate:
    """Tests for PricingService.update_base_price."""

    def test_update_then_quote(self, pricing_service: PricingService):
        base_price = pricing_service.update_base_price("night", 50)
        assert base_price == BasePrice(TicketCategory.NIGHT, BaseCost(50))
        assert pricing_service.quote("night", age=30).cost == 50

    def test_cost_as_query_string(self, pricing_service: PricingService):
        pricing_service.update_base_price("day", "40")
        assert pricing_service.quote("day").cost == 40

    @pytest.mark.parametrize("cost", ["-1", "abc", -10, 2.5])
    def test_invalid_cost_raises_error(self, pricing_service: PricingService, cost):
        with pytest.raises(InvalidCostError):
            pricing_service.update_base_price("day", cost)

    def test_unknown_category_raises_error(self, pricing_service: PricingService):
        with pytest.raises(UnknownCategoryError):
            pricing_service.update_base_price("season", 100)


class TestPricingServiceListings:
    """Tests for the read-only listings."""

    def test_list_base_prices(self, pricing_service: PricingService):
        assert pricing_service.list_base_prices() == [
            BasePrice(TicketCategory.DAY, BaseCost(35)),
            BasePrice(TicketCategory.NIGHT, BaseCost(19)),
        ]

    def test_list_holidays_sorted(self):
        store = InMemoryHolidayStore(
            [Holiday(CalendarDate(2019, 3, 4), "carnival"), CalendarDate(2019, 2, 18)]
        )
        service = PricingService(InMemoryPriceStore(), store)
        assert [h.date for h in service.list_holidays()] == [
            CalendarDate(2019, 2, 18),
            CalendarDate(2019, 3, 4),
        ]

    def test_stores_implement_interface(self):
        assert isinstance(InMemoryHolidayStore(), HolidayStore)
