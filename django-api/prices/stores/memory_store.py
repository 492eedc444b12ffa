"""In-memory stores for tests and local wiring."""

from collections.abc import Iterable

from prices.domain import BaseCost, BasePrice, CalendarDate, Holiday, TicketCategory
from prices.stores.interfaces import HolidayStore, PriceStore


class InMemoryPriceStore(PriceStore):
    def __init__(self, prices: dict[TicketCategory, int] | None = None) -> None:
        self._prices: dict[TicketCategory, BaseCost] = {
            category: BaseCost(amount=cost) for category, cost in (prices or {}).items()
        }

    def find_base_price(self, category: TicketCategory) -> BaseCost | None:
        return self._prices.get(category)

    def set_base_price(self, category: TicketCategory, cost: BaseCost) -> BasePrice:
        self._prices[category] = cost
        return BasePrice(category=category, cost=cost)

    def list_base_prices(self) -> list[BasePrice]:
        return [
            BasePrice(category=category, cost=cost)
            for category, cost in sorted(self._prices.items(), key=lambda item: item[0].value)
        ]


class InMemoryHolidayStore(HolidayStore):
    def __init__(self, holidays: Iterable[Holiday | CalendarDate] = ()) -> None:
        self._holidays = tuple(
            h if isinstance(h, Holiday) else Holiday(date=h) for h in holidays
        )

    def get_holidays(self) -> list[CalendarDate]:
        return [holiday.date for holiday in self._holidays]

    def list_holidays(self) -> list[Holiday]:
        return sorted(self._holidays, key=lambda holiday: holiday.date)
