"""Django ORM implementation of the price and holiday stores.

Reads go through the Django cache; signals.py drops the cached entries
whenever a row is saved or deleted.
"""

import logging

from django.conf import settings
from django.core.cache import cache

from prices import models
from prices.domain import BaseCost, BasePrice, CalendarDate, Holiday, TicketCategory
from prices.domain.errors import UnknownCategoryError
from prices.stores.interfaces import HolidayStore, PriceStore

logger = logging.getLogger(__name__)

HOLIDAYS_CACHE_KEY = "holidays:list"


def base_price_cache_key(code: str) -> str:
    return f"prices:base:{code}"


def _cache_timeout() -> int:
    return getattr(settings, "PRICES_CACHE_TIMEOUT", 300)


class DjangoPriceStore(PriceStore):
    """Relational base price store using Django ORM."""

    def find_base_price(self, category: TicketCategory) -> BaseCost | None:
        key = base_price_cache_key(category.value)
        cost = cache.get(key)
        if cost is None:
            row = models.BasePrice.objects.filter(type=category.value).first()
            if row is None:
                return None
            cost = row.cost
            cache.set(key, cost, _cache_timeout())
        return BaseCost(amount=cost)

    def set_base_price(self, category: TicketCategory, cost: BaseCost) -> BasePrice:
        models.BasePrice.objects.update_or_create(
            type=category.value, defaults={"cost": cost.amount}
        )
        return BasePrice(category=category, cost=cost)

    def list_base_prices(self) -> list[BasePrice]:
        prices = []
        for row in models.BasePrice.objects.all():
            try:
                category = TicketCategory.from_string(row.type)
            except UnknownCategoryError:
                logger.warning("Skipping base price with unknown type %r", row.type)
                continue
            prices.append(BasePrice(category=category, cost=BaseCost(amount=row.cost)))
        return prices


class DjangoHolidayStore(HolidayStore):
    """Relational holiday store using Django ORM."""

    def get_holidays(self) -> list[CalendarDate]:
        dates = cache.get(HOLIDAYS_CACHE_KEY)
        if dates is None:
            dates = [
                CalendarDate.from_date(day)
                for day in models.Holiday.objects.values_list("holiday", flat=True)
            ]
            cache.set(HOLIDAYS_CACHE_KEY, dates, _cache_timeout())
        return list(dates)

    def list_holidays(self) -> list[Holiday]:
        return [
            Holiday(date=CalendarDate.from_date(row.holiday), description=row.description)
            for row in models.Holiday.objects.all()
        ]
