"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from prices.domain import CalendarDate, TicketCategory
from prices.services import PricingService
from prices.stores import InMemoryHolidayStore, InMemoryPriceStore

HOLIDAYS = [
    CalendarDate(2019, 2, 18),
    CalendarDate(2019, 2, 25),
    CalendarDate(2019, 3, 4),
]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def pricing_service() -> PricingService:
    return PricingService(
        InMemoryPriceStore({TicketCategory.DAY: 35, TicketCategory.NIGHT: 19}),
        InMemoryHolidayStore(HOLIDAYS),
    )


@pytest.fixture
def lift_pass_db(db):
    """Base prices and holidays of the legacy lift pass database."""
    from prices import models

    models.BasePrice.objects.create(type="day", cost=35)
    models.BasePrice.objects.create(type="night", cost=19)
    models.Holiday.objects.create(holiday="2019-02-18", description="winter")
    models.Holiday.objects.create(holiday="2019-02-25", description="winter")
    models.Holiday.objects.create(holiday="2019-03-04", description="winter")
