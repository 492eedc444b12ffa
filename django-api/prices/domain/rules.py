"""Pricing rules for lift passes.

Pure functions over domain values: no I/O, no logging, no caching. Holidays
are read once per call and never mutated.

Fractional prices are always rounded up to the next whole currency unit.
Arithmetic is done on Decimal so that 10 x 0.7 is exactly 7.
"""

from collections.abc import Iterable
from decimal import ROUND_CEILING, Decimal

from prices.domain.calendar import is_monday, same_day
from prices.domain.errors import UnknownCategoryError
from prices.domain.models import PricingRequest, Quote
from prices.domain.value_objects import BaseCost, CalendarDate, Percentage, TicketCategory

DISCOUNT_PERCENT = 35

CHILD_AGE = 6
YOUTH_AGE = 15
SENIOR_AGE = 64

NIGHT_SENIOR_RATE = Decimal("0.4")
DAY_YOUTH_RATE = Decimal("0.7")
DAY_SENIOR_RATE = Decimal("0.75")


def is_holiday(date: CalendarDate, holidays: Iterable[CalendarDate]) -> bool:
    return any(same_day(date, holiday) for holiday in holidays)


def reduction(date: CalendarDate | None, holidays: Iterable[CalendarDate]) -> int:
    """Return the weekday reduction in percent for a day pass used on date.

    Mondays get DISCOUNT_PERCENT off unless they are holidays. Without a date
    there is no reduction.
    """
    if date is not None and is_monday(date) and not is_holiday(date, holidays):
        return DISCOUNT_PERCENT
    return 0


def quote(request: PricingRequest, holidays: Iterable[CalendarDate] = ()) -> Quote:
    """Price the requested pass, keeping the weekday reduction that was looked up.

    Raises:
        UnknownCategoryError: If the category is neither day nor night.
    """
    if request.category is TicketCategory.NIGHT:
        return Quote(category=request.category, cost=_night_price(request))
    if request.category is TicketCategory.DAY:
        percent = reduction(request.date, holidays)
        return Quote(
            category=request.category,
            cost=_day_price(request, Percentage(percent)),
            reduction=percent,
        )
    raise UnknownCategoryError(request.category)


def price(request: PricingRequest, holidays: Iterable[CalendarDate] = ()) -> int:
    """Return the price of the requested pass.

    Raises:
        UnknownCategoryError: If the category is neither day nor night.
    """
    return quote(request, holidays).cost


def _night_price(request: PricingRequest) -> int:
    base = request.base_cost
    if request.age is None:
        return 0
    age = request.age.value
    if age < CHILD_AGE:
        return 0
    if age > SENIOR_AGE:
        return _ceil(base, NIGHT_SENIOR_RATE)
    return base.amount


def _day_price(request: PricingRequest, weekday_reduction: Percentage) -> int:
    base = request.base_cost
    left_to_pay = weekday_reduction.multiplier
    if request.age is None:
        return _ceil(base, left_to_pay)
    age = request.age.value
    if age < CHILD_AGE:
        return 0
    # Youth passes are flat rate, the Monday reduction does not apply.
    if age < YOUTH_AGE:
        return _ceil(base, DAY_YOUTH_RATE)
    if age > SENIOR_AGE:
        return _ceil(base, DAY_SENIOR_RATE * left_to_pay)
    return _ceil(base, left_to_pay)


def _ceil(base: BaseCost, rate: Decimal) -> int:
    return int((base.amount * rate).to_integral_value(rounding=ROUND_CEILING))
