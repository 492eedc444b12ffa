"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from prices.domain import BaseCost, BasePrice, CalendarDate, Holiday, TicketCategory


class PriceStore(ABC):
    """Interface for base price persistence operations."""

    @abstractmethod
    def find_base_price(self, category: TicketCategory) -> BaseCost | None:
        """Return the base cost of a category, or None if none is stored."""
        ...

    @abstractmethod
    def set_base_price(self, category: TicketCategory, cost: BaseCost) -> BasePrice:
        """Create or replace the base cost of a category."""
        ...

    @abstractmethod
    def list_base_prices(self) -> list[BasePrice]:
        """Return all stored base prices ordered by category code."""
        ...


class HolidayStore(ABC):
    """Interface for the read-only holiday list."""

    @abstractmethod
    def get_holidays(self) -> list[CalendarDate]:
        """Return every holiday date. Order and duplicates are not significant."""
        ...

    @abstractmethod
    def list_holidays(self) -> list[Holiday]:
        """Return holidays with their descriptions, ordered by date."""
        ...
