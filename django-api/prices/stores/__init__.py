from prices.stores.interfaces import HolidayStore, PriceStore
from prices.stores.memory_store import InMemoryHolidayStore, InMemoryPriceStore

__all__ = [
    "HolidayStore",
    "PriceStore",
    "InMemoryHolidayStore",
    "InMemoryPriceStore",
]
