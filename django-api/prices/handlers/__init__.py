from prices.handlers.views import BasePriceListView, HolidayListView, PriceView

__all__ = ["BasePriceListView", "HolidayListView", "PriceView"]
