from django.urls import path

from prices.handlers import BasePriceListView, HolidayListView, PriceView

urlpatterns = [
    path("prices", PriceView.as_view(), name="prices"),
    path("prices/base", BasePriceListView.as_view(), name="base-price-list"),
    path("holidays", HolidayListView.as_view(), name="holiday-list"),
]
