from django.contrib import admin

from prices.models import BasePrice, Holiday


@admin.register(BasePrice)
class BasePriceAdmin(admin.ModelAdmin):
    list_display = ["type", "cost", "updated_at"]
    search_fields = ["type"]


@admin.register(Holiday)
class HolidayAdmin(admin.ModelAdmin):
    list_display = ["holiday", "description"]
    search_fields = ["description"]
    date_hierarchy = "holiday"
