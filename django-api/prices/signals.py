"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from prices.models import BasePrice, Holiday
from prices.stores.django_store import HOLIDAYS_CACHE_KEY, base_price_cache_key


@receiver([post_save, post_delete], sender=BasePrice)
def invalidate_base_price_cache(sender, instance, **kwargs):
    """Invalidate the cached cost when a base price is saved or deleted."""
    cache.delete(base_price_cache_key(instance.type))


@receiver([post_save, post_delete], sender=Holiday)
def invalidate_holiday_cache(sender, instance, **kwargs):
    """Invalidate the cached holiday list when a holiday is saved or deleted."""
    cache.delete(HOLIDAYS_CACHE_KEY)
