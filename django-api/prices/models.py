"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.db import models


class BasePrice(models.Model):
    """Persistence model for the base cost of a ticket category."""

    type = models.CharField(max_length=32, unique=True)
    cost = models.PositiveIntegerField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["type"]

    def __str__(self) -> str:
        return f"{self.type} - {self.cost}"


class Holiday(models.Model):
    """Persistence model for holidays."""

    holiday = models.DateField(unique=True)
    description = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["holiday"]

    def __str__(self) -> str:
        return f"{self.holiday} {self.description}".strip()
