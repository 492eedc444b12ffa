"""Serializers for query strings and responses of the prices API."""

from rest_framework import serializers


class PriceQuerySerializer(serializers.Serializer):
    """Query string of GET /prices."""

    type = serializers.CharField()
    age = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    date = serializers.CharField(required=False, allow_blank=True)


class PriceUpdateSerializer(serializers.Serializer):
    """Query string of PUT /prices."""

    type = serializers.CharField()
    cost = serializers.IntegerField(min_value=0)


class CostSerializer(serializers.Serializer):
    cost = serializers.IntegerField()


class BasePriceSerializer(serializers.Serializer):
    """Serializer for BasePrice domain model."""

    type = serializers.CharField(source="category.value")
    cost = serializers.IntegerField(source="cost.amount")


class HolidaySerializer(serializers.Serializer):
    """Serializer for Holiday domain model."""

    date = serializers.CharField()
    description = serializers.CharField()
