"""
Price and discount validators.
"""
from rest_framework import serializers


def validate_discount_percent(value):
    """
    Validate a percentage discount lies in 0..100.

    ``None`` is accepted and means "no discount configured".
    """
    if value is None:
        return value

    if value < 0 or value > 100:
        raise serializers.ValidationError("Discount must be between 0 and 100 percent.")

    return value
