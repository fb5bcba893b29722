"""
Common validators module.
"""
from .price_validators import validate_discount_percent

__all__ = [
    'validate_discount_percent',
]
