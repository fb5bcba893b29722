"""
Product services module.
"""
from .price_service import ProductPriceService, calculate_discounted_prices, round_price

__all__ = [
    'ProductPriceService',
    'calculate_discounted_prices',
    'round_price',
]
