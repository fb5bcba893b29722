"""
Product serializers module.
"""
from .product_serializers import (
    ProductImageSerializer, CategorySummarySerializer,
    BannerCategorySerializer, BannerProductSerializer,
)

__all__ = [
    'ProductImageSerializer',
    'CategorySummarySerializer',
    'BannerCategorySerializer',
    'BannerProductSerializer',
]
