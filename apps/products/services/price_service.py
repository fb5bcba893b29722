"""
Product price service.

Keeps a product's ``discount``/``effective_price``/``wholesale_price`` block in
step with the discount advertised by a product banner.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from django.db import DatabaseError, transaction

from ..models import Product

logger = logging.getLogger(__name__)

WHOLESALE_RATIO = Decimal('0.7')


def round_price(value) -> Decimal:
    """Round half-up to whole currency units"""
    return Decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP)


def calculate_discounted_prices(retail, discount, current_wholesale=None) -> Dict:
    """
    Compute the price block for a retail price and a percentage discount.

    With a positive discount the effective price is the discounted retail and
    wholesale follows it at 70%. Without one, effective equals retail and an
    existing wholesale price is kept; a missing (0/None) wholesale is seeded
    from retail.

    Args:
        retail: Retail price
        discount: Percent off, 0..100
        current_wholesale: Wholesale price currently stored on the product

    Returns:
        dict: ``discount``, ``effective_price`` and ``wholesale_price``
    """
    retail = Decimal(str(retail))
    discount = Decimal(str(discount or 0))

    if discount > 0:
        effective_price = round_price(retail * (Decimal('1') - discount / Decimal('100')))
        wholesale_price = round_price(effective_price * WHOLESALE_RATIO)
    else:
        effective_price = retail
        if current_wholesale:
            wholesale_price = Decimal(str(current_wholesale))
        else:
            wholesale_price = round_price(retail * WHOLESALE_RATIO)

    return {
        'discount': int(discount),
        'effective_price': effective_price,
        'wholesale_price': wholesale_price,
    }


class ProductPriceService:
    """Service for discount-driven product price updates"""

    @staticmethod
    def sync_product_discount(product_id, discount_percent) -> Optional[Product]:
        """
        Write the banner discount onto the referenced product.

        Read-then-write with last-write-wins. A missing product or a store
        failure is logged and swallowed: the banner write that triggered the
        sync has already been committed.

        Returns:
            Product: The updated product, or None when the sync was skipped
        """
        try:
            with transaction.atomic():
                product = Product.objects.get(pk=product_id)
                prices = calculate_discounted_prices(
                    product.retail_price, discount_percent, product.wholesale_price
                )
                for attr, value in prices.items():
                    setattr(product, attr, value)
                product.save(update_fields=list(prices.keys()) + ['update_time'])
        except Product.DoesNotExist:
            logger.warning(f"Price sync skipped: product {product_id} not found")
            return None
        except (DatabaseError, ValueError, TypeError) as e:
            logger.error(f"Price sync failed for product {product_id}: {e}")
            return None

        logger.info(
            f"Synced product {product_id} prices: discount={prices['discount']} "
            f"effective={prices['effective_price']} wholesale={prices['wholesale_price']}"
        )
        return product
