"""
Tests for product price sync from banner discounts.
"""
import logging
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st, settings
from hypothesis.extra.django import TestCase

from apps.products.models import Product
from apps.products.services import ProductPriceService, calculate_discounted_prices, round_price
from tests.factories import ProductFactory


class TestCalculateDiscountedPrices:

    def test_discount_applies_to_effective_and_wholesale(self):
        prices = calculate_discounted_prices(Decimal('1000'), 20)
        assert prices == {
            'discount': 20,
            'effective_price': Decimal('800'),
            'wholesale_price': Decimal('560'),
        }

    def test_zero_discount_keeps_existing_wholesale(self):
        prices = calculate_discounted_prices(Decimal('1000'), 0, current_wholesale=Decimal('450'))
        assert prices['effective_price'] == Decimal('1000')
        assert prices['wholesale_price'] == Decimal('450')

    def test_zero_discount_seeds_missing_wholesale(self):
        prices = calculate_discounted_prices(Decimal('1000'), 0, current_wholesale=Decimal('0'))
        assert prices['wholesale_price'] == Decimal('700')

    def test_rounding_is_half_up(self):
        assert round_price(Decimal('9.5')) == Decimal('10')
        assert round_price(Decimal('849.15')) == Decimal('849')
        prices = calculate_discounted_prices(Decimal('10'), 5)
        assert prices['effective_price'] == Decimal('10')
        assert prices['wholesale_price'] == Decimal('7')

    def test_full_discount(self):
        prices = calculate_discounted_prices(Decimal('250'), 100)
        assert prices['effective_price'] == Decimal('0')
        assert prices['wholesale_price'] == Decimal('0')

    @given(
        retail=st.decimals(min_value=Decimal('0.01'), max_value=Decimal('99999.99'), places=2),
        discount=st.integers(min_value=1, max_value=100),
    )
    def test_discounted_prices_never_exceed_retail(self, retail, discount):
        prices = calculate_discounted_prices(retail, discount)
        assert prices['wholesale_price'] <= prices['effective_price'] <= round_price(retail)
        assert prices['effective_price'] == round_price(retail * (1 - Decimal(discount) / 100))


@pytest.mark.django_db
class TestSyncProductDiscount:

    def test_sync_persists_price_block(self):
        product = ProductFactory(retail_price=Decimal('1000'))

        result = ProductPriceService.sync_product_discount(product.id, 20)

        assert result is not None
        product.refresh_from_db()
        assert product.discount == 20
        assert product.effective_price == Decimal('800')
        assert product.wholesale_price == Decimal('560')

    def test_zero_discount_leaves_wholesale_untouched(self):
        product = ProductFactory(retail_price=Decimal('1000'), wholesale_price=Decimal('480'), discount=30)

        ProductPriceService.sync_product_discount(product.id, 0)

        product.refresh_from_db()
        assert product.discount == 0
        assert product.effective_price == Decimal('1000')
        assert product.wholesale_price == Decimal('480')

    def test_missing_product_is_logged_and_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert ProductPriceService.sync_product_discount(987654, 10) is None
        assert 'product 987654 not found' in caplog.text


class PriceSyncPropertyTests(TestCase):
    """Stored prices always match the computed block"""

    @given(
        retail=st.decimals(min_value=Decimal('1.00'), max_value=Decimal('99999.99'), places=2),
        discount=st.integers(min_value=0, max_value=100),
    )
    @settings(max_examples=30, deadline=None)
    def test_stored_prices_match_calculation(self, retail, discount):
        product = ProductFactory(retail_price=retail, wholesale_price=Decimal('300'))
        expected = calculate_discounted_prices(retail, discount, Decimal('300'))

        ProductPriceService.sync_product_discount(product.id, discount)

        stored = Product.objects.get(pk=product.id)
        assert stored.discount == expected['discount']
        assert stored.effective_price == expected['effective_price']
        assert stored.wholesale_price == expected['wholesale_price']
