"""
Content resolver.

Turns a stored banner into a :class:`ResolvedBanner`, fetching whatever its
content type needs from the catalog and analytics stores. A banner with
nothing to show resolves to ``None``.
"""
import logging
from typing import List, Optional

from django.db import DatabaseError

from apps.analytics.services import AnalyticsService, period_start
from apps.products.models import Category, Product

from ..content import CATEGORY, CUSTOM, NEW_ARRIVALS, OFFER, PRODUCT, TRENDING
from ..resolved import ResolvedBanner

logger = logging.getLogger(__name__)


def _product_queryset():
    return Product.objects.select_related('category').prefetch_related('images')


class ContentResolver:
    """
    Resolve banners against the data visible at ``now``.

    Args:
        now: Reference instant for trailing analytics windows
        leaderboard: Callable ``(since, limit) -> [(product_id, views)]``,
            defaults to the product view leaderboard
    """

    def __init__(self, now, leaderboard=None):
        self.now = now
        self.leaderboard = leaderboard or AnalyticsService.product_view_leaderboard

    def resolve(self, banner) -> Optional[ResolvedBanner]:
        """Resolve an auto banner; ``None`` means drop it"""
        content = banner.parsed_content
        base = ResolvedBanner.from_banner(banner, content)

        if banner.content_type == CUSTOM:
            return base
        if banner.content_type == PRODUCT:
            return self._resolve_product(base, content)
        if banner.content_type == CATEGORY:
            return self._resolve_category(base, content)

        strategies = {
            TRENDING: self._trending_products,
            NEW_ARRIVALS: self._new_arrival_products,
            OFFER: self._offer_products,
        }
        strategy = strategies.get(banner.content_type)
        if strategy is None:
            logger.warning(f"Banner {banner.id} has unknown content type {banner.content_type}")
            return None

        products = strategy(content.auto_config)
        if not products:
            logger.debug(f"Banner {banner.id} ({banner.content_type}) resolved to no products")
            return None

        title, subtitle = self._default_titles(banner.content_type, content.auto_config, products)
        return base.with_changes(
            title=content.title or title,
            subtitle=content.subtitle or subtitle,
            products=products,
        )

    def hydrate(self, banner) -> ResolvedBanner:
        """
        Manual banner: dereference product/category for display, content unchanged.

        A missing product/category leaves the entity unset; the banner is still returned.
        """
        content = banner.parsed_content
        resolved = ResolvedBanner.from_banner(banner, content)
        if banner.content_type == PRODUCT and content.product_id is not None:
            resolved.product = _product_queryset().filter(pk=content.product_id).first()
        elif banner.content_type == CATEGORY and content.category_id is not None:
            resolved.category = Category.objects.filter(pk=content.category_id).first()
        return resolved

    def _resolve_product(self, base, content):
        if content.product_id is None:
            return None
        product = _product_queryset().filter(pk=content.product_id).first()
        if product is None:
            return None
        return base.with_changes(title=content.title or product.name, product=product)

    def _resolve_category(self, base, content):
        if content.category_id is None:
            return None
        category = Category.objects.filter(pk=content.category_id).first()
        if category is None:
            return None
        return base.with_changes(title=content.title or category.name, category=category)

    @staticmethod
    def _active_products(config):
        products = _product_queryset().filter(is_active=True)
        if config.category_filter:
            products = products.filter(category_id=config.category_filter)
        return products

    def _newest(self, config) -> List[Product]:
        return list(self._active_products(config).order_by('-create_time', '-id')[:config.limit])

    def _view_scores(self, config):
        since = period_start(config.period, self.now)
        try:
            rows = self.leaderboard(since=since, limit=config.limit)
        except DatabaseError as e:
            logger.warning(f"Trending leaderboard unavailable, using newest products: {e}")
            return {}
        return {str(entity_id): views for entity_id, views in rows}

    def _trending_products(self, config) -> List[Product]:
        scores = self._view_scores(config)
        ids = [int(entity_id) for entity_id in scores if entity_id.isdigit()]

        products = []
        if ids:
            products = list(self._active_products(config).filter(pk__in=ids).order_by('id'))
        if not products:
            return self._newest(config)

        # sort is stable, ties keep id order
        products.sort(key=lambda p: scores.get(str(p.pk), 0), reverse=True)
        return products

    def _new_arrival_products(self, config) -> List[Product]:
        return self._newest(config)

    def _offer_products(self, config) -> List[Product]:
        products = self._active_products(config).filter(discount__gt=0)
        return list(products.order_by('-discount', '-create_time', '-id')[:config.limit])

    @staticmethod
    def _default_titles(content_type, config, products):
        if content_type == TRENDING:
            return 'Trending Now', f'Most viewed products this {config.period}'
        if content_type == NEW_ARRIVALS:
            return 'New Arrivals', 'Fresh additions to our collection'
        max_discount = products[0].discount if products else 0
        return f'Up to {max_discount}% Off', 'Limited time offers'
