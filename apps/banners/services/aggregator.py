"""
Banner aggregator, the read path behind the storefront hero carousel.
"""
import logging
from typing import List

from django.conf import settings

from ..models import AUTO, Banner
from ..resolved import ResolvedBanner
from .content_resolver import ContentResolver
from .cta_links import derive_cta_link

logger = logging.getLogger(__name__)


class BannerAggregator:
    """
    Builds the ordered list of banners to display.

    Args:
        resolver_class: Content resolver factory, called with ``now``
    """

    def __init__(self, resolver_class=ContentResolver):
        self.resolver_class = resolver_class

    @staticmethod
    def sweep_expired(now) -> int:
        """
        Deactivate every active banner whose end date has passed.

        Single conditional UPDATE; running it again is a no-op.

        Returns:
            int: Number of banners deactivated
        """
        count = Banner.objects.expired(now).update(is_active=False)
        if count:
            logger.info(f"Deactivated {count} expired hero banner(s)")
        return count

    @staticmethod
    def eligible_banners(now):
        return Banner.objects.displayable(now).order_by('order', 'id')

    def resolve_banners(self, now, limit=None, include_auto=True) -> List[ResolvedBanner]:
        """
        Sweep, resolve and order the banners displayable at ``now``.

        Args:
            now: Reference instant
            limit: Maximum banners returned, capped by ``HERO_BANNER_MAX_LIMIT``
            include_auto: Whether auto banners take part

        Returns:
            list: ResolvedBanner items ordered by ``order``
        """
        if limit is None:
            limit = settings.HERO_BANNER_MAX_COUNT
        limit = max(0, min(limit, settings.HERO_BANNER_MAX_LIMIT))

        self.sweep_expired(now)

        resolver = self.resolver_class(now)
        resolved = []
        for banner in self.eligible_banners(now):
            if banner.source_type == AUTO:
                if not include_auto:
                    continue
                item = resolver.resolve(banner)
                if item is None:
                    continue
            else:
                # manual banners are kept when their product/category is gone; auto ones drop
                item = resolver.hydrate(banner)
            resolved.append(item)

        resolved.sort(key=lambda item: item.order)

        for item in resolved:
            if not item.cta_link:
                item.cta_link = derive_cta_link(item.content_type, item.product, item.category)

        return resolved[:limit]


def resolve_banners(now, limit=None, include_auto=True) -> List[ResolvedBanner]:
    return BannerAggregator().resolve_banners(now, limit=limit, include_auto=include_auto)
