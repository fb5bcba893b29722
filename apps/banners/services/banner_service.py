"""
Banner write path: create, update, patch, delete, reorder and counters.
"""
import logging
from typing import Iterable

from django.db import transaction
from django.db.models import F

from apps.products.models import Category, Product
from apps.products.services import ProductPriceService

from ..content import CATEGORY, PRODUCT
from ..models import Banner
from .activation_gate import (
    BANNER_FIELDS,
    BannerActivationError,
    activation_violations,
    is_activation,
    merge_banner_fields,
)
from .cta_links import derive_cta_link

logger = logging.getLogger(__name__)

PATCH_FIELDS = ('is_active', 'order', 'start_date', 'end_date')


class BannerService:
    """Service for hero banner writes"""

    @staticmethod
    def cta_link_for(content_type, content) -> str:
        """Derive the CTA link, looking up the selected product/category"""
        product = category = None
        if content_type == PRODUCT and getattr(content, 'product_id', None) is not None:
            product = Product.objects.filter(pk=content.product_id).only('slug').first()
        elif content_type == CATEGORY and getattr(content, 'category_id', None) is not None:
            category = Category.objects.filter(pk=content.category_id).only('slug').first()
        return derive_cta_link(content_type, product=product, category=category)

    @staticmethod
    def create_banner(validated_data, now) -> Banner:
        """
        Create a banner from serializer data.

        Raises:
            BannerActivationError: ``is_active`` requested but the banner fails the gate
        """
        banner = BannerService._write(None, validated_data, now)
        if 'content' in validated_data:
            BannerService._sync_discount(banner)
        logger.info(f"Created hero banner {banner.id} ({banner.content_type}/{banner.source_type})")
        return banner

    @staticmethod
    def update_banner(banner, validated_data, now) -> Banner:
        """Full update; discount is re-synced whenever content is written"""
        banner = BannerService._write(banner, validated_data, now)
        if 'content' in validated_data:
            BannerService._sync_discount(banner)
        logger.info(f"Updated hero banner {banner.id}")
        return banner

    @staticmethod
    def patch_banner(banner, validated_data, now) -> Banner:
        """
        Partial update limited to activation, order and schedule.

        Discount is re-synced only when the patch activates the banner.
        """
        patch = {name: value for name, value in validated_data.items() if name in PATCH_FIELDS}
        banner = BannerService._write(banner, patch, now)
        if is_activation(patch):
            BannerService._sync_discount(banner)
        logger.info(f"Patched hero banner {banner.id}: {sorted(patch)}")
        return banner

    @staticmethod
    def delete_banner(banner):
        banner_id = banner.id
        banner.delete()
        logger.info(f"Deleted hero banner {banner_id}")

    @staticmethod
    def reorder_banners(banner_ids: Iterable[int]) -> int:
        """Set ``order`` to each id's position in ``banner_ids``"""
        updated = 0
        with transaction.atomic():
            for position, banner_id in enumerate(banner_ids):
                updated += Banner.objects.filter(pk=banner_id).update(order=position)
        return updated

    @staticmethod
    def record_click(banner_id) -> bool:
        return Banner.objects.filter(pk=banner_id).update(clicks=F('clicks') + 1) > 0

    @staticmethod
    def record_impressions(banner_ids: Iterable[int]) -> int:
        banner_ids = list(banner_ids)
        if not banner_ids:
            return 0
        return Banner.objects.filter(pk__in=banner_ids).update(impressions=F('impressions') + 1)

    @staticmethod
    def _write(banner, patch, now) -> Banner:
        merged = merge_banner_fields(banner, patch)

        if is_activation(patch):
            violations = activation_violations(merged, now)
            if violations:
                logger.info(f"Activation rejected for banner {getattr(banner, 'id', None)}: {violations}")
                raise BannerActivationError(violations)

        content = merged['content']
        type_changed = banner is not None and merged['content_type'] != banner.content_type
        if 'content' in patch or type_changed:
            # a link equal to the one derived for the stored selection is not an override
            previous = ''
            if banner is not None:
                previous = BannerService.cta_link_for(banner.content_type, banner.parsed_content)
            if not content.cta_link or content.cta_link == previous:
                content.cta_link = BannerService.cta_link_for(merged['content_type'], content)

        instance = banner if banner is not None else Banner()
        for name in BANNER_FIELDS:
            if name != 'content':
                setattr(instance, name, merged[name])
        instance.content = content.to_dict()

        with transaction.atomic():
            instance.save()
        return instance

    @staticmethod
    def _sync_discount(banner):
        """Push a product banner's discount onto its product; never fails the write"""
        if banner.content_type != PRODUCT:
            return None
        content = banner.parsed_content
        if content.product_id is None or content.discount_percent is None:
            return None
        return ProductPriceService.sync_product_discount(content.product_id, content.discount_percent)
