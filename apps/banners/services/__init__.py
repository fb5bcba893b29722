"""
Hero banner services module.
"""
from .activation_gate import (
    BannerActivationError,
    activation_violations,
    merge_banner_fields,
    validate_for_activation,
)
from .aggregator import BannerAggregator, resolve_banners
from .banner_service import PATCH_FIELDS, BannerService
from .content_resolver import ContentResolver
from .cta_links import derive_cta_link

__all__ = [
    'BannerActivationError',
    'activation_violations',
    'merge_banner_fields',
    'validate_for_activation',
    'BannerAggregator',
    'resolve_banners',
    'PATCH_FIELDS',
    'BannerService',
    'ContentResolver',
    'derive_cta_link',
]
