"""
Hero banner serializers module.
"""
from .banner_serializers import (
    AutoConfigSerializer,
    BannerAdminSerializer,
    BannerContentSerializer,
    BannerImageSerializer,
    BannerPatchSerializer,
    BannerReorderSerializer,
    BannerValidateSerializer,
    BannerWriteSerializer,
    CtaPreviewSerializer,
)
from .resolved_serializers import ResolvedBannerSerializer

__all__ = [
    'AutoConfigSerializer',
    'BannerAdminSerializer',
    'BannerContentSerializer',
    'BannerImageSerializer',
    'BannerPatchSerializer',
    'BannerReorderSerializer',
    'BannerValidateSerializer',
    'BannerWriteSerializer',
    'CtaPreviewSerializer',
    'ResolvedBannerSerializer',
]
