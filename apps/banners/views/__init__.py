"""
Hero banner views module.
"""
from .public_views import HeroBannerListView, HeroBannerClickView
from .admin_views import (
    AdminBannerListView, AdminBannerDetailView,
    BannerValidateView, CtaPreviewView, BannerReorderView,
)

__all__ = [
    'HeroBannerListView',
    'HeroBannerClickView',
    'AdminBannerListView',
    'AdminBannerDetailView',
    'BannerValidateView',
    'CtaPreviewView',
    'BannerReorderView',
]
