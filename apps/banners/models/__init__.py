"""
Hero banner models
"""
from .banner import AUTO, MANUAL, Banner, BannerQuerySet, displayable_q

__all__ = ['AUTO', 'MANUAL', 'Banner', 'BannerQuerySet', 'displayable_q']
