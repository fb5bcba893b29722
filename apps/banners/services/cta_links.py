"""
Storefront link a banner's call-to-action points to when none is set.
"""
from ..content import CATEGORY, NEW_ARRIVALS, OFFER, PRODUCT, TRENDING

FIXED_CTA_LINKS = {
    TRENDING: '/products?sort=trending',
    NEW_ARRIVALS: '/products?sort=newest',
    OFFER: '/products?filter=offers',
}


def _slug_of(target):
    if target is None:
        return ''
    if isinstance(target, dict):
        return target.get('slug') or ''
    return getattr(target, 'slug', '') or ''


def derive_cta_link(content_type, product=None, category=None) -> str:
    """
    Args:
        content_type: Banner content type
        product: Selected product (model instance or dict with ``slug``)
        category: Selected category (model instance or dict with ``slug``)

    Returns:
        str: Relative storefront path, empty for custom banners
    """
    if content_type == PRODUCT:
        slug = _slug_of(product)
        return f'/products/{slug}' if slug else '/products'
    if content_type == CATEGORY:
        slug = _slug_of(category)
        return f'/category/{slug}' if slug else '/categories'
    return FIXED_CTA_LINKS.get(content_type, '')
