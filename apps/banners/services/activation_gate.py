"""
Activation gate.

A write that turns a banner on is checked against the banner as it would look
after the write: stored fields overlaid with the incoming ones.
"""
from typing import Dict, List

from apps.common.exceptions import DomainValidationError

from ..content import CATEGORY, CUSTOM, OFFER, PRODUCT, parse_content
from ..models import MANUAL

BANNER_FIELDS = (
    'name', 'content_type', 'source_type', 'content', 'image', 'mobile_image',
    'order', 'is_active', 'start_date', 'end_date',
)

NEW_BANNER_DEFAULTS = {
    'name': '',
    'content_type': CUSTOM,
    'source_type': MANUAL,
    'content': {},
    'image': {},
    'mobile_image': None,
    'order': 0,
    'is_active': False,
    'start_date': None,
    'end_date': None,
}


class BannerActivationError(DomainValidationError):
    """Banner cannot be activated in its proposed state"""

    def __init__(self, messages):
        super().__init__(messages, summary='Banner cannot be activated')


def merge_banner_fields(existing, patch) -> Dict:
    """
    Overlay ``patch`` onto ``existing`` (a Banner, or None for a new one).

    The merged ``content`` is always parsed for the merged content type.
    """
    if existing is None:
        merged = dict(NEW_BANNER_DEFAULTS)
    else:
        merged = {name: getattr(existing, name) for name in BANNER_FIELDS}

    merged.update({name: value for name, value in patch.items() if name in BANNER_FIELDS})
    merged['content'] = parse_content(merged['content_type'], merged['content'] or {})
    return merged


def is_activation(patch) -> bool:
    return patch.get('is_active') is True


def activation_violations(fields, now) -> List[str]:
    """Every reason the merged ``fields`` cannot be shown at ``now``"""
    errors = []
    content = fields['content']

    if not (fields.get('name') or '').strip():
        errors.append('Banner name is required')

    if not (fields.get('image') or {}).get('url'):
        errors.append('Banner image is required')

    end_date = fields.get('end_date')
    if end_date is not None and end_date < now:
        errors.append('Cannot activate a banner with an end date in the past')

    if fields['content_type'] == OFFER:
        valid_until = content.offer_valid_until
        if valid_until is not None and valid_until < now:
            errors.append('Cannot activate an offer that has already expired')

    if fields['content_type'] == PRODUCT and content.product_id is None:
        errors.append('Product banners must reference a product')

    if fields['content_type'] == CATEGORY and content.category_id is None:
        errors.append('Category banners must reference a category')

    return errors


def validate_for_activation(existing, proposed_patch, now) -> List[str]:
    """
    Check whether ``existing`` with ``proposed_patch`` applied may be shown.

    Args:
        existing: Stored Banner, or None for a banner being created
        proposed_patch: Incoming field values (model field names)
        now: Reference instant

    Returns:
        list: Violation messages, empty when the banner may be activated
    """
    return activation_violations(merge_banner_fields(existing, proposed_patch), now)
