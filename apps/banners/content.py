"""
Banner content, one dataclass per content type.

The ``content`` JSON column is only ever read through :func:`parse_content`,
so fields that do not belong to the banner's content type are dropped on
load instead of lingering in the document.
"""
from dataclasses import dataclass, field, fields, asdict
from datetime import datetime
from typing import ClassVar, Optional

from django.utils.dateparse import parse_datetime

CUSTOM = 'custom'
PRODUCT = 'product'
CATEGORY = 'category'
TRENDING = 'trending'
NEW_ARRIVALS = 'new_arrivals'
OFFER = 'offer'

CONTENT_TYPE_CHOICES = [
    (CUSTOM, 'Custom'),
    (PRODUCT, 'Product'),
    (CATEGORY, 'Category'),
    (TRENDING, 'Trending'),
    (NEW_ARRIVALS, 'New arrivals'),
    (OFFER, 'Offer'),
]

AUTO_CONTENT_TYPES = (TRENDING, NEW_ARRIVALS, OFFER)

PERIOD_CHOICES = [
    ('day', 'Last 24 hours'),
    ('week', 'Last 7 days'),
    ('month', 'Last 30 days'),
    ('all', 'All time'),
]

DEFAULT_CTA_TEXT = 'Shop Now'
DEFAULT_AUTO_LIMIT = 5
DEFAULT_AUTO_PERIOD = 'week'


def _to_datetime(value):
    if value is None or value == '' or isinstance(value, datetime):
        return value or None
    return parse_datetime(str(value))


def _to_int(value):
    if value is None or value == '':
        return None
    return int(value)


@dataclass
class AutoConfig:
    """Parameters of the algorithmic strategies"""
    limit: int = DEFAULT_AUTO_LIMIT
    period: str = DEFAULT_AUTO_PERIOD
    category_filter: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            limit=_to_int(data.get('limit')) or DEFAULT_AUTO_LIMIT,
            period=data.get('period') or DEFAULT_AUTO_PERIOD,
            category_filter=_to_int(data.get('category_filter')),
        )


@dataclass
class BannerContent:
    """Presentational fields every content type carries"""
    content_type: ClassVar[str] = CUSTOM

    title: str = ''
    subtitle: str = ''
    description: str = ''
    cta_text: str = DEFAULT_CTA_TEXT
    cta_link: str = ''

    @classmethod
    def from_dict(cls, data):
        data = dict(data or {})
        kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == 'auto_config':
                value = value if isinstance(value, AutoConfig) else AutoConfig.from_dict(value)
            elif f.name in ('product_id', 'category_id', 'discount_percent'):
                value = _to_int(value)
            elif f.name == 'offer_valid_until':
                value = _to_datetime(value)
            elif value is None:
                continue
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self):
        """JSON-safe dict for the ``content`` column"""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data


@dataclass
class CustomContent(BannerContent):
    content_type: ClassVar[str] = CUSTOM


@dataclass
class ProductContent(BannerContent):
    content_type: ClassVar[str] = PRODUCT

    product_id: Optional[int] = None
    discount_percent: Optional[int] = None


@dataclass
class CategoryContent(BannerContent):
    content_type: ClassVar[str] = CATEGORY

    category_id: Optional[int] = None


@dataclass
class TrendingContent(BannerContent):
    content_type: ClassVar[str] = TRENDING

    auto_config: AutoConfig = field(default_factory=AutoConfig)


@dataclass
class NewArrivalsContent(BannerContent):
    content_type: ClassVar[str] = NEW_ARRIVALS

    auto_config: AutoConfig = field(default_factory=AutoConfig)


@dataclass
class OfferContent(BannerContent):
    content_type: ClassVar[str] = OFFER

    auto_config: AutoConfig = field(default_factory=AutoConfig)
    offer_code: str = ''
    offer_valid_until: Optional[datetime] = None


CONTENT_CLASSES = {
    cls.content_type: cls
    for cls in (CustomContent, ProductContent, CategoryContent,
                TrendingContent, NewArrivalsContent, OfferContent)
}


def parse_content(content_type, data) -> BannerContent:
    """
    Build the content variant for ``content_type``.

    ``data`` may be a stored dict or an already-parsed content object; in the
    latter case its fields are carried over to the (possibly different)
    variant.
    """
    cls = CONTENT_CLASSES.get(content_type)
    if cls is None:
        raise ValueError(f"Unknown banner content type: {content_type}")
    if isinstance(data, BannerContent):
        data = {f.name: getattr(data, f.name) for f in fields(data)}
    return cls.from_dict(data)
