"""
Display-ready banner produced by the aggregator.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from .content import AutoConfig, BannerContent


@dataclass
class ResolvedBanner:
    id: int
    name: str
    content_type: str
    source_type: str
    order: int = 0
    title: str = ''
    subtitle: str = ''
    description: str = ''
    cta_text: str = ''
    cta_link: str = ''
    discount_percent: Optional[int] = None
    offer_code: str = ''
    offer_valid_until: Optional[datetime] = None
    product: Optional[object] = None
    category: Optional[object] = None
    products: List[object] = field(default_factory=list)
    auto_config: Optional[AutoConfig] = None
    image: dict = field(default_factory=dict)
    mobile_image: Optional[dict] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @classmethod
    def from_banner(cls, banner, content: BannerContent):
        return cls(
            id=banner.id,
            name=banner.name,
            content_type=banner.content_type,
            source_type=banner.source_type,
            order=banner.order,
            title=content.title,
            subtitle=content.subtitle,
            description=content.description,
            cta_text=content.cta_text,
            cta_link=content.cta_link,
            discount_percent=getattr(content, 'discount_percent', None),
            offer_code=getattr(content, 'offer_code', ''),
            offer_valid_until=getattr(content, 'offer_valid_until', None),
            auto_config=getattr(content, 'auto_config', None),
            image=banner.image or {},
            mobile_image=banner.mobile_image,
            start_date=banner.start_date,
            end_date=banner.end_date,
        )

    def with_changes(self, **changes):
        return replace(self, **changes)
