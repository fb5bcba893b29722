from django.db import models
from django.db.models import Q

from ..content import CONTENT_TYPE_CHOICES, CUSTOM, parse_content

MANUAL = 'manual'
AUTO = 'auto'


def displayable_q(now):
    """Active, started (or unscheduled) and not yet ended at ``now``"""
    return (
        Q(is_active=True)
        & (Q(start_date__isnull=True) | Q(start_date__lte=now))
        & (Q(end_date__isnull=True) | Q(end_date__gte=now))
    )


class BannerQuerySet(models.QuerySet):
    def displayable(self, now):
        return self.filter(displayable_q(now))

    def expired(self, now):
        """Active banners whose end date has passed"""
        return self.filter(is_active=True, end_date__lt=now)

    def with_status(self, status, now):
        if status == 'active':
            return self.displayable(now)
        if status == 'inactive':
            return self.filter(is_active=False)
        if status == 'scheduled':
            return self.filter(start_date__gt=now)
        if status == 'expired':
            return self.filter(end_date__lt=now)
        return self


class Banner(models.Model):
    """Hero banner shown in the storefront carousel"""
    SOURCE_TYPE_CHOICES = [
        (MANUAL, 'Manual'),
        (AUTO, 'Auto'),
    ]
    STATUS_CHOICES = ('active', 'inactive', 'scheduled', 'expired')

    name = models.CharField(max_length=100, blank=True, default='', help_text="Internal name, shown in admin")
    content_type = models.CharField(max_length=20, choices=CONTENT_TYPE_CHOICES, default=CUSTOM)
    source_type = models.CharField(max_length=10, choices=SOURCE_TYPE_CHOICES, default=MANUAL)
    content = models.JSONField(default=dict, blank=True, help_text="Content fields for the content type")
    image = models.JSONField(default=dict, blank=True, help_text="{id, name, url, thumbnail_url, alt}")
    mobile_image = models.JSONField(null=True, blank=True)

    order = models.IntegerField(default=0, help_text="Display order, lower first")
    is_active = models.BooleanField(default=False)
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)

    clicks = models.PositiveIntegerField(default=0)
    impressions = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BannerQuerySet.as_manager()

    class Meta:
        db_table = 'hero_banners'
        ordering = ['order', 'id']
        indexes = [
            models.Index(fields=['is_active', 'order'], name='hero_banner_active_order_idx'),
            models.Index(fields=['is_active', 'start_date', 'end_date'], name='hero_banner_schedule_idx'),
        ]

    def __str__(self):
        return f"Banner {self.id}: {self.name}"

    @property
    def parsed_content(self):
        return parse_content(self.content_type, self.content)

    @property
    def image_url(self):
        return (self.image or {}).get('url') or ''

    def status(self, now):
        if not self.is_active:
            return 'inactive'
        if self.end_date is not None and self.end_date < now:
            return 'expired'
        if self.start_date is not None and self.start_date > now:
            return 'scheduled'
        return 'active'
