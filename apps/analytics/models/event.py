from django.db import models
from django.utils import timezone


class AnalyticsEvent(models.Model):
    """Single storefront interaction; product views feed the trending leaderboard"""
    EVENT_TYPE_CHOICES = [
        ('page_view', 'Page view'),
        ('product_view', 'Product view'),
        ('product_click', 'Product click'),
        ('category_view', 'Category view'),
        ('category_click', 'Category click'),
        ('banner_impression', 'Banner impression'),
        ('banner_click', 'Banner click'),
        ('search', 'Search'),
    ]

    ENTITY_TYPE_CHOICES = [
        ('product', 'Product'),
        ('category', 'Category'),
        ('banner', 'Banner'),
        ('page', 'Page'),
    ]

    event_type = models.CharField(max_length=32, choices=EVENT_TYPE_CHOICES)
    entity_type = models.CharField(max_length=16, choices=ENTITY_TYPE_CHOICES)
    entity_id = models.CharField(max_length=64, blank=True, default='')
    entity_slug = models.CharField(max_length=220, blank=True, default='')
    entity_name = models.CharField(max_length=200, blank=True, default='')
    session_id = models.CharField(max_length=64, blank=True, default='')
    ip = models.GenericIPAddressField(null=True, blank=True)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'analytics_events'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['event_type', 'entity_type', 'created_at'], name='analytics_type_created_idx'),
            models.Index(fields=['entity_type', 'entity_id'], name='analytics_entity_idx'),
        ]

    def __str__(self):
        return f"{self.event_type} {self.entity_type}:{self.entity_id}"
