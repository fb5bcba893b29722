"""
Analytics service for event recording and view leaderboards.
"""
from datetime import timedelta
from typing import List, Optional, Tuple

from django.db.models import Count

from ..models import AnalyticsEvent

PERIOD_WINDOWS = {
    'day': timedelta(hours=24),
    'week': timedelta(days=7),
    'month': timedelta(days=30),
}


def period_start(period, now):
    """Lower bound of a trailing window; unknown periods (e.g. 'all') have none"""
    window = PERIOD_WINDOWS.get(period)
    if window is None:
        return None
    return now - window


class AnalyticsService:
    """Service class for analytics events"""

    @staticmethod
    def track_event(event_type, entity_type, entity_id='', **extra) -> AnalyticsEvent:
        """Record one event; ``extra`` maps onto the remaining model fields"""
        return AnalyticsEvent.objects.create(
            event_type=event_type,
            entity_type=entity_type,
            entity_id=str(entity_id or ''),
            **extra
        )

    @staticmethod
    def product_view_leaderboard(since=None, limit=5) -> List[Tuple[str, int]]:
        """
        Count ``product_view`` events per product id, most viewed first.

        Args:
            since: Only count events at or after this instant (None = all time)
            limit: Maximum number of products returned

        Returns:
            list: ``(entity_id, total_views)`` pairs
        """
        events = AnalyticsEvent.objects.filter(
            event_type='product_view', entity_type='product'
        ).exclude(entity_id='')

        if since is not None:
            events = events.filter(created_at__gte=since)

        rows = (
            events.values('entity_id')
            .annotate(total_views=Count('id'))
            .order_by('-total_views', 'entity_id')[:limit]
        )
        return [(row['entity_id'], row['total_views']) for row in rows]
