"""
Tests for analytics events and the product view leaderboard.
"""
from datetime import timedelta

import pytest
from django.urls import reverse
from rest_framework import status

from apps.analytics.models import AnalyticsEvent
from apps.analytics.services import AnalyticsService, period_start
from tests.factories import AnalyticsEventFactory, ProductFactory, record_views

pytestmark = pytest.mark.django_db


class TestPeriodStart:

    @pytest.mark.parametrize('period, delta', [
        ('day', timedelta(hours=24)),
        ('week', timedelta(days=7)),
        ('month', timedelta(days=30)),
    ])
    def test_trailing_windows(self, now, period, delta):
        assert period_start(period, now) == now - delta

    @pytest.mark.parametrize('period', ['all', 'year', ''])
    def test_other_periods_are_unbounded(self, now, period):
        assert period_start(period, now) is None


class TestLeaderboard:

    def test_counts_product_views_only(self):
        product = ProductFactory()
        record_views(product, 2)
        AnalyticsEventFactory(event_type='product_click', entity_id=str(product.id))
        AnalyticsEventFactory(event_type='banner_impression', entity_type='banner', entity_id='1')

        assert AnalyticsService.product_view_leaderboard() == [(str(product.id), 2)]

    def test_sorted_and_truncated(self):
        products = [ProductFactory() for _ in range(3)]
        for views, product in zip((1, 3, 2), products):
            record_views(product, views)

        board = AnalyticsService.product_view_leaderboard(limit=2)

        assert board == [(str(products[1].id), 3), (str(products[2].id), 2)]

    def test_since_excludes_older_events(self, now):
        product = ProductFactory()
        record_views(product, 4, created_at=now - timedelta(days=10))
        record_views(product, 1, created_at=now)

        board = AnalyticsService.product_view_leaderboard(since=now - timedelta(days=7))

        assert board == [(str(product.id), 1)]


class TestTrackEndpoint:

    def test_track_product_view(self, api_client):
        payload = {'eventType': 'product_view', 'entityType': 'product', 'entityId': '12', 'sessionId': 'abc'}

        response = api_client.post(reverse('analytics-track'), payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        event = AnalyticsEvent.objects.get(pk=response.json()['data']['id'])
        assert event.event_type == 'product_view'
        assert event.entity_id == '12'
        assert event.session_id == 'abc'
        assert event.ip == '127.0.0.1'

    def test_tracked_views_feed_leaderboard(self, api_client):
        product = ProductFactory()
        for _ in range(2):
            api_client.post(
                reverse('analytics-track'),
                {'eventType': 'product_view', 'entityType': 'product', 'entityId': str(product.id)},
                format='json',
            )
        assert AnalyticsService.product_view_leaderboard() == [(str(product.id), 2)]

    def test_invalid_event(self, api_client):
        response = api_client.post(reverse('analytics-track'), {'eventType': 'nope'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
