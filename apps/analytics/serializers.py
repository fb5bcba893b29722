"""
Analytics serializers.
"""
from rest_framework import serializers
from .models import AnalyticsEvent


class TrackEventSerializer(serializers.Serializer):
    """Incoming tracking payload"""
    eventType = serializers.ChoiceField(choices=AnalyticsEvent.EVENT_TYPE_CHOICES, source='event_type')
    entityType = serializers.ChoiceField(choices=AnalyticsEvent.ENTITY_TYPE_CHOICES, source='entity_type')
    entityId = serializers.CharField(max_length=64, required=False, allow_blank=True, source='entity_id')
    entitySlug = serializers.CharField(max_length=220, required=False, allow_blank=True, source='entity_slug')
    entityName = serializers.CharField(max_length=200, required=False, allow_blank=True, source='entity_name')
    sessionId = serializers.CharField(max_length=64, required=False, allow_blank=True, source='session_id')
    metadata = serializers.DictField(required=False)
