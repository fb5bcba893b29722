"""
Analytics views.
"""
import logging

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework import status

from apps.common.utils import success_response, error_response
from .serializers import TrackEventSerializer
from .services import AnalyticsService

logger = logging.getLogger(__name__)


def get_client_ip(request):
    """First hop of X-Forwarded-For, else the socket address"""
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class TrackEventView(APIView):
    """Event tracking endpoint - POST /api/analytics/track/"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = TrackEventSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid event', errors=serializer.errors)

        try:
            data = dict(serializer.validated_data)
            event = AnalyticsService.track_event(
                data.pop('event_type'),
                data.pop('entity_type'),
                data.pop('entity_id', ''),
                ip=get_client_ip(request),
                **data
            )
            return success_response({'id': event.id}, 'ok', status_code=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Failed to track event: {e}")
            return error_response('Failed to track event', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
