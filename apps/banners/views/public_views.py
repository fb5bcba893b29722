"""
Storefront hero banner views.
"""
import logging

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from apps.common.utils import error_response, success_response
from ..serializers import ResolvedBannerSerializer
from ..services import BannerAggregator, BannerService

logger = logging.getLogger(__name__)


def _query_limit(request):
    try:
        limit = int(request.GET.get('limit', settings.HERO_BANNER_MAX_COUNT))
    except (TypeError, ValueError):
        limit = settings.HERO_BANNER_MAX_COUNT
    return min(max(limit, 0), settings.HERO_BANNER_MAX_LIMIT)


class HeroBannerListView(APIView):
    """Homepage banners - GET /api/hero-banners/"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        try:
            limit = _query_limit(request)
            include_auto = request.GET.get('includeAuto') != 'false'

            banners = BannerAggregator().resolve_banners(
                timezone.now(), limit=limit, include_auto=include_auto
            )
        except Exception as e:
            logger.error(f"Failed to resolve hero banners: {e}", exc_info=True)
            return error_response('Failed to fetch hero banners', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        try:
            BannerService.record_impressions([banner.id for banner in banners])
        except DatabaseError as e:
            logger.warning(f"Failed to record banner impressions: {e}")

        serializer = ResolvedBannerSerializer(banners, many=True, context={'request': request})
        return success_response({'banners': serializer.data}, 'ok')


class HeroBannerClickView(APIView):
    """Click counter - POST /api/hero-banners/<id>/click/"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, pk):
        try:
            if not BannerService.record_click(pk):
                return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)
            return success_response(None, 'ok')
        except Exception as e:
            logger.error(f"Failed to record click for banner {pk}: {e}")
            return error_response('Failed to record click', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
