"""
Admin hero banner management views.
"""
import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView

from apps.common.utils import error_response, page_info, page_params, success_response
from ..content import parse_content
from ..models import Banner
from ..serializers import (
    BannerAdminSerializer,
    BannerPatchSerializer,
    BannerReorderSerializer,
    BannerValidateSerializer,
    BannerWriteSerializer,
    CtaPreviewSerializer,
)
from ..services import PATCH_FIELDS, BannerActivationError, BannerService, validate_for_activation

logger = logging.getLogger(__name__)


def _activation_error(exc):
    return error_response(str(exc), errors=exc.messages, status_code=status.HTTP_400_BAD_REQUEST)


class AdminBannerListView(APIView):
    """Banner list and create - /api/admin/hero-banners/"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        try:
            now = timezone.now()
            status_filter = request.GET.get('status')
            page, page_size = page_params(request)

            banners = Banner.objects.all()
            if status_filter:
                if status_filter not in Banner.STATUS_CHOICES:
                    return error_response(f'Unknown status: {status_filter}')
                banners = banners.with_status(status_filter, now)
            banners = banners.order_by('order', '-created_at')

            total = banners.count()
            start = (page - 1) * page_size
            serializer = BannerAdminSerializer(
                banners[start:start + page_size], many=True, context={'now': now}
            )
            return success_response({
                'list': serializer.data,
                'page': page_info(page, page_size, total),
            }, 'ok')
        except Exception as e:
            logger.error(f"Failed to list hero banners: {e}", exc_info=True)
            return error_response('Failed to fetch banners', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def post(self, request):
        serializer = BannerWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        try:
            now = timezone.now()
            banner = BannerService.create_banner(serializer.validated_data, now)
            data = BannerAdminSerializer(banner, context={'now': now}).data
            return success_response(data, 'Banner created', status_code=status.HTTP_201_CREATED)
        except BannerActivationError as e:
            return _activation_error(e)
        except Exception as e:
            logger.error(f"Failed to create hero banner: {e}", exc_info=True)
            return error_response('Failed to create banner', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class AdminBannerDetailView(APIView):
    """Single banner - /api/admin/hero-banners/<id>/"""
    permission_classes = [IsAdminUser]

    def get(self, request, pk):
        try:
            banner = Banner.objects.get(pk=pk)
        except Banner.DoesNotExist:
            return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)
        data = BannerAdminSerializer(banner, context={'now': timezone.now()}).data
        return success_response(data, 'ok')

    def put(self, request, pk):
        try:
            banner = Banner.objects.get(pk=pk)
        except Banner.DoesNotExist:
            return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = BannerWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        try:
            now = timezone.now()
            banner = BannerService.update_banner(banner, serializer.validated_data, now)
            data = BannerAdminSerializer(banner, context={'now': now}).data
            return success_response(data, 'Banner updated')
        except BannerActivationError as e:
            return _activation_error(e)
        except Exception as e:
            logger.error(f"Failed to update hero banner {pk}: {e}", exc_info=True)
            return error_response('Failed to update banner', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def patch(self, request, pk):
        try:
            banner = Banner.objects.get(pk=pk)
        except Banner.DoesNotExist:
            return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = BannerPatchSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)
        if not any(name in serializer.validated_data for name in PATCH_FIELDS):
            return error_response('No valid fields to update')

        try:
            now = timezone.now()
            banner = BannerService.patch_banner(banner, serializer.validated_data, now)
            data = BannerAdminSerializer(banner, context={'now': now}).data
            return success_response(data, 'Banner updated')
        except BannerActivationError as e:
            return _activation_error(e)
        except Exception as e:
            logger.error(f"Failed to patch hero banner {pk}: {e}", exc_info=True)
            return error_response('Failed to update banner', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def delete(self, request, pk):
        try:
            banner = Banner.objects.get(pk=pk)
        except Banner.DoesNotExist:
            return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)

        try:
            BannerService.delete_banner(banner)
            return success_response(None, 'Banner deleted')
        except Exception as e:
            logger.error(f"Failed to delete hero banner {pk}: {e}", exc_info=True)
            return error_response('Failed to delete banner', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class BannerValidateView(APIView):
    """Pre-submit activation check - POST /api/admin/hero-banners/validate/"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = BannerValidateSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        patch = dict(serializer.validated_data)
        banner_id = patch.pop('id', None)
        existing = None
        if banner_id is not None:
            existing = Banner.objects.filter(pk=banner_id).first()
            if existing is None:
                return error_response('Banner not found', status_code=status.HTTP_404_NOT_FOUND)

        violations = validate_for_activation(existing, patch, timezone.now())
        return success_response({'valid': not violations, 'errors': violations}, 'ok')


class CtaPreviewView(APIView):
    """Live CTA link preview - POST /api/admin/hero-banners/cta-preview/"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = CtaPreviewSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        data = serializer.validated_data
        content = parse_content(data['content_type'], data)
        link = BannerService.cta_link_for(data['content_type'], content)
        return success_response({'ctaLink': link}, 'ok')


class BannerReorderView(APIView):
    """Drag-and-drop reorder - POST /api/admin/hero-banners/reorder/"""
    permission_classes = [IsAdminUser]

    def post(self, request):
        serializer = BannerReorderSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        try:
            updated = BannerService.reorder_banners(serializer.validated_data['ids'])
            return success_response({'updated': updated}, 'Banners reordered')
        except Exception as e:
            logger.error(f"Failed to reorder hero banners: {e}", exc_info=True)
            return error_response('Failed to reorder banners', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
