"""
Serializer for aggregator output.
"""
from rest_framework import serializers

from apps.products.serializers import BannerCategorySerializer, BannerProductSerializer

from .banner_serializers import AutoConfigSerializer


class ResolvedBannerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    contentType = serializers.CharField(source='content_type')
    sourceType = serializers.CharField(source='source_type')
    order = serializers.IntegerField()
    title = serializers.CharField()
    subtitle = serializers.CharField()
    description = serializers.CharField()
    ctaText = serializers.CharField(source='cta_text')
    ctaLink = serializers.CharField(source='cta_link')
    discountPercent = serializers.IntegerField(source='discount_percent', allow_null=True)
    offerCode = serializers.CharField(source='offer_code')
    offerValidUntil = serializers.DateTimeField(source='offer_valid_until', allow_null=True)
    product = BannerProductSerializer(allow_null=True)
    category = BannerCategorySerializer(allow_null=True)
    autoProducts = serializers.SerializerMethodField()
    autoConfig = AutoConfigSerializer(source='auto_config', allow_null=True)
    image = serializers.SerializerMethodField()
    startDate = serializers.DateTimeField(source='start_date', allow_null=True)
    endDate = serializers.DateTimeField(source='end_date', allow_null=True)

    def get_autoProducts(self, obj):
        if not obj.products:
            return None
        return BannerProductSerializer(obj.products, many=True, context=self.context).data

    def get_image(self, obj):
        image = obj.image or {}
        mobile = obj.mobile_image or {}
        return {
            'id': image.get('id', ''),
            'url': image.get('url', ''),
            'alt': image.get('alt') or obj.title or obj.name,
            'mobileUrl': mobile.get('url') or None,
        }
