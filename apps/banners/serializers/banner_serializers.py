"""
Hero banner serializers.

Input uses the storefront's camelCase keys; ``source=`` maps them onto model
and content field names.
"""
from rest_framework import serializers

from apps.common.validators import validate_discount_percent

from ..content import CONTENT_TYPE_CHOICES, DEFAULT_AUTO_LIMIT, DEFAULT_AUTO_PERIOD, PERIOD_CHOICES
from ..models import Banner


class AutoConfigSerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=20, required=False, default=DEFAULT_AUTO_LIMIT)
    period = serializers.ChoiceField(choices=PERIOD_CHOICES, required=False, default=DEFAULT_AUTO_PERIOD)
    categoryFilter = serializers.IntegerField(source='category_filter', required=False, allow_null=True)


class BannerContentSerializer(serializers.Serializer):
    """Content fields; those not used by the content type are dropped on save"""
    productId = serializers.IntegerField(source='product_id', required=False, allow_null=True)
    categoryId = serializers.IntegerField(source='category_id', required=False, allow_null=True)
    title = serializers.CharField(max_length=200, required=False, allow_blank=True)
    subtitle = serializers.CharField(max_length=300, required=False, allow_blank=True)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    ctaText = serializers.CharField(source='cta_text', max_length=50, required=False, allow_blank=True)
    ctaLink = serializers.CharField(source='cta_link', max_length=500, required=False, allow_blank=True)
    discountPercent = serializers.IntegerField(
        source='discount_percent', required=False, allow_null=True, validators=[validate_discount_percent]
    )
    offerCode = serializers.CharField(source='offer_code', max_length=50, required=False, allow_blank=True)
    offerValidUntil = serializers.DateTimeField(source='offer_valid_until', required=False, allow_null=True)
    autoConfig = AutoConfigSerializer(source='auto_config', required=False)


class BannerImageSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(required=False, allow_blank=True)
    url = serializers.CharField(max_length=500, required=False, allow_blank=True)
    thumbnailUrl = serializers.CharField(source='thumbnail_url', required=False, allow_blank=True)
    alt = serializers.CharField(required=False, allow_blank=True)
    mobileUrl = serializers.CharField(source='mobile_url', required=False, allow_blank=True, allow_null=True)


class BannerWriteSerializer(serializers.Serializer):
    """Create / full update payload"""
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    contentType = serializers.ChoiceField(source='content_type', choices=CONTENT_TYPE_CHOICES, required=False)
    sourceType = serializers.ChoiceField(source='source_type', choices=Banner.SOURCE_TYPE_CHOICES, required=False)
    content = BannerContentSerializer(required=False)
    image = BannerImageSerializer(required=False)
    mobileImage = BannerImageSerializer(source='mobile_image', required=False, allow_null=True)
    order = serializers.IntegerField(required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)
    startDate = serializers.DateTimeField(source='start_date', required=False, allow_null=True)
    endDate = serializers.DateTimeField(source='end_date', required=False, allow_null=True)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'endDate': 'End date must be after start date'})

        # the admin form sends the mobile variant inside ``image``
        image = attrs.get('image')
        if image is not None and 'mobile_url' in image:
            mobile_url = image.pop('mobile_url')
            if mobile_url:
                attrs['mobile_image'] = {'url': mobile_url, 'thumbnail_url': mobile_url}
            else:
                attrs['mobile_image'] = None
        return attrs


class BannerPatchSerializer(serializers.Serializer):
    """Partial update payload: activation, order and schedule only"""
    isActive = serializers.BooleanField(source='is_active', required=False)
    order = serializers.IntegerField(required=False)
    startDate = serializers.DateTimeField(source='start_date', required=False, allow_null=True)
    endDate = serializers.DateTimeField(source='end_date', required=False, allow_null=True)


class BannerValidateSerializer(BannerWriteSerializer):
    id = serializers.IntegerField(required=False, allow_null=True)


class CtaPreviewSerializer(serializers.Serializer):
    contentType = serializers.ChoiceField(source='content_type', choices=CONTENT_TYPE_CHOICES)
    productId = serializers.IntegerField(source='product_id', required=False, allow_null=True)
    categoryId = serializers.IntegerField(source='category_id', required=False, allow_null=True)


class BannerReorderSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)


class BannerAdminSerializer(serializers.ModelSerializer):
    """Stored banner as shown to admins"""
    contentType = serializers.CharField(source='content_type', read_only=True)
    sourceType = serializers.CharField(source='source_type', read_only=True)
    content = serializers.SerializerMethodField()
    image = serializers.SerializerMethodField()
    mobileImage = serializers.SerializerMethodField()
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    startDate = serializers.DateTimeField(source='start_date', read_only=True)
    endDate = serializers.DateTimeField(source='end_date', read_only=True)
    status = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Banner
        fields = [
            'id', 'name', 'contentType', 'sourceType', 'content', 'image', 'mobileImage',
            'order', 'isActive', 'startDate', 'endDate', 'status', 'clicks', 'impressions',
            'createdAt', 'updatedAt',
        ]

    def get_content(self, obj):
        return BannerContentSerializer(obj.parsed_content).data

    def get_image(self, obj):
        return BannerImageSerializer(obj.image or {}).data

    def get_mobileImage(self, obj):
        if not obj.mobile_image:
            return None
        return BannerImageSerializer(obj.mobile_image).data

    def get_status(self, obj):
        now = self.context.get('now')
        if now is None:
            return None
        return obj.status(now)
