"""
Product and category serializers for banner payloads.
"""
from rest_framework import serializers
from ..models import Product, ProductImage, Category


class ProductImageSerializer(serializers.ModelSerializer):
    url = serializers.CharField(source='image_url', read_only=True)
    thumbnailUrl = serializers.SerializerMethodField()
    isThumbnail = serializers.BooleanField(source='is_thumbnail', read_only=True)

    class Meta:
        model = ProductImage
        fields = ['id', 'url', 'thumbnailUrl', 'isThumbnail']

    def get_thumbnailUrl(self, obj):
        """Fall back to the full image when no thumbnail was generated"""
        return obj.thumbnail_url or obj.image_url


class CategorySummarySerializer(serializers.ModelSerializer):
    """Category reference embedded in product and banner payloads"""

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug']


class BannerCategorySerializer(serializers.ModelSerializer):
    """Category hydrated onto a category banner"""
    image = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'image']

    def get_image(self, obj):
        if not obj.image_url:
            return None
        return {'url': obj.image_url}


class BannerProductSerializer(serializers.ModelSerializer):
    """Product hydrated onto a banner, or listed in an auto banner"""
    prices = serializers.SerializerMethodField()
    thumbnail = serializers.SerializerMethodField()
    category = CategorySummarySerializer(read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'prices', 'thumbnail', 'category']

    def get_prices(self, obj):
        return {
            'retail': obj.retail_price,
            'wholesale': obj.wholesale_price,
            'discount': obj.discount,
            'effectivePrice': obj.effective_price if obj.effective_price is not None else obj.retail_price,
        }

    def get_thumbnail(self, obj):
        image = obj.thumbnail
        if image is None:
            return None
        return ProductImageSerializer(image, context=self.context).data
