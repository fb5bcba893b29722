"""
Test factories for creating test data using factory_boy.
"""
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from factory import Faker, SubFactory
from factory.django import DjangoModelFactory

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"testuser{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    is_active = True


class AdminUserFactory(UserFactory):
    """Staff user allowed through the admin banner endpoints."""
    username = factory.Sequence(lambda n: f"admin{n}")
    is_staff = True


class CategoryFactory(DjangoModelFactory):
    """Factory for creating test categories."""

    class Meta:
        model = 'products.Category'
        django_get_or_create = ('slug',)

    name = factory.Sequence(lambda n: f"Category {n}")
    slug = factory.Sequence(lambda n: f"category-{n}")
    image_url = factory.LazyAttribute(lambda obj: f"https://cdn.example.com/categories/{obj.slug}.jpg")
    is_active = True


class ProductFactory(DjangoModelFactory):
    """Factory for creating test products."""

    class Meta:
        model = 'products.Product'

    name = factory.Sequence(lambda n: f"Product {n}")
    slug = factory.Sequence(lambda n: f"product-{n}")
    description = Faker('text', max_nb_chars=200)
    category = SubFactory(CategoryFactory)
    retail_price = Decimal('1000.00')
    wholesale_price = Decimal('0')
    discount = 0
    effective_price = None
    is_active = True


class ProductImageFactory(DjangoModelFactory):
    """Factory for creating product images."""

    class Meta:
        model = 'products.ProductImage'

    product = SubFactory(ProductFactory)
    image_url = factory.Sequence(lambda n: f"https://cdn.example.com/products/{n}.jpg")
    thumbnail_url = factory.LazyAttribute(lambda obj: obj.image_url.replace('.jpg', '_thumb.jpg'))
    is_thumbnail = False
    order = 0


class BannerFactory(DjangoModelFactory):
    """Factory for creating hero banners; active and unscheduled unless overridden."""

    class Meta:
        model = 'banners.Banner'

    name = factory.Sequence(lambda n: f"Banner {n}")
    content_type = 'custom'
    source_type = 'manual'
    content = factory.LazyFunction(lambda: {'title': 'Summer Sale', 'cta_text': 'Shop Now', 'cta_link': ''})
    image = factory.Sequence(lambda n: {'id': f"img{n}", 'url': f"https://cdn.example.com/banners/{n}.jpg"})
    mobile_image = None
    order = 0
    is_active = True
    start_date = None
    end_date = None


class AutoBannerFactory(BannerFactory):
    """Auto banner running a product strategy."""
    source_type = 'auto'
    content_type = 'trending'
    content = factory.LazyFunction(lambda: {'auto_config': {'limit': 5, 'period': 'week'}})


class AnalyticsEventFactory(DjangoModelFactory):
    """Factory for analytics events; product views by default."""

    class Meta:
        model = 'analytics.AnalyticsEvent'

    event_type = 'product_view'
    entity_type = 'product'
    entity_id = ''
    session_id = factory.Sequence(lambda n: f"session-{n}")
    ip = '127.0.0.1'


def record_views(product, count, **kwargs):
    """Create ``count`` product view events for ``product``."""
    return AnalyticsEventFactory.create_batch(count, entity_id=str(product.pk), **kwargs)
