"""
Test configuration for the storefront banner server.
"""
import os
from datetime import timedelta

import django
import pytest


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'storefront_server.settings.test')
    os.environ.setdefault('ENVIRONMENT', 'test')
    django.setup()


@pytest.fixture
def now():
    """Fixed reference instant, truncated to whole seconds"""
    from django.utils import timezone
    return timezone.now().replace(microsecond=0)


@pytest.fixture
def one_second():
    return timedelta(seconds=1)


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def admin_user():
    from tests.factories import AdminUserFactory
    return AdminUserFactory()


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as a staff user."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def sample_category():
    from tests.factories import CategoryFactory
    return CategoryFactory()


@pytest.fixture
def sample_product(sample_category):
    from tests.factories import ProductFactory
    return ProductFactory(category=sample_category)
