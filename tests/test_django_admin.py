"""
Django admin tests: the banner change form and the banner/product actions.
"""
import json
from decimal import Decimal

import pytest
from django.contrib.messages import get_messages
from django.test import Client
from django.urls import reverse

from apps.banners.models import Banner
from tests.factories import AdminUserFactory, BannerFactory, ProductFactory

pytestmark = pytest.mark.django_db

IMAGE = {'url': 'https://cdn.example.com/banners/hero.jpg'}


@pytest.fixture
def site_client():
    """Django test client logged into the admin site as a superuser."""
    client = Client()
    client.force_login(AdminUserFactory(is_superuser=True))
    return client


def banner_form(**overrides):
    data = {
        'name': 'Chair promo',
        'content_type': 'custom',
        'source_type': 'manual',
        'content': '{}',
        'image': json.dumps(IMAGE),
        'mobile_image': '',
        'order': '0',
        'start_date_0': '',
        'start_date_1': '',
        'end_date_0': '',
        'end_date_1': '',
    }
    data.update(overrides)
    return data


def run_action(client, changelist, action, objects):
    return client.post(reverse(changelist), {
        'action': action,
        '_selected_action': [obj.pk for obj in objects],
    })


def flashed(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


class TestBannerChangeForm:

    def test_add_form_rejects_invalid_activation(self, site_client):
        response = site_client.post(reverse('admin:banners_banner_add'), banner_form(
            name='', content_type='product', content='{}', image='{}', is_active='on',
        ))

        assert response.status_code == 200
        body = response.content.decode()
        assert 'Banner name is required' in body
        assert 'Banner image is required' in body
        assert 'Product banners must reference a product' in body
        assert not Banner.objects.filter(is_active=True).exists()

    def test_add_form_saves_inactive_draft(self, site_client):
        response = site_client.post(reverse('admin:banners_banner_add'), banner_form(name='', image='{}'))

        assert response.status_code == 302
        banner = Banner.objects.get()
        assert banner.is_active is False
        assert banner.image == {}

    def test_add_form_activates_and_syncs_discount(self, site_client):
        product = ProductFactory(retail_price=Decimal('1000'))
        content = {'product_id': product.id, 'discount_percent': 20}

        response = site_client.post(reverse('admin:banners_banner_add'), banner_form(
            content_type='product', content=json.dumps(content), is_active='on',
        ))

        assert response.status_code == 302
        banner = Banner.objects.get()
        assert banner.is_active is True
        assert banner.content['cta_link'] == f'/products/{product.slug}'
        product.refresh_from_db()
        assert product.effective_price == Decimal('800')

    def test_change_form_keeps_failing_banner_inactive(self, site_client):
        banner = BannerFactory(is_active=False, image={})

        response = site_client.post(
            reverse('admin:banners_banner_change', args=[banner.pk]),
            banner_form(name=banner.name, image='{}', is_active='on'),
        )

        assert response.status_code == 200
        assert 'Banner image is required' in response.content.decode()
        assert Banner.objects.get(pk=banner.pk).is_active is False

    def test_change_form_rederives_link_for_new_product(self, site_client):
        first, second = ProductFactory(), ProductFactory()
        banner = BannerFactory(
            content_type='product',
            content={'product_id': first.id, 'cta_link': f'/products/{first.slug}'},
        )
        content = {'product_id': second.id, 'cta_link': f'/products/{first.slug}'}

        response = site_client.post(
            reverse('admin:banners_banner_change', args=[banner.pk]),
            banner_form(name=banner.name, content_type='product', content=json.dumps(content), is_active='on'),
        )

        assert response.status_code == 302
        assert Banner.objects.get(pk=banner.pk).content['cta_link'] == f'/products/{second.slug}'


class TestBannerActions:

    def test_activate_reports_violations_and_skips_failing_banners(self, site_client):
        valid = BannerFactory(is_active=False)
        invalid = BannerFactory(is_active=False, image={})

        response = run_action(site_client, 'admin:banners_banner_changelist', 'activate_banners', [valid, invalid])

        assert response.status_code == 302
        assert Banner.objects.get(pk=valid.pk).is_active is True
        assert Banner.objects.get(pk=invalid.pk).is_active is False
        messages = flashed(response)
        assert f'{invalid}: Banner image is required' in messages
        assert 'Activated 1 banner(s)' in messages

    def test_activate_syncs_product_discount(self, site_client):
        product = ProductFactory(retail_price=Decimal('1000'))
        banner = BannerFactory(
            is_active=False, content_type='product',
            content={'product_id': product.id, 'discount_percent': 10},
        )

        run_action(site_client, 'admin:banners_banner_changelist', 'activate_banners', [banner])

        product.refresh_from_db()
        assert product.discount == 10
        assert product.effective_price == Decimal('900')

    def test_deactivate(self, site_client):
        banners = BannerFactory.create_batch(2)
        untouched = BannerFactory()

        response = run_action(site_client, 'admin:banners_banner_changelist', 'deactivate_banners', banners)

        assert not Banner.objects.filter(pk__in=[b.pk for b in banners], is_active=True).exists()
        assert Banner.objects.get(pk=untouched.pk).is_active is True
        assert 'Deactivated 2 banner(s)' in flashed(response)


class TestProductActions:

    def test_recalculate_prices_from_stored_discount(self, site_client):
        product = ProductFactory(retail_price=Decimal('1000'), discount=20)

        response = run_action(site_client, 'admin:products_product_changelist', 'recalculate_prices', [product])

        product.refresh_from_db()
        assert product.effective_price == Decimal('800')
        assert product.wholesale_price == Decimal('560')
        assert '1 products repriced.' in flashed(response)

    def test_clear_discount_keeps_wholesale(self, site_client):
        product = ProductFactory(
            retail_price=Decimal('1000'), discount=20,
            effective_price=Decimal('800'), wholesale_price=Decimal('560'),
        )

        response = run_action(site_client, 'admin:products_product_changelist', 'clear_discount', [product])

        product.refresh_from_db()
        assert product.discount == 0
        assert product.effective_price == Decimal('1000')
        assert product.wholesale_price == Decimal('560')
        assert '1 products had their discount removed.' in flashed(response)
