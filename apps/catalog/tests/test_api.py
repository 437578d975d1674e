import pytest
from datetime import timedelta
from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.accounts.models import Account, Role
from apps.catalog.models import Product, ProductCategory, Banner


# =============================================================================
# Product Tests
# =============================================================================

@pytest.mark.django_db
class TestProducts:
    """Tests for /api/catalog/products/"""

    def test_list_requires_authentication(self, api_client):
        response = api_client.get(reverse('catalog:product-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_products(self, student_client, cookie_box, headphones):
        response = student_client.get(reverse('catalog:product-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [p['name'] for p in response.data] == ['Cookie Box', 'Headphones']

    def test_filter_by_category(self, student_client, cookie_box, headphones):
        response = student_client.get(reverse('catalog:product-list'), {'category': 'electronic'})

        assert [p['name'] for p in response.data] == ['Headphones']

    def test_admin_adds_product(self, admin_client):
        data = {'name': 'Cinema Ticket', 'category': 'ticket', 'price': 320, 'stock': 8}
        response = admin_client.post(reverse('catalog:product-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Product.objects.get(name='Cinema Ticket').stock == 8

    def test_student_cannot_add_product(self, student_client):
        data = {'name': 'Free Stuff', 'price': 1, 'stock': 100}
        response = student_client.post(reverse('catalog:product-list'), data, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Product.objects.exists()

    def test_zero_price_rejected(self, admin_client):
        data = {'name': 'Freebie', 'price': 0, 'stock': 1}
        response = admin_client.post(reverse('catalog:product-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_partial_update(self, admin_client, cookie_box):
        url = reverse('catalog:product-detail', args=[cookie_box.id])
        response = admin_client.patch(url, {'price': 175}, format='json')

        assert response.status_code == status.HTTP_200_OK
        cookie_box.refresh_from_db()
        assert cookie_box.price == 175
        assert cookie_box.name == 'Cookie Box'

    def test_delete_product(self, admin_client, cookie_box):
        url = reverse('catalog:product-detail', args=[cookie_box.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(id=cookie_box.id).exists()

    def test_delete_unknown_product(self, admin_client):
        url = reverse('catalog:product-detail', args=['00000000-0000-4000-8000-0000000000ff'])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'product_not_found'

    def test_set_stock_clamps_negative(self, admin_client, cookie_box):
        url = reverse('catalog:product-stock', args=[cookie_box.id])
        response = admin_client.post(url, {'stock': -3}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['stock'] == 0

    def test_set_stock_malformed_id(self, admin_client):
        url = reverse('catalog:product-stock', args=['not-a-uuid'])
        response = admin_client.post(url, {'stock': 3}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'product_not_found'

    def test_partial_update_malformed_id(self, admin_client):
        url = reverse('catalog:product-detail', args=['not-a-uuid'])
        response = admin_client.patch(url, {'price': 175}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'product_not_found'


# =============================================================================
# Category Tests
# =============================================================================

@pytest.mark.django_db
class TestCategories:
    """Tests for /api/catalog/categories/"""

    def test_add_category(self, admin_client):
        response = admin_client.post(reverse('catalog:category-list'), {'name': 'ticket'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert ProductCategory.objects.filter(name='ticket').exists()

    def test_duplicate_category(self, admin_client, food_category):
        response = admin_client.post(reverse('catalog:category-list'), {'name': 'Food'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'duplicate_category'

    def test_delete_category_keeps_product_label(self, admin_client, food_category, cookie_box):
        url = reverse('catalog:category-detail', args=[food_category.id])
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        cookie_box.refresh_from_db()
        assert cookie_box.category == 'food'


# =============================================================================
# Banner Tests
# =============================================================================

@pytest.mark.django_db
class TestBanners:
    """Tests for /api/catalog/banners/"""

    def test_add_banner_defaults(self, admin_client):
        data = {'image_url': 'https://example.com/new.jpg'}
        response = admin_client.post(reverse('catalog:banner-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['tag'] == 'Featured'
        assert response.data['active'] is True

    def test_list_active_newest_first(self, student_client, banner):
        Banner.objects.filter(id=banner.id).update(created_at=timezone.now() - timedelta(days=1))
        newer = Banner.objects.create(image_url='https://example.com/newer.jpg', tag='New')
        Banner.objects.create(image_url='https://example.com/off.jpg', active=False)

        response = student_client.get(reverse('catalog:banner-list'))

        assert [b['id'] for b in response.data] == [str(newer.id), str(banner.id)]

    def test_delete_banner(self, admin_client, banner):
        response = admin_client.delete(reverse('catalog:banner-detail', args=[banner.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Banner.objects.exists()


# =============================================================================
# Seed Command Tests
# =============================================================================

@pytest.mark.django_db
class TestSeedWorkshop:

    def test_seed_is_repeatable(self):
        call_command('seed_workshop')
        call_command('seed_workshop')

        assert Product.objects.count() == 6
        assert ProductCategory.objects.count() == 4
        assert Account.objects.filter(role__in=[Role.ADMIN, Role.GUEST]).count() == 2

    def test_dry_run_changes_nothing(self):
        call_command('seed_workshop', '--dry-run')

        assert not Product.objects.exists()
