import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role
from apps.accounts.services import ensure_role_account
from apps.catalog.models import Product, ProductCategory, Banner


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def student(db):
    return Account.objects.create_user(name='Alice', password='TestPass123!', is_approved=True)


@pytest.fixture
def student_client(student):
    return _client_for(student)


@pytest.fixture
def admin_client(db):
    return _client_for(ensure_role_account(Role.ADMIN))


@pytest.fixture
def cookie_box(db):
    return Product.objects.create(name='Cookie Box', category='food', price=150, stock=12)


@pytest.fixture
def headphones(db):
    return Product.objects.create(name='Headphones', category='electronic', price=2500, stock=5)


@pytest.fixture
def food_category(db):
    return ProductCategory.objects.create(name='food')


@pytest.fixture
def banner(db):
    return Banner.objects.create(image_url='https://example.com/banner.jpg')
