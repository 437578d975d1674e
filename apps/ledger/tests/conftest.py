import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role
from apps.accounts.services import ensure_role_account
from apps.catalog.models import Product


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def student(db):
    return Account.objects.create_user(name='Alice', password='TestPass123!', is_approved=True)


@pytest.fixture
def admin_account(db):
    return ensure_role_account(Role.ADMIN)


@pytest.fixture
def student_client(student):
    return _client_for(student)


@pytest.fixture
def admin_client(admin_account):
    return _client_for(admin_account)


@pytest.fixture
def product(db):
    return Product.objects.create(name='Cinema Ticket', category='ticket', price=320, stock=8)
