import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role
from apps.accounts.services import ensure_role_account
from apps.catalog.models import Product
from apps.redemptions.models import RedemptionVoucher, VoucherStatus


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def student(db):
    """Approved student with 100 points."""
    return Account.objects.create_user(
        name='Alice',
        password='TestPass123!',
        is_approved=True,
        balance=100,
        total_earned=100,
    )


@pytest.fixture
def other_student(db):
    return Account.objects.create_user(
        name='Bob',
        password='TestPass123!',
        is_approved=True,
        balance=500,
        total_earned=500,
    )


@pytest.fixture
def guest_account(db):
    return ensure_role_account(Role.GUEST)


@pytest.fixture
def admin_account(db):
    return ensure_role_account(Role.ADMIN)


@pytest.fixture
def student_client(student):
    return _client_for(student)


@pytest.fixture
def other_client(other_student):
    return _client_for(other_student)


@pytest.fixture
def guest_client(guest_account):
    return _client_for(guest_account)


@pytest.fixture
def admin_client(admin_account):
    return _client_for(admin_account)


@pytest.fixture
def last_unit(db):
    """Product priced 100 with a single unit left."""
    return Product.objects.create(name='Bubble Tea', category='food', price=100, stock=1)


@pytest.fixture
def pending_voucher(student, last_unit):
    return RedemptionVoucher.objects.create(
        account=student,
        product=last_unit,
        product_name=last_unit.name,
        points_spent=100,
        status=VoucherStatus.PENDING,
        code='RDM-LZ4K2Q1A-3F9C-K7PX',
    )
