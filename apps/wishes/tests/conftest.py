import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role
from apps.accounts.services import ensure_role_account
from apps.wishes.models import Wish


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def student(db):
    """Approved student with enough points for one cooldown reset."""
    return Account.objects.create_user(
        name='Alice',
        password='TestPass123!',
        is_approved=True,
        balance=1500,
        total_earned=1500,
    )


@pytest.fixture
def other_student(db):
    return Account.objects.create_user(name='Bob', password='TestPass123!', is_approved=True)


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
def wish(student):
    return Wish.objects.create(
        account=student,
        account_name=student.name,
        account_avatar=student.avatar,
        item_name='Board games',
        description='For rainy Fridays.',
    )
