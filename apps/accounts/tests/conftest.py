import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role, PointReason
from apps.accounts.services import ensure_role_account


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def student(db):
    """Create and return an approved student."""
    return Account.objects.create_user(
        name='Alice',
        password='TestPass123!',
        grade='G7',
        is_approved=True,
    )


@pytest.fixture
def pending_student(db):
    """Create and return a student awaiting approval."""
    return Account.objects.create_user(
        name='Bob',
        password='TestPass123!',
        grade='G8',
    )


@pytest.fixture
def admin_account(db):
    return ensure_role_account(Role.ADMIN)


@pytest.fixture
def guest_account(db):
    return ensure_role_account(Role.GUEST)


@pytest.fixture
def point_reason(db):
    return PointReason.objects.create(title='Perfect homework')


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def student_client(student):
    """Return an API client authenticated as the student using JWT."""
    return _client_for(student)


@pytest.fixture
def admin_client(admin_account):
    """Return an API client authenticated as the admin using JWT."""
    return _client_for(admin_account)


@pytest.fixture
def guest_client(guest_account):
    return _client_for(guest_account)
