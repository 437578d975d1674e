from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import Account, Role
from apps.accounts.services import ensure_role_account
from apps.missions.models import Mission, MissionSubmission


def _client_for(account):
    client = APIClient()
    refresh = RefreshToken.for_user(account)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def student(db):
    return Account.objects.create_user(
        name='Alice',
        password='TestPass123!',
        is_approved=True,
    )


@pytest.fixture
def pending_student(db):
    return Account.objects.create_user(name='Bob', password='TestPass123!')


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
def guest_client(guest_account):
    return _client_for(guest_account)


@pytest.fixture
def admin_client(admin_account):
    return _client_for(admin_account)


@pytest.fixture
def mission(db):
    return Mission.objects.create(
        title='Finish the fractions worksheet',
        description='All twenty questions.',
        points=120,
    )


@pytest.fixture
def timed_mission(db):
    """Mission that closes in one hour."""
    return Mission.objects.create(
        title='Weekend essay',
        points=200,
        difficulty='challenge',
        deadline=timezone.now() + timedelta(hours=1),
    )


@pytest.fixture
def pending_submission(student, mission):
    return MissionSubmission.objects.create(
        account=student,
        account_name=student.name,
        mission=mission,
        mission_title=mission.title,
        points=mission.points,
    )
