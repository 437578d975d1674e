"""Account authentication service."""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from django.utils.crypto import constant_time_compare

from ..models import Role
from .exceptions import (
    AccountNotApprovedError,
    AccountNotFoundError,
    InvalidCredentialError,
)
from .registration import ensure_role_account

Account = get_user_model()


@transaction.atomic
def authenticate_account(*, name: str, password: str) -> Account:
    """
    Authenticate a student with name and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Raises:
        AccountNotFoundError: If no account has this name
        InvalidCredentialError: If the password does not match
        AccountNotApprovedError: If the student is still pending approval
    """
    try:
        account = (
            Account.objects
            .select_for_update()
            .get(name=name.strip(), role=Role.STUDENT)
        )
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if not account.check_password(password):
        raise InvalidCredentialError()

    if not account.is_approved:
        raise AccountNotApprovedError()

    account.last_login = timezone.now()
    account.save(update_fields=['last_login'])

    return account


def authenticate_admin(*, password: str) -> Account:
    """Map the shared admin password onto the fixed ADMIN account."""
    if not constant_time_compare(password, settings.ADMIN_ACCESS_PASSWORD):
        raise InvalidCredentialError()
    return _touch_login(ensure_role_account(Role.ADMIN))


def authenticate_guest(*, code: str) -> Account:
    """Map the shared guest code (case-insensitive) onto the fixed GUEST account."""
    if code.strip().lower() != settings.GUEST_ACCESS_CODE.lower():
        raise InvalidCredentialError()
    return _touch_login(ensure_role_account(Role.GUEST))


def _touch_login(account):
    account.last_login = timezone.now()
    account.save(update_fields=['last_login'])
    return account
