"""Student registration and fixed role accounts."""

import logging
import uuid

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from ..models import Role
from .exceptions import DuplicateNameError

logger = logging.getLogger(__name__)

Account = get_user_model()

ROLE_ACCOUNTS = {
    Role.ADMIN: (uuid.UUID('00000000-0000-4000-8000-000000000001'), 'Workshop Admin'),
    Role.GUEST: (uuid.UUID('00000000-0000-4000-8000-000000000002'), 'Guest'),
}
RESERVED_NAMES = {name.casefold() for _, name in ROLE_ACCOUNTS.values()}


@transaction.atomic
def register_student(*, name: str, password: str, grade: str = '') -> Account:
    """
    Register a new, unapproved student with a zero balance.

    Args:
        name: Display name, unique among all accounts
        password: Raw password (will be hashed)
        grade: Optional grade label

    Returns:
        Created Account instance

    Raises:
        DuplicateNameError: If the name is taken or reserved
    """
    name = name.strip()
    if name.casefold() in RESERVED_NAMES or Account.objects.filter(name__iexact=name).exists():
        raise DuplicateNameError()

    try:
        with transaction.atomic():
            account = Account.objects.create_user(
                name=name,
                password=password,
                grade=grade,
                role=Role.STUDENT,
                is_approved=False,
            )
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        raise DuplicateNameError()

    logger.info('Registered student %s (%s), awaiting approval', account.name, account.id)
    return account


def ensure_role_account(role: str) -> Account:
    """Return the fixed singleton account for ``role``, creating it if needed."""
    account_id, name = ROLE_ACCOUNTS[role]
    account, created = Account.objects.get_or_create(
        id=account_id,
        defaults={
            'name': name,
            'role': role,
            'is_approved': True,
            'is_staff': role == Role.ADMIN,
        },
    )
    if created:
        account.set_unusable_password()
        account.save(update_fields=['password'])
        logger.info('Created %s role account', role)
    return account
