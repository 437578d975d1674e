"""Admin-side account management: approval, rejection, listing."""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.ledger.exceptions import PreconditionFailedError
from apps.ledger.store import ledger_store

from ..models import Role
from .exceptions import AccountNotFoundError

logger = logging.getLogger(__name__)

Account = get_user_model()


def get_account(*, account_id: UUID) -> Account:
    """Fetch a fresh copy of an account; never trust a cached one for decisions."""
    try:
        return Account.objects.get(id=account_id)
    except (Account.DoesNotExist, ValueError):
        raise AccountNotFoundError()


def list_students(*, approved: Optional[bool] = None):
    """Students ordered by name, optionally filtered by approval state."""
    queryset = Account.objects.filter(role=Role.STUDENT)
    if approved is not None:
        queryset = queryset.filter(is_approved=approved)
    return queryset.order_by('name')


@transaction.atomic
def approve_account(*, account_id: UUID) -> Account:
    """
    Approve a pending student registration.

    Approving an already approved account is a no-op.

    Raises:
        AccountNotFoundError: If account does not exist
        PreconditionFailedError: If the account is not a student
    """
    try:
        account = Account.objects.select_for_update().get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if account.role != Role.STUDENT:
        raise PreconditionFailedError('Only student accounts can be approved.')

    if not account.is_approved:
        account.is_approved = True
        account.save(update_fields=['is_approved'])
        logger.info('Approved student %s (%s)', account.name, account.id)

    return account


@transaction.atomic
def delete_account(*, account_id: UUID) -> None:
    """
    Hard-remove an account. Used to reject pending registrations.

    Raises:
        AccountNotFoundError: If account does not exist
        PreconditionFailedError: For the fixed role accounts
    """
    account = get_account(account_id=account_id)
    if account.role != Role.STUDENT:
        raise PreconditionFailedError('Role accounts cannot be removed.')

    ledger_store.delete('accounts', account.id)
    logger.info('Removed account %s (%s)', account.name, account_id)
