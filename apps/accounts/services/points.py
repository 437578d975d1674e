"""
Point balance mutations.

Balances are only ever changed through conditional ``UPDATE`` statements so
concurrent writers cannot lose each other's changes or push a balance below
zero. ``QuerySet.update()`` skips model signals, so every write here reports
itself to the ledger store with ``touch``.
"""

import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db.models import F

from apps.ledger.exceptions import PreconditionFailedError
from apps.ledger.store import ledger_store
from apps.ledger.transactions import ledger_transaction

from ..models import Role
from .exceptions import AccountNotFoundError, InvalidPointAmountError

logger = logging.getLogger(__name__)

Account = get_user_model()


def credit_account(account_id: UUID, amount: int) -> None:
    """
    Add ``amount`` to both the balance and the lifetime total.

    Raises:
        AccountNotFoundError: If no row was updated
    """
    updated = Account.objects.filter(id=account_id).update(
        balance=F('balance') + amount,
        total_earned=F('total_earned') + amount,
    )
    if not updated:
        raise AccountNotFoundError()
    ledger_store.touch('accounts')


def debit_account(account_id: UUID, amount: int) -> bool:
    """
    Subtract ``amount`` from the balance only if it covers it.

    The lifetime total is never reduced by spending.

    Returns:
        True if the balance was debited, False if it was too low
    """
    updated = Account.objects.filter(id=account_id, balance__gte=amount).update(
        balance=F('balance') - amount,
    )
    if updated:
        ledger_store.touch('accounts')
    return bool(updated)


@ledger_transaction
def grant_points(*, account_id: UUID, amount, reason: str = '') -> Account:
    """
    Manually award points to a student.

    ``reason`` is free text kept in the log only; it is not checked against
    the point reason catalog.

    Raises:
        InvalidPointAmountError: If amount is not a positive integer
        AccountNotFoundError: If account does not exist
        PreconditionFailedError: If the account is not a student
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidPointAmountError()

    try:
        account = Account.objects.select_for_update().get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if account.role != Role.STUDENT:
        raise PreconditionFailedError('Points can only be granted to students.')

    credit_account(account.id, amount)
    account.refresh_from_db(fields=['balance', 'total_earned'])

    logger.info(
        'Granted %d points to %s (%s): %s',
        amount, account.name, account.id, reason or 'no reason given',
    )
    return account
