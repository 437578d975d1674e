"""
Rolling wish cooldown.

An account may post one wish per ``WISH_COOLDOWN_DAYS``, counted from its
most recent wish. Paying ``WISH_COOLDOWN_RESET_COST`` stamps that wish as
waived, which ends the window early.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.accounts.models import Role
from apps.accounts.services import AccountNotFoundError, debit_account
from apps.ledger.transactions import ledger_transaction
from apps.redemptions.services import GuestForbiddenError, InsufficientPointsError

from ..models import Wish
from .exceptions import NoActiveCooldownError

logger = logging.getLogger(__name__)

Account = get_user_model()


@dataclass(frozen=True)
class CooldownStatus:
    on_cooldown: bool
    available_at: Optional[datetime]
    remaining_seconds: int


def latest_wish(account) -> Optional[Wish]:
    return Wish.objects.filter(account=account).order_by('-created_at').first()


def cooldown_status(*, account, now=None) -> CooldownStatus:
    now = now or timezone.now()
    wish = latest_wish(account)
    if wish is None or wish.cooldown_waived_at is not None:
        return CooldownStatus(on_cooldown=False, available_at=None, remaining_seconds=0)

    available_at = wish.created_at + timedelta(days=settings.WISH_COOLDOWN_DAYS)
    if now >= available_at:
        return CooldownStatus(on_cooldown=False, available_at=available_at, remaining_seconds=0)

    remaining = int((available_at - now).total_seconds())
    return CooldownStatus(on_cooldown=True, available_at=available_at, remaining_seconds=remaining)


@ledger_transaction
def reset_cooldown(*, account_id: UUID, now=None):
    """
    Spend points to end the running cooldown.

    The balance is debited; lifetime points are not.

    Returns:
        The account with its fresh balance

    Raises:
        AccountNotFoundError: If account does not exist
        GuestForbiddenError: If the account is the guest account
        NoActiveCooldownError: If no cooldown is running
        InsufficientPointsError: If balance < the reset cost
    """
    now = now or timezone.now()
    cost = settings.WISH_COOLDOWN_RESET_COST

    try:
        account = Account.objects.select_for_update().get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if account.role == Role.GUEST:
        raise GuestForbiddenError()

    if not cooldown_status(account=account, now=now).on_cooldown:
        raise NoActiveCooldownError()

    if not debit_account(account.id, cost):
        raise InsufficientPointsError(
            f'Not enough points: {cost} needed, {account.balance} available.'
        )

    wish = latest_wish(account)
    wish.cooldown_waived_at = now
    wish.save(update_fields=['cooldown_waived_at'])

    account.refresh_from_db(fields=['balance'])
    logger.info('%s paid %d points to reset the wish cooldown', account.name, cost)
    return account
