"""Posting, liking, listing and deleting wishes."""

import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import Count, Exists, OuterRef
from django.utils import timezone

from apps.accounts.models import Role
from apps.accounts.services import AccountNotApprovedError, AccountNotFoundError
from apps.ledger.store import ledger_store
from apps.ledger.transactions import ledger_transaction
from apps.redemptions.services import GuestForbiddenError

from ..models import Wish, WishLike
from .cooldown import cooldown_status
from .exceptions import CooldownActiveError, WishDeleteForbiddenError, WishNotFoundError

logger = logging.getLogger(__name__)

Account = get_user_model()


def list_wishes(*, viewer=None):
    """Newest first, annotated with ``like_count`` and ``liked_by_me``."""
    queryset = Wish.objects.annotate(like_count=Count('likes', distinct=True))
    if viewer is not None:
        queryset = queryset.annotate(
            liked_by_me=Exists(WishLike.objects.filter(wish=OuterRef('pk'), account=viewer))
        )
    return queryset.order_by('-created_at')


def get_wish(*, wish_id: UUID, viewer=None) -> Wish:
    try:
        return list_wishes(viewer=viewer).get(id=wish_id)
    except (Wish.DoesNotExist, DjangoValidationError, ValueError):
        raise WishNotFoundError()


@ledger_transaction
def post_wish(*, account_id: UUID, item_name: str, description: str = '', now=None) -> Wish:
    """
    Post a new wish.

    The account row is locked so two posts from one account serialize and
    the second one sees the first one's cooldown.

    Raises:
        AccountNotFoundError: If account does not exist
        GuestForbiddenError: If the account is the guest account
        AccountNotApprovedError: If the student is not approved
        CooldownActiveError: If the cooldown window is still running
    """
    now = now or timezone.now()

    try:
        account = Account.objects.select_for_update().get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if account.role == Role.GUEST:
        raise GuestForbiddenError()
    if account.role == Role.STUDENT and not account.is_approved:
        raise AccountNotApprovedError()

    status = cooldown_status(account=account, now=now)
    if status.on_cooldown:
        raise CooldownActiveError(
            f'You can post another wish on {timezone.localtime(status.available_at):%Y-%m-%d %H:%M}.'
        )

    wish = Wish.objects.create(
        account=account,
        account_name=account.name,
        account_avatar=account.avatar,
        item_name=item_name,
        description=description,
        created_at=now,
    )
    logger.info('%s wished for %s', account.name, item_name)
    return wish


def like_wish(*, wish_id: UUID, account) -> tuple[Wish, bool]:
    """
    Like a wish once per account.

    Returns:
        (wish, changed); ``changed`` is False if the account already liked it

    Raises:
        GuestForbiddenError: If the account is the guest account
        WishNotFoundError: If wish does not exist
    """
    if account.role == Role.GUEST:
        raise GuestForbiddenError()

    wish = get_wish(wish_id=wish_id)
    try:
        with transaction.atomic():
            _, created = WishLike.objects.get_or_create(wish=wish, account=account)
    except IntegrityError:
        # A concurrent like from the same account won the insert
        created = False

    if created:
        ledger_store.touch('wishes')
    return get_wish(wish_id=wish_id, viewer=account), created


def delete_wish(*, wish_id: UUID, actor) -> None:
    """
    Delete a wish. Only its owner or the admin may do so.

    Raises:
        WishNotFoundError: If wish does not exist
        WishDeleteForbiddenError: If the actor is neither owner nor admin
    """
    try:
        wish = Wish.objects.get(id=wish_id)
    except (Wish.DoesNotExist, DjangoValidationError, ValueError):
        raise WishNotFoundError()

    if actor.role != Role.ADMIN and wish.account_id != actor.id:
        raise WishDeleteForbiddenError()

    ledger_store.delete('wishes', wish.id)
    logger.info('Deleted wish %s (%s)', wish.item_name, wish.id)
