"""Voucher lookup and the pending -> completed | cancelled transitions."""

import logging
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import F, Q
from django.utils import timezone

from apps.accounts.models import Role
from apps.catalog.models import Product
from apps.ledger.store import ledger_store
from apps.ledger.transactions import ledger_transaction

from ..codes import normalize_code
from ..models import RedemptionVoucher, VoucherStatus
from .exceptions import InvalidVoucherTransitionError, VoucherNotFoundError

logger = logging.getLogger(__name__)

Account = get_user_model()


def list_vouchers(*, account, search: Optional[str] = None):
    """
    Vouchers visible to ``account``, newest first.

    The admin sees every voucher and may search by product name, code or
    voucher id; everyone else sees only their own.
    """
    queryset = RedemptionVoucher.objects.select_related('account')
    if account.role != Role.ADMIN:
        return queryset.filter(account=account)

    if search:
        search = search.strip()
        condition = Q(product_name__icontains=search) | Q(code__icontains=search)
        try:
            condition |= Q(id=UUID(search))
        except ValueError:
            pass
        queryset = queryset.filter(condition)
    return queryset


def lookup_by_code(*, code: str) -> RedemptionVoucher:
    """
    Resolve a scanned or typed code to a pending voucher.

    Raises:
        VoucherNotFoundError: If no voucher matches, or it is already resolved
    """
    voucher = (
        RedemptionVoucher.objects
        .select_related('account')
        .filter(code=normalize_code(code), status=VoucherStatus.PENDING)
        .first()
    )
    if voucher is None:
        raise VoucherNotFoundError()
    return voucher


@ledger_transaction
def confirm_redemption(*, voucher_id: UUID) -> tuple[RedemptionVoucher, bool]:
    """
    Mark a pending voucher as handed out.

    Stock was taken at redemption time, so confirming moves no points and
    no stock. Confirming a completed voucher again changes nothing.

    Returns:
        (voucher, changed)

    Raises:
        VoucherNotFoundError: If voucher does not exist
        InvalidVoucherTransitionError: If the voucher was cancelled
    """
    voucher = _lock_voucher(voucher_id)

    if voucher.status == VoucherStatus.COMPLETED:
        return voucher, False
    if voucher.status == VoucherStatus.CANCELLED:
        raise InvalidVoucherTransitionError('A cancelled voucher cannot be confirmed.')

    voucher.status = VoucherStatus.COMPLETED
    voucher.resolved_at = timezone.now()
    voucher.save(update_fields=['status', 'resolved_at'])

    logger.info('Confirmed voucher %s (%s)', voucher.code, voucher.product_name)
    return voucher, True


@ledger_transaction
def cancel_redemption(*, voucher_id: UUID, actor=None) -> tuple[RedemptionVoucher, bool]:
    """
    Cancel a pending voucher.

    Points and stock are returned only when ``REDEMPTION_REFUND_ON_CANCEL``
    is enabled; by default a cancelled voucher keeps both.

    Args:
        voucher_id: The voucher to cancel
        actor: Requesting account; must be the admin or the voucher owner

    Returns:
        (voucher, changed)

    Raises:
        VoucherNotFoundError: If voucher does not exist or is not the actor's
        InvalidVoucherTransitionError: If the voucher was completed
    """
    voucher = _lock_voucher(voucher_id)

    if actor is not None and actor.role != Role.ADMIN and voucher.account_id != actor.id:
        raise VoucherNotFoundError()

    if voucher.status == VoucherStatus.CANCELLED:
        return voucher, False
    if voucher.status == VoucherStatus.COMPLETED:
        raise InvalidVoucherTransitionError('A completed voucher cannot be cancelled.')

    voucher.status = VoucherStatus.CANCELLED
    voucher.resolved_at = timezone.now()
    voucher.save(update_fields=['status', 'resolved_at'])

    if settings.REDEMPTION_REFUND_ON_CANCEL:
        _refund(voucher)

    logger.info('Cancelled voucher %s (%s)', voucher.code, voucher.product_name)
    return voucher, True


def _refund(voucher):
    # Spending never reduced total_earned, so the refund only restores balance
    Account.objects.filter(id=voucher.account_id).update(balance=F('balance') + voucher.points_spent)
    ledger_store.touch('accounts')

    if voucher.product_id is not None:
        Product.objects.filter(id=voucher.product_id).update(stock=F('stock') + 1)
        ledger_store.touch('products')

    logger.info('Refunded %d points for voucher %s', voucher.points_spent, voucher.code)


def _lock_voucher(voucher_id):
    try:
        return RedemptionVoucher.objects.select_for_update().get(id=voucher_id)
    except (RedemptionVoucher.DoesNotExist, DjangoValidationError, ValueError):
        raise VoucherNotFoundError()
