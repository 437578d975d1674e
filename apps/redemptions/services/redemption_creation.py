"""
Spend points on a product and issue a pending voucher.

The three effects (stock -1, balance -price, voucher created) form one unit
of work. Both decrements are conditional ``UPDATE`` statements, so two
buyers racing for the last unit cannot both succeed: the loser's update
matches no row and the whole unit rolls back with ``OutOfStockError``.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import F

from apps.accounts.models import Role
from apps.accounts.services import AccountNotApprovedError, AccountNotFoundError, debit_account
from apps.catalog.models import Product
from apps.catalog.services import ProductNotFoundError
from apps.ledger.exceptions import ConflictError
from apps.ledger.store import ledger_store
from apps.ledger.transactions import ledger_transaction

from ..codes import generate_voucher_code
from ..models import RedemptionVoucher, VoucherStatus
from .exceptions import GuestForbiddenError, InsufficientPointsError, OutOfStockError

logger = logging.getLogger(__name__)

Account = get_user_model()

CODE_ATTEMPTS = 5


@dataclass(frozen=True)
class RedemptionReceipt:
    """The issued voucher plus the balances the client should now display."""
    voucher: RedemptionVoucher
    balance: int
    stock: int


@ledger_transaction
def create_redemption(*, account_id: UUID, product_id: UUID) -> RedemptionReceipt:
    """
    Redeem one unit of a product.

    Args:
        account_id: The spending account
        product_id: The product to redeem

    Returns:
        RedemptionReceipt with the pending voucher and fresh balance/stock

    Raises:
        ProductNotFoundError: If product does not exist
        AccountNotFoundError: If account does not exist
        GuestForbiddenError: If the account is the guest account
        AccountNotApprovedError: If the student is not approved
        OutOfStockError: If stock is zero
        InsufficientPointsError: If balance < price
        ConflictError: If the unit kept conflicting with other writers
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError()

    try:
        account = Account.objects.select_for_update().get(id=account_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    if account.role == Role.GUEST:
        raise GuestForbiddenError()
    if account.role == Role.STUDENT and not account.is_approved:
        raise AccountNotApprovedError()

    price = product.price
    if product.stock <= 0:
        raise OutOfStockError()
    if account.balance < price:
        raise InsufficientPointsError(
            f'Not enough points: {price} needed, {account.balance} available.'
        )

    # Re-checked by the database: no row matches once stock hits zero
    taken = Product.objects.filter(id=product.id, stock__gt=0).update(stock=F('stock') - 1)
    if not taken:
        raise OutOfStockError()

    if not debit_account(account.id, price):
        raise InsufficientPointsError(
            f'Not enough points: {price} needed, {account.balance} available.'
        )

    ledger_store.touch('products')
    voucher = _issue_voucher(account=account, product=product, price=price)

    account.refresh_from_db(fields=['balance'])
    product.refresh_from_db(fields=['stock'])

    logger.info(
        'Redeemed %s for %d points by %s (%s): voucher %s',
        product.name, price, account.name, account.id, voucher.code,
    )
    return RedemptionReceipt(voucher=voucher, balance=account.balance, stock=product.stock)


def _issue_voucher(*, account, product, price):
    for _ in range(CODE_ATTEMPTS):
        code = generate_voucher_code(product.id)
        try:
            with transaction.atomic():
                return RedemptionVoucher.objects.create(
                    account=account,
                    product=product,
                    product_name=product.name,
                    points_spent=price,
                    status=VoucherStatus.PENDING,
                    code=code,
                )
        except IntegrityError:
            logger.warning('Voucher code collision on %s, regenerating', code)
    raise ConflictError('Could not allocate a unique voucher code.')
