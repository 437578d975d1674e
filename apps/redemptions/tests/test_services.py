"""
Service layer unit tests for redemptions app.

Tests cover:
- All-or-nothing spend-and-issue
- Voucher lifecycle transitions and idempotence
- Concurrency protection (no overselling)
"""

import re
import threading

import pytest
from django.db import connection
from django.test import TransactionTestCase

from apps.accounts.models import Account
from apps.accounts.services import AccountNotApprovedError
from apps.catalog.models import Product
from apps.redemptions.codes import generate_voucher_code, normalize_code, to_base36
from apps.redemptions.models import RedemptionVoucher, VoucherStatus
from apps.redemptions.services import (
    create_redemption,
    lookup_by_code,
    confirm_redemption,
    cancel_redemption,
    list_vouchers,
)
from apps.redemptions.services.exceptions import (
    InsufficientPointsError,
    OutOfStockError,
    GuestForbiddenError,
    VoucherNotFoundError,
    InvalidVoucherTransitionError,
)


# =============================================================================
# Voucher Code Tests
# =============================================================================

class TestVoucherCodes:

    def test_format(self):
        code = generate_voucher_code('3f9c0000-0000-4000-8000-000000000000', now_ms=36 ** 3)

        assert re.fullmatch(r'RDM-1000-3F9C-[A-HJKMNP-Z2-9]{4}', code)

    def test_base36(self):
        assert to_base36(0) == '0'
        assert to_base36(35) == 'Z'
        assert to_base36(36) == '10'

    def test_normalize_manual_entry(self):
        assert normalize_code(' rdm-1000-3f9c-k7px ') == 'RDM-1000-3F9C-K7PX'


# =============================================================================
# Redemption Creation Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateRedemption:

    def test_redeem_last_unit_with_exact_balance(self, student, last_unit):
        receipt = create_redemption(account_id=student.id, product_id=last_unit.id)

        assert receipt.balance == 0
        assert receipt.stock == 0
        assert receipt.voucher.status == VoucherStatus.PENDING
        assert receipt.voucher.points_spent == 100
        assert receipt.voucher.code.startswith('RDM-')

        student.refresh_from_db()
        assert student.balance == 0
        assert student.total_earned == 100

    def test_second_redemption_is_out_of_stock(self, student, other_student, last_unit):
        create_redemption(account_id=student.id, product_id=last_unit.id)

        with pytest.raises(OutOfStockError):
            create_redemption(account_id=other_student.id, product_id=last_unit.id)

        other_student.refresh_from_db()
        assert other_student.balance == 500
        assert RedemptionVoucher.objects.count() == 1

    def test_insufficient_points_changes_nothing(self, student):
        product = Product.objects.create(name='Headphones', price=2500, stock=5)

        with pytest.raises(InsufficientPointsError):
            create_redemption(account_id=student.id, product_id=product.id)

        product.refresh_from_db()
        student.refresh_from_db()
        assert product.stock == 5
        assert student.balance == 100
        assert not RedemptionVoucher.objects.exists()

    def test_guest_is_forbidden(self, guest_account, last_unit):
        with pytest.raises(GuestForbiddenError):
            create_redemption(account_id=guest_account.id, product_id=last_unit.id)

        last_unit.refresh_from_db()
        assert last_unit.stock == 1

    def test_unapproved_student_cannot_redeem(self, last_unit):
        pending = Account.objects.create_user(name='Pending', password='x', balance=1000)

        with pytest.raises(AccountNotApprovedError):
            create_redemption(account_id=pending.id, product_id=last_unit.id)

    def test_price_snapshot_survives_price_change(self, other_student, last_unit):
        receipt = create_redemption(account_id=other_student.id, product_id=last_unit.id)
        Product.objects.filter(id=last_unit.id).update(price=999, name='Renamed')

        voucher = RedemptionVoucher.objects.get(id=receipt.voucher.id)
        assert voucher.points_spent == 100
        assert voucher.product_name == 'Bubble Tea'


# =============================================================================
# Voucher Lifecycle Tests
# =============================================================================

@pytest.mark.django_db
class TestVoucherLifecycle:

    def test_lookup_pending(self, pending_voucher):
        voucher = lookup_by_code(code='rdm-lz4k2q1a-3f9c-k7px')

        assert voucher.id == pending_voucher.id

    def test_lookup_resolved_is_not_found(self, pending_voucher):
        confirm_redemption(voucher_id=pending_voucher.id)

        with pytest.raises(VoucherNotFoundError):
            lookup_by_code(code=pending_voucher.code)

    def test_confirm_twice_is_idempotent(self, pending_voucher, student, last_unit):
        voucher, changed = confirm_redemption(voucher_id=pending_voucher.id)
        assert changed is True
        assert voucher.status == VoucherStatus.COMPLETED
        assert voucher.resolved_at is not None

        voucher, changed = confirm_redemption(voucher_id=pending_voucher.id)
        assert changed is False

        student.refresh_from_db()
        last_unit.refresh_from_db()
        assert student.balance == 100
        assert last_unit.stock == 1

    def test_cancelled_cannot_be_confirmed(self, pending_voucher):
        cancel_redemption(voucher_id=pending_voucher.id)

        with pytest.raises(InvalidVoucherTransitionError):
            confirm_redemption(voucher_id=pending_voucher.id)

    def test_completed_cannot_be_cancelled(self, pending_voucher):
        confirm_redemption(voucher_id=pending_voucher.id)

        with pytest.raises(InvalidVoucherTransitionError):
            cancel_redemption(voucher_id=pending_voucher.id)

    def test_cancel_keeps_points_by_default(self, pending_voucher, student, last_unit):
        voucher, changed = cancel_redemption(voucher_id=pending_voucher.id)

        assert changed is True
        assert voucher.status == VoucherStatus.CANCELLED
        student.refresh_from_db()
        last_unit.refresh_from_db()
        assert student.balance == 100
        assert last_unit.stock == 1

    def test_cancel_refunds_when_enabled(self, settings, pending_voucher, student, last_unit):
        settings.REDEMPTION_REFUND_ON_CANCEL = True

        cancel_redemption(voucher_id=pending_voucher.id)

        student.refresh_from_db()
        last_unit.refresh_from_db()
        assert student.balance == 200
        assert student.total_earned == 100
        assert last_unit.stock == 2

    def test_cancel_by_other_student_is_not_found(self, pending_voucher, other_student):
        with pytest.raises(VoucherNotFoundError):
            cancel_redemption(voucher_id=pending_voucher.id, actor=other_student)

    def test_list_vouchers_scoped_to_owner(self, pending_voucher, other_student, admin_account):
        assert list(list_vouchers(account=other_student)) == []
        assert list(list_vouchers(account=admin_account, search='bubble')) == [pending_voucher]
        assert list(list_vouchers(account=admin_account, search=str(pending_voucher.id))) == [pending_voucher]


# =============================================================================
# Concurrency Tests
# =============================================================================

class TestConcurrentRedemption(TransactionTestCase):
    """
    Concurrent redemptions against real transactions.

    TransactionTestCase is required: regular TestCase wraps each test in a
    transaction, which hides the races being tested.
    """

    def setUp(self):
        self.product = Product.objects.create(name='Smartphone', price=100, stock=1)
        self.accounts = [
            Account.objects.create_user(
                name=f'Student {i}',
                password='TestPass123!',
                is_approved=True,
                balance=500,
                total_earned=500,
            )
            for i in range(5)
        ]

    def test_last_unit_sold_exactly_once(self):
        """N buyers racing for stock=1 yield one voucher and N-1 sold-out errors."""
        results = []
        errors = []
        barrier = threading.Barrier(len(self.accounts))

        def redeem(account):
            try:
                barrier.wait()
                results.append(create_redemption(account_id=account.id, product_id=self.product.id))
            except OutOfStockError:
                errors.append('out_of_stock')
            except Exception as e:
                errors.append(f'Unexpected error: {e!r}')
            finally:
                connection.close()

        threads = [threading.Thread(target=redeem, args=(account,)) for account in self.accounts]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 1, f'Expected 1 success, got {len(results)}: {errors}'
        assert errors == ['out_of_stock'] * 4

        self.product.refresh_from_db()
        assert self.product.stock == 0
        assert RedemptionVoucher.objects.count() == 1

        balances = sorted(Account.objects.filter(name__startswith='Student').values_list('balance', flat=True))
        assert balances == [400, 500, 500, 500, 500]

    def test_one_account_cannot_overspend(self):
        """Concurrent redemptions by one account never push the balance below zero."""
        Product.objects.filter(id=self.product.id).update(stock=10)
        buyer = self.accounts[0]
        Account.objects.filter(id=buyer.id).update(balance=250)
        outcomes = []
        barrier = threading.Barrier(4)

        def redeem():
            try:
                barrier.wait()
                create_redemption(account_id=buyer.id, product_id=self.product.id)
                outcomes.append('ok')
            except InsufficientPointsError:
                outcomes.append('insufficient')
            except Exception as e:
                outcomes.append(f'Unexpected error: {e!r}')
            finally:
                connection.close()

        threads = [threading.Thread(target=redeem) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(outcomes) == ['insufficient', 'insufficient', 'ok', 'ok']
        buyer.refresh_from_db()
        assert buyer.balance == 50
        self.product.refresh_from_db()
        assert self.product.stock == 8
