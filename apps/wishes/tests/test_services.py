"""
Service layer unit tests for wishes app.

Tests cover:
- Rolling cooldown and the paid reset
- Idempotent likes
- Delete permissions
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.accounts.services import AccountNotApprovedError
from apps.accounts.models import Account
from apps.redemptions.services import GuestForbiddenError, InsufficientPointsError
from apps.wishes.models import Wish, WishLike
from apps.wishes.services import (
    post_wish,
    like_wish,
    delete_wish,
    list_wishes,
    cooldown_status,
    reset_cooldown,
)
from apps.wishes.services.exceptions import (
    CooldownActiveError,
    NoActiveCooldownError,
    WishDeleteForbiddenError,
    WishNotFoundError,
)


# =============================================================================
# Cooldown Tests
# =============================================================================

@pytest.mark.django_db
class TestCooldown:

    def test_first_wish_has_no_cooldown(self, student):
        status = cooldown_status(account=student)

        assert status.on_cooldown is False
        assert status.available_at is None

    def test_post_reset_post_scenario(self, student):
        t = timezone.now()
        post_wish(account_id=student.id, item_name='Board games', now=t)

        with pytest.raises(CooldownActiveError):
            post_wish(account_id=student.id, item_name='Chess set', now=t + timedelta(days=10))

        account = reset_cooldown(account_id=student.id, now=t + timedelta(days=10))
        assert account.balance == 500

        post_wish(account_id=student.id, item_name='Chess set', now=t + timedelta(days=10))

        student.refresh_from_db()
        assert student.balance == 500
        assert student.total_earned == 1500
        assert Wish.objects.filter(account=student).count() == 2

    def test_window_expires_after_cooldown_days(self, settings, student):
        settings.WISH_COOLDOWN_DAYS = 30
        t = timezone.now()
        post_wish(account_id=student.id, item_name='Board games', now=t)

        status = cooldown_status(account=student, now=t + timedelta(days=29))
        assert status.on_cooldown is True
        assert status.remaining_seconds == 24 * 60 * 60

        wish = post_wish(account_id=student.id, item_name='Chess set', now=t + timedelta(days=30))
        assert wish.item_name == 'Chess set'

    def test_reset_without_cooldown(self, student):
        with pytest.raises(NoActiveCooldownError):
            reset_cooldown(account_id=student.id)

        student.refresh_from_db()
        assert student.balance == 1500

    def test_reset_needs_enough_points(self, other_student):
        post_wish(account_id=other_student.id, item_name='Telescope')

        with pytest.raises(InsufficientPointsError):
            reset_cooldown(account_id=other_student.id)

        assert cooldown_status(account=other_student).on_cooldown is True

    def test_guest_cannot_reset(self, guest_account):
        with pytest.raises(GuestForbiddenError):
            reset_cooldown(account_id=guest_account.id)


# =============================================================================
# Posting and Liking Tests
# =============================================================================

@pytest.mark.django_db
class TestWishBoard:

    def test_post_snapshots_account(self, student):
        wish = post_wish(account_id=student.id, item_name='Board games', description='Rainy days')

        assert wish.account_name == 'Alice'
        assert wish.account_avatar == student.avatar
        assert not wish.likes.exists()

    def test_guest_cannot_post(self, guest_account):
        with pytest.raises(GuestForbiddenError):
            post_wish(account_id=guest_account.id, item_name='Anything')

    def test_unapproved_cannot_post(self, db):
        pending = Account.objects.create_user(name='Dana', password='TestPass123!')

        with pytest.raises(AccountNotApprovedError):
            post_wish(account_id=pending.id, item_name='Anything')

    def test_like_is_idempotent(self, wish, other_student):
        _, first = like_wish(wish_id=wish.id, account=other_student)
        liked, second = like_wish(wish_id=wish.id, account=other_student)

        assert (first, second) == (True, False)
        assert liked.like_count == 1
        assert liked.liked_by_me is True
        assert WishLike.objects.filter(wish=wish).count() == 1

    def test_guest_cannot_like(self, wish, guest_account):
        with pytest.raises(GuestForbiddenError):
            like_wish(wish_id=wish.id, account=guest_account)

    def test_like_unknown_wish(self, other_student):
        with pytest.raises(WishNotFoundError):
            like_wish(wish_id='00000000-0000-4000-8000-000000000000', account=other_student)

    def test_list_newest_first_with_counts(self, wish, student, other_student):
        newer = Wish.objects.create(
            account=other_student,
            account_name=other_student.name,
            item_name='Telescope',
            created_at=wish.created_at + timedelta(minutes=1),
        )
        like_wish(wish_id=wish.id, account=other_student)

        wishes = list(list_wishes(viewer=student))

        assert [w.id for w in wishes] == [newer.id, wish.id]
        assert [w.like_count for w in wishes] == [0, 1]
        assert [w.liked_by_me for w in wishes] == [False, False]

    def test_owner_deletes(self, wish, student):
        delete_wish(wish_id=wish.id, actor=student)

        assert not Wish.objects.exists()

    def test_admin_deletes(self, wish, admin_account):
        delete_wish(wish_id=wish.id, actor=admin_account)

        assert not Wish.objects.exists()

    def test_other_student_cannot_delete(self, wish, other_student):
        with pytest.raises(WishDeleteForbiddenError):
            delete_wish(wish_id=wish.id, actor=other_student)
