"""
Submission workflow: pending -> approved | rejected.

Approval is one unit of work: the status change, the completion record and
the point credit commit together or not at all.
"""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone

from apps.accounts.models import Role
from apps.accounts.services import AccountNotApprovedError, AccountNotFoundError, credit_account
from apps.ledger.transactions import ledger_transaction
from apps.redemptions.services import GuestForbiddenError

from ..models import CompletionRecord, Mission, MissionSubmission, SubmissionStatus
from .completion import completions_today, start_of_today
from .exceptions import (
    AlreadyCompletedError,
    DuplicateSubmissionError,
    MissionExpiredError,
    MissionInactiveError,
    MissionNotFoundError,
    SubmissionAlreadyResolvedError,
    SubmissionNotFoundError,
)

logger = logging.getLogger(__name__)

Account = get_user_model()


@ledger_transaction
def submit_mission(*, account_id: UUID, mission_id: UUID, now=None) -> MissionSubmission:
    """
    Claim completion of a mission and queue it for review.

    The account row is locked so two submits from the same student
    serialize and the second one sees the first as pending.

    Raises:
        AccountNotFoundError: If account does not exist
        GuestForbiddenError: If the account is the guest account
        AccountNotApprovedError: If the student is not approved
        MissionNotFoundError: If mission does not exist
        MissionInactiveError: If the mission is switched off
        MissionExpiredError: If the deadline has passed
        DuplicateSubmissionError: If a submission is already pending today
        AlreadyCompletedError: If today's completion limit is reached
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

    try:
        mission = Mission.objects.get(id=mission_id)
    except (Mission.DoesNotExist, DjangoValidationError, ValueError):
        raise MissionNotFoundError()

    if not mission.is_active:
        raise MissionInactiveError()
    if mission.is_expired(now):
        raise MissionExpiredError()

    pending = MissionSubmission.objects.filter(
        account=account,
        mission=mission,
        status=SubmissionStatus.PENDING,
        created_at__gte=start_of_today(now),
    ).exists()
    if pending:
        raise DuplicateSubmissionError()

    if completions_today(account, mission, now) >= mission.max_attempts:
        raise AlreadyCompletedError()

    submission = MissionSubmission.objects.create(
        account=account,
        account_name=account.name,
        mission=mission,
        mission_title=mission.title,
        points=mission.points,
        created_at=now,
    )
    logger.info('%s submitted mission %s (+%d)', account.name, mission.title, mission.points)
    return submission


@ledger_transaction
def approve_submission(*, submission_id: UUID) -> MissionSubmission:
    """
    Approve a pending submission and credit its snapshotted points.

    Raises:
        SubmissionNotFoundError: If submission does not exist
        SubmissionAlreadyResolvedError: If it is not pending
    """
    submission = _lock_pending(submission_id)

    now = timezone.now()
    submission.status = SubmissionStatus.APPROVED
    submission.resolved_at = now
    submission.save(update_fields=['status', 'resolved_at'])

    CompletionRecord.objects.create(
        account_id=submission.account_id,
        mission_id=submission.mission_id,
        submission=submission,
        completed_at=now,
    )
    credit_account(submission.account_id, submission.points)

    logger.info(
        'Approved mission %s for %s: +%d points',
        submission.mission_title, submission.account_name, submission.points,
    )
    return submission


@ledger_transaction
def reject_submission(*, submission_id: UUID) -> MissionSubmission:
    """Reject a pending submission. Balances are untouched."""
    submission = _lock_pending(submission_id)

    submission.status = SubmissionStatus.REJECTED
    submission.resolved_at = timezone.now()
    submission.save(update_fields=['status', 'resolved_at'])

    logger.info('Rejected mission %s for %s', submission.mission_title, submission.account_name)
    return submission


def list_submissions(*, account, status: Optional[str] = None):
    """Every submission for the admin, own submissions for everyone else."""
    queryset = MissionSubmission.objects.all()
    if account.role != Role.ADMIN:
        queryset = queryset.filter(account=account)
    if status:
        queryset = queryset.filter(status=status)
    return queryset


def _lock_pending(submission_id):
    try:
        submission = MissionSubmission.objects.select_for_update().get(id=submission_id)
    except (MissionSubmission.DoesNotExist, DjangoValidationError, ValueError):
        raise SubmissionNotFoundError()

    if submission.status != SubmissionStatus.PENDING:
        raise SubmissionAlreadyResolvedError()
    return submission
