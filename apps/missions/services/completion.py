"""
Calendar-day completion queries.

"Today" starts at local midnight in ``settings.TIME_ZONE``.
"""

from dataclasses import dataclass

from django.utils import timezone

from ..models import CompletionRecord, Mission, MissionSubmission, SubmissionStatus

AVAILABLE = 'available'
PENDING = 'pending'
COMPLETED_TODAY = 'completed_today'
EXPIRED = 'expired'


def start_of_today(now=None):
    local = timezone.localtime(now)
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def completions_today(account, mission, now=None) -> int:
    return CompletionRecord.objects.filter(
        account=account,
        mission=mission,
        completed_at__gte=start_of_today(now),
    ).count()


def has_completed_today(account, mission, now=None) -> bool:
    return CompletionRecord.objects.filter(
        account=account,
        mission=mission,
        completed_at__gte=start_of_today(now),
    ).exists()


def today_completed_mission_ids(account, now=None) -> set:
    """Ids of every mission ``account`` completed since midnight, in one query."""
    return set(
        CompletionRecord.objects
        .filter(account=account, completed_at__gte=start_of_today(now), mission__isnull=False)
        .values_list('mission_id', flat=True)
    )


def today_pending_mission_ids(account, now=None) -> set:
    return set(
        MissionSubmission.objects
        .filter(
            account=account,
            status=SubmissionStatus.PENDING,
            created_at__gte=start_of_today(now),
            mission__isnull=False,
        )
        .values_list('mission_id', flat=True)
    )


@dataclass(frozen=True)
class BoardEntry:
    mission: Mission
    state: str


def mission_board(*, account, now=None) -> list[BoardEntry]:
    """
    Active missions with the caller's state for each.

    A completed mission shows as done even if its deadline has since
    passed; pending review wins over expiry for the same reason.
    """
    now = now or timezone.now()
    completed = today_completed_mission_ids(account, now)
    pending = today_pending_mission_ids(account, now)

    board = []
    for mission in Mission.objects.filter(is_active=True):
        if mission.id in completed:
            state = COMPLETED_TODAY
        elif mission.id in pending:
            state = PENDING
        elif mission.is_expired(now):
            state = EXPIRED
        else:
            state = AVAILABLE
        board.append(BoardEntry(mission=mission, state=state))
    return board
