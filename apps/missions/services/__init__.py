"""Services for mission business logic."""

from .exceptions import (
    MissionNotFoundError,
    MissionInactiveError,
    MissionExpiredError,
    AlreadyCompletedError,
    DuplicateSubmissionError,
    SubmissionNotFoundError,
    SubmissionAlreadyResolvedError,
)
from .mission_management import (
    get_mission,
    list_missions,
    create_mission,
    update_mission,
    delete_mission,
    toggle_mission,
)
from .completion import (
    start_of_today,
    has_completed_today,
    today_completed_mission_ids,
    mission_board,
    BoardEntry,
)
from .submissions import submit_mission, approve_submission, reject_submission, list_submissions
from .suggestion import suggest_daily_mission, FALLBACK_SUGGESTION

__all__ = [
    # Exceptions
    'MissionNotFoundError',
    'MissionInactiveError',
    'MissionExpiredError',
    'AlreadyCompletedError',
    'DuplicateSubmissionError',
    'SubmissionNotFoundError',
    'SubmissionAlreadyResolvedError',
    # Services
    'get_mission',
    'list_missions',
    'create_mission',
    'update_mission',
    'delete_mission',
    'toggle_mission',
    'start_of_today',
    'has_completed_today',
    'today_completed_mission_ids',
    'mission_board',
    'BoardEntry',
    'submit_mission',
    'approve_submission',
    'reject_submission',
    'list_submissions',
    'suggest_daily_mission',
    'FALLBACK_SUGGESTION',
]
