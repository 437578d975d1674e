"""Domain-specific exceptions for mission services."""

from apps.ledger.exceptions import NotFoundError, PreconditionFailedError


class MissionNotFoundError(NotFoundError):
    """Raised when mission does not exist."""
    default_detail = 'Mission not found.'
    default_code = 'mission_not_found'


class MissionInactiveError(PreconditionFailedError):
    """Raised when submitting a switched-off mission."""
    default_detail = 'This mission is not active.'
    default_code = 'mission_inactive'


class MissionExpiredError(PreconditionFailedError):
    """Raised when the mission deadline has passed."""
    default_detail = 'This mission has expired.'
    default_code = 'mission_expired'


class AlreadyCompletedError(PreconditionFailedError):
    """Raised when the daily completion limit is reached."""
    default_detail = 'You have already completed this mission today.'
    default_code = 'already_completed'


class DuplicateSubmissionError(PreconditionFailedError):
    """Raised when a submission for the same mission is already pending today."""
    default_detail = 'This mission is already waiting for review.'
    default_code = 'duplicate_submission'


class SubmissionNotFoundError(NotFoundError):
    """Raised when submission does not exist."""
    default_detail = 'Submission not found.'
    default_code = 'submission_not_found'


class SubmissionAlreadyResolvedError(PreconditionFailedError):
    """Raised when approving or rejecting a resolved submission."""
    default_detail = 'This submission has already been reviewed.'
    default_code = 'submission_already_resolved'
