"""Domain-specific exceptions for accounts services."""

from rest_framework import status

from apps.ledger.exceptions import (
    InvalidInputError,
    NotFoundError,
    PreconditionFailedError,
)


class DuplicateNameError(PreconditionFailedError):
    """Raised when the registration name is already taken."""
    default_detail = 'An account with this name already exists.'
    default_code = 'duplicate_name'


class AccountNotFoundError(NotFoundError):
    """Raised when account does not exist."""
    default_detail = 'Account not found.'
    default_code = 'account_not_found'


class AccountNotApprovedError(PreconditionFailedError):
    """Raised when a student account is still awaiting approval."""
    default_detail = 'This account has not been approved yet.'
    default_code = 'not_approved'


class InvalidCredentialError(PreconditionFailedError):
    """Raised when a password or access code does not match."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials.'
    default_code = 'invalid_credential'


class InvalidPointAmountError(InvalidInputError):
    """Raised when a point grant is not a positive integer."""
    default_detail = 'Point amount must be a positive integer.'
    default_code = 'invalid_point_amount'


class PointReasonNotFoundError(NotFoundError):
    """Raised when point reason does not exist."""
    default_detail = 'Point reason not found.'
    default_code = 'point_reason_not_found'
