"""Domain-specific exceptions for wish services."""

from rest_framework import status

from apps.ledger.exceptions import NotFoundError, PreconditionFailedError


class WishNotFoundError(NotFoundError):
    """Raised when wish does not exist."""
    default_detail = 'Wish not found.'
    default_code = 'wish_not_found'


class CooldownActiveError(PreconditionFailedError):
    """Raised when posting inside the cooldown window."""
    default_detail = 'You can post another wish once your cooldown ends.'
    default_code = 'cooldown_active'


class NoActiveCooldownError(PreconditionFailedError):
    """Raised when paying to reset a cooldown that is not running."""
    default_detail = 'There is no cooldown to reset.'
    default_code = 'no_active_cooldown'


class WishDeleteForbiddenError(PreconditionFailedError):
    """Raised when someone other than the owner or admin deletes a wish."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You can only delete your own wishes.'
    default_code = 'wish_delete_forbidden'
