"""Domain-specific exceptions for redemption services."""

from rest_framework import status

from apps.ledger.exceptions import NotFoundError, PreconditionFailedError


class InsufficientPointsError(PreconditionFailedError):
    """Raised when the balance does not cover the cost."""
    default_detail = 'Not enough points.'
    default_code = 'insufficient_points'


class OutOfStockError(PreconditionFailedError):
    """Raised when the product has no stock left."""
    default_detail = 'This product is sold out.'
    default_code = 'out_of_stock'


class GuestForbiddenError(PreconditionFailedError):
    """Raised when the guest account tries to spend or post."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Guests cannot do this. Please register as a student.'
    default_code = 'guest_forbidden'


class VoucherNotFoundError(NotFoundError):
    """Raised when no actionable voucher matches the id or code."""
    default_detail = 'Voucher not found or already used.'
    default_code = 'voucher_not_found'


class InvalidVoucherTransitionError(PreconditionFailedError):
    """Raised when moving a voucher out of a terminal state."""
    default_detail = 'This voucher has already been resolved.'
    default_code = 'invalid_voucher_transition'
