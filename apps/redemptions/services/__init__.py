"""Services for redemption business logic."""

from .exceptions import (
    InsufficientPointsError,
    OutOfStockError,
    GuestForbiddenError,
    VoucherNotFoundError,
    InvalidVoucherTransitionError,
)
from .redemption_creation import create_redemption, RedemptionReceipt
from .voucher_lifecycle import (
    list_vouchers,
    lookup_by_code,
    confirm_redemption,
    cancel_redemption,
)

__all__ = [
    # Exceptions
    'InsufficientPointsError',
    'OutOfStockError',
    'GuestForbiddenError',
    'VoucherNotFoundError',
    'InvalidVoucherTransitionError',
    # Services
    'create_redemption',
    'RedemptionReceipt',
    'list_vouchers',
    'lookup_by_code',
    'confirm_redemption',
    'cancel_redemption',
]
