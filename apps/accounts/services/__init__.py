"""Services for accounts business logic."""

from .exceptions import (
    DuplicateNameError,
    AccountNotFoundError,
    AccountNotApprovedError,
    InvalidCredentialError,
    InvalidPointAmountError,
    PointReasonNotFoundError,
)
from .registration import register_student, ensure_role_account
from .authentication import authenticate_account, authenticate_admin, authenticate_guest
from .account_management import get_account, list_students, approve_account, delete_account
from .points import credit_account, debit_account, grant_points
from .point_reasons import list_point_reasons, add_point_reason, delete_point_reason
from .text_generation import generate_text
from .encouragement import generate_encouragement, FALLBACK_ENCOURAGEMENT

__all__ = [
    # Exceptions
    'DuplicateNameError',
    'AccountNotFoundError',
    'AccountNotApprovedError',
    'InvalidCredentialError',
    'InvalidPointAmountError',
    'PointReasonNotFoundError',
    # Services
    'register_student',
    'ensure_role_account',
    'authenticate_account',
    'authenticate_admin',
    'authenticate_guest',
    'get_account',
    'list_students',
    'approve_account',
    'delete_account',
    'credit_account',
    'debit_account',
    'grant_points',
    'list_point_reasons',
    'add_point_reason',
    'delete_point_reason',
    'generate_text',
    'generate_encouragement',
    'FALLBACK_ENCOURAGEMENT',
]
