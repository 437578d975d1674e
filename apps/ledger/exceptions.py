"""
Error taxonomy shared by every ledger service.

Each app's ``services/exceptions.py`` subclasses one of these categories so
that views never need to translate errors by hand: DRF renders them with the
category's HTTP status and the specific error's code.
"""
from rest_framework import status
from rest_framework.exceptions import APIException


class LedgerServiceError(APIException):
    """Base exception for ledger service errors."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The request could not be completed.'
    default_code = 'ledger_error'


class InvalidInputError(LedgerServiceError):
    """Bad input: non-positive amounts, missing required fields."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid_input'


class PreconditionFailedError(LedgerServiceError):
    """A business rule does not allow the operation right now."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'The operation is not allowed in the current state.'
    default_code = 'precondition_failed'


class NotFoundError(LedgerServiceError):
    """Unknown id or code."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class ConflictError(LedgerServiceError):
    """A racing writer invalidated the transaction and retries ran out."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The ledger was busy. Please try again.'
    default_code = 'conflict'


class UnavailableError(LedgerServiceError):
    """Store or collaborator unreachable."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Service temporarily unavailable.'
    default_code = 'unavailable'
