"""
Atomic units of work for multi-document ledger mutations.

Services that move points or stock together (spend-and-issue voucher,
mission approval, cooldown reset) are decorated with ``ledger_transaction``.
The wrapped function runs inside ``transaction.atomic()``; it is expected to
lock the rows its preconditions read with ``select_for_update()`` and to write
balances and stock through conditional ``UPDATE`` statements so the
precondition is re-checked by the database at commit time.

A lock or serialization failure (``OperationalError``) rolls the unit back and
re-runs it up to ``LEDGER_TRANSACTION_RETRIES`` more times, after which it is
surfaced as ``ConflictError``. Business rule failures are never retried.
"""

import functools
import logging

from django.conf import settings
from django.db import OperationalError, connection, transaction

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


def run_atomic(func, *args, retries=None, **kwargs):
    """
    Run ``func(*args, **kwargs)`` as one all-or-nothing unit of work.

    Args:
        func: Callable performing the reads and conditional writes
        retries: Extra attempts after a conflict (defaults to
            ``settings.LEDGER_TRANSACTION_RETRIES``)

    Returns:
        Whatever ``func`` returns

    Raises:
        ConflictError: If the unit kept conflicting with other writers
    """
    if retries is None:
        retries = settings.LEDGER_TRANSACTION_RETRIES

    # A nested unit cannot be retried on its own: the outer block owns the rollback.
    if connection.in_atomic_block:
        with transaction.atomic():
            return func(*args, **kwargs)

    attempt = 0
    while True:
        try:
            with transaction.atomic():
                return func(*args, **kwargs)
        except OperationalError as exc:
            if attempt >= retries:
                logger.warning(
                    '%s gave up after %d attempt(s): %s',
                    getattr(func, '__qualname__', func), attempt + 1, exc,
                )
                raise ConflictError() from exc
            attempt += 1
            logger.warning(
                '%s conflicted (%s), retrying (%d/%d)',
                getattr(func, '__qualname__', func), exc, attempt, retries,
            )


def ledger_transaction(func=None, *, retries=None):
    """
    Decorator form of ``run_atomic``.

    Usage::

        @ledger_transaction
        def create_redemption(*, account_id, product_id):
            ...
    """
    def decorator(inner):
        @functools.wraps(inner)
        def wrapper(*args, **kwargs):
            return run_atomic(inner, *args, retries=retries, **kwargs)
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
