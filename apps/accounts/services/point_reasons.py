"""Point reason catalog (advisory text only)."""

from uuid import UUID

from apps.ledger.exceptions import NotFoundError
from apps.ledger.store import ledger_store

from ..models import PointReason
from .exceptions import PointReasonNotFoundError


def list_point_reasons():
    return PointReason.objects.order_by('created_at')


def add_point_reason(*, title: str) -> dict:
    return ledger_store.put('point_reasons', None, {'title': title})


def delete_point_reason(*, reason_id: UUID) -> None:
    try:
        ledger_store.delete('point_reasons', reason_id)
    except NotFoundError:
        raise PointReasonNotFoundError()
