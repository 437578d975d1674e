"""Mission CRUD and activation toggle service."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers

from apps.ledger.exceptions import InvalidInputError, NotFoundError
from apps.ledger.store import ledger_store

from ..models import Mission
from ..serializers import MissionSerializer
from .exceptions import MissionNotFoundError

logger = logging.getLogger(__name__)


def get_mission(*, mission_id: UUID) -> Mission:
    try:
        return Mission.objects.get(id=mission_id)
    except (Mission.DoesNotExist, DjangoValidationError, ValueError):
        raise MissionNotFoundError()


def list_missions(*, active: Optional[bool] = None):
    queryset = Mission.objects.all()
    if active is not None:
        queryset = queryset.filter(is_active=active)
    return queryset


def create_mission(
    *,
    title: str,
    points: int,
    description: str = '',
    difficulty: str = 'normal',
    is_active: bool = True,
    deadline=None,
    max_attempts: int = 1,
) -> dict:
    """
    Create a mission through the ledger store.

    Raises:
        InvalidInputError: If points are not positive or a field is invalid
    """
    document = ledger_store.put('missions', None, {
        'title': title,
        'description': description,
        'points': points,
        'difficulty': difficulty,
        'is_active': is_active,
        'deadline': deadline,
        'max_attempts': max_attempts,
    })
    logger.info('Created mission %s (+%d)', document['title'], document['points'])
    return document


@transaction.atomic
def update_mission(*, mission_id: UUID, **changes) -> dict:
    """
    Apply a partial update to a mission.

    Only the fields in ``changes`` are written. Pending submissions carry
    their own title and points, so edits only affect future submissions.
    """
    try:
        mission = Mission.objects.select_for_update().get(id=mission_id)
    except (Mission.DoesNotExist, DjangoValidationError, ValueError):
        raise MissionNotFoundError()

    serializer = MissionSerializer(mission, data=changes, partial=True)
    try:
        serializer.is_valid(raise_exception=True)
    except serializers.ValidationError as e:
        raise InvalidInputError(e.detail)

    fields = list(serializer.validated_data)
    for field, value in serializer.validated_data.items():
        setattr(mission, field, value)
    mission.save(update_fields=[*fields, 'updated_at'])
    mission.refresh_from_db()
    return MissionSerializer(mission).data


def delete_mission(*, mission_id: UUID) -> None:
    try:
        ledger_store.delete('missions', mission_id)
    except NotFoundError:
        raise MissionNotFoundError()
    logger.info('Deleted mission %s', mission_id)


@transaction.atomic
def toggle_mission(*, mission_id: UUID) -> Mission:
    """Flip the active flag."""
    try:
        mission = Mission.objects.select_for_update().get(id=mission_id)
    except (Mission.DoesNotExist, DjangoValidationError, ValueError):
        raise MissionNotFoundError()

    mission.is_active = not mission.is_active
    mission.save(update_fields=['is_active', 'updated_at'])
    logger.info('Mission %s is now %s', mission.title, 'active' if mission.is_active else 'inactive')
    return mission
