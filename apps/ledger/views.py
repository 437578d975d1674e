from django.db import transaction
from rest_framework import serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, inline_serializer
from drf_spectacular.types import OpenApiTypes

from apps.accounts.models import Role

from .exceptions import InvalidInputError
from .store import ledger_store


def _check_access(request, collection):
    """Staff-only collections are hidden from students and guests."""
    entry = ledger_store.collection(collection)
    if entry.admin_only and request.user.role != Role.ADMIN:
        raise PermissionDenied('This collection is only visible to staff.')
    return entry


@extend_schema(
    responses={200: inline_serializer(
        name='CollectionIndexResponse',
        fields={'collections': serializers.DictField(child=serializers.IntegerField())},
    )},
    description="List the collections visible to the caller with their current versions.",
    tags=['ledger'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def collection_index(request):
    """List visible collections and their versions."""
    visible = {}
    for name in ledger_store.names():
        if ledger_store.collection(name).admin_only and request.user.role != Role.ADMIN:
            continue
        visible[name] = ledger_store.version(name)
    return Response({'collections': visible})


@extend_schema(
    parameters=[
        OpenApiParameter(
            'since', OpenApiTypes.INT,
            description='Version the client already holds; documents are omitted if unchanged.',
        ),
    ],
    responses={200: OpenApiTypes.OBJECT},
    description="Live query: full current snapshot of a collection, or a not-changed marker.",
    tags=['ledger'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def collection_snapshot(request, collection):
    """
    Return the full snapshot of a collection.

    GET /api/ledger/{collection}/?since=<version>
    """
    _check_access(request, collection)

    since = request.query_params.get('since')
    if since is not None:
        try:
            since = int(since)
        except ValueError:
            raise InvalidInputError('since must be an integer version')

    with transaction.atomic():
        version = ledger_store.version(collection)
        if since is not None and since == version:
            return Response({
                'collection': collection,
                'version': version,
                'changed': False,
            })
        documents = ledger_store.list_all(collection)

    return Response({
        'collection': collection,
        'version': version,
        'changed': True,
        'documents': documents,
    })


@extend_schema(
    responses={200: OpenApiTypes.OBJECT},
    description="Fetch one document from a collection.",
    tags=['ledger'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def collection_document(request, collection, doc_id):
    """Return a single document."""
    _check_access(request, collection)
    return Response(ledger_store.get(collection, doc_id))
