"""
Collection store facade over the Django ORM.

Every app registers its document collections (model + serializer) in its
``AppConfig.ready()``. The store then offers the document contract used by
the live-query API and by seeding:

    get(collection, id)            -> document dict
    put(collection, id, document)  -> document dict (create or replace)
    delete(collection, id)
    list_all(collection)           -> [document dict, ...]
    subscribe(collection, on_change) -> unsubscribe()
    transact(fn, *args, **kwargs)  -> fn's result, all-or-nothing

Subscribers receive the full current snapshot of the collection after each
committed change. Each change also bumps the collection's persistent version
so remote clients can poll cheaply.
"""

import logging
import threading
import uuid
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import F
from django.db.models.signals import post_delete, post_save
from rest_framework import serializers

from .exceptions import InvalidInputError, NotFoundError
from .models import CollectionVersion
from .transactions import run_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    name: str
    model: type
    serializer_class: type
    admin_only: bool = False


class CollectionStore:
    """Registry of document collections with change notification."""

    def __init__(self):
        self._collections: dict[str, Collection] = {}
        self._names_by_model: dict[type, str] = {}
        self._subscribers: dict[str, list[Callable]] = defaultdict(list)
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def register(self, name, model, serializer_class, *, admin_only=False):
        """Register ``model`` as collection ``name`` and watch it for changes."""
        self._collections[name] = Collection(
            name=name,
            model=model,
            serializer_class=serializer_class,
            admin_only=admin_only,
        )
        self._names_by_model[model] = name
        post_save.connect(
            self._on_model_change, sender=model,
            weak=False, dispatch_uid=f'ledger-save-{name}',
        )
        post_delete.connect(
            self._on_model_change, sender=model,
            weak=False, dispatch_uid=f'ledger-delete-{name}',
        )

    def collection(self, name) -> Collection:
        try:
            return self._collections[name]
        except KeyError:
            raise NotFoundError(f"Unknown collection '{name}'")

    def names(self) -> list[str]:
        return sorted(self._collections)

    # -------------------------------------------------------------------------
    # Document contract
    # -------------------------------------------------------------------------

    def get(self, collection, doc_id) -> dict:
        entry = self.collection(collection)
        instance = self._get_instance(entry, doc_id)
        return entry.serializer_class(instance).data

    def put(self, collection, doc_id, document) -> dict:
        """
        Create or replace a document.

        The document is validated by the collection's serializer, so the
        same field rules apply as for the HTTP API.

        Raises:
            InvalidInputError: If the document does not validate
        """
        entry = self.collection(collection)
        doc_id = doc_id or uuid.uuid4()
        instance = entry.model.objects.filter(pk=doc_id).first()
        serializer = entry.serializer_class(instance, data=dict(document))
        try:
            serializer.is_valid(raise_exception=True)
        except serializers.ValidationError as e:
            raise InvalidInputError(e.detail)

        if instance is None:
            saved = serializer.save(id=doc_id)
        else:
            saved = serializer.save()
        return entry.serializer_class(saved).data

    def delete(self, collection, doc_id) -> None:
        entry = self.collection(collection)
        instance = self._get_instance(entry, doc_id)
        instance.delete()

    def list_all(self, collection) -> list[dict]:
        entry = self.collection(collection)
        return list(entry.serializer_class(entry.model.objects.all(), many=True).data)

    def version(self, collection) -> int:
        self.collection(collection)
        row = CollectionVersion.objects.filter(collection=collection).first()
        return row.version if row else 0

    def transact(self, fn, *args, **kwargs):
        """Run ``fn`` as one conditional, retried-on-conflict unit of work."""
        return run_atomic(fn, *args, **kwargs)

    # -------------------------------------------------------------------------
    # Change notification
    # -------------------------------------------------------------------------

    def subscribe(self, collection, on_change: Callable[[list], None]) -> Callable[[], None]:
        """
        Call ``on_change(snapshot)`` after every committed change.

        Returns:
            A callable that removes the subscription (safe to call twice)
        """
        self.collection(collection)
        with self._lock:
            self._subscribers[collection].append(on_change)

        def unsubscribe():
            with self._lock:
                if on_change in self._subscribers[collection]:
                    self._subscribers[collection].remove(on_change)

        return unsubscribe

    def touch(self, collection) -> None:
        """
        Record a change made through ``QuerySet.update()``.

        Conditional updates bypass model signals, so services call this
        after writing balances or stock that way.
        """
        self.collection(collection)
        self._bump_version(collection)
        transaction.on_commit(lambda: self._notify(collection))

    def _on_model_change(self, sender, instance, **kwargs):
        name = self._names_by_model.get(sender)
        if name is not None:
            self.touch(name)

    def _bump_version(self, name):
        updated = CollectionVersion.objects.filter(collection=name).update(version=F('version') + 1)
        if updated:
            return
        try:
            with transaction.atomic():
                CollectionVersion.objects.create(collection=name, version=1)
        except IntegrityError:
            # Another writer created the row first
            CollectionVersion.objects.filter(collection=name).update(version=F('version') + 1)

    def _notify(self, name):
        with self._lock:
            callbacks = list(self._subscribers[name])
        if not callbacks:
            return

        snapshot = self.list_all(name)
        for callback in callbacks:
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Subscriber %r failed for collection '%s'", callback, name)

    @staticmethod
    def _get_instance(entry, doc_id):
        try:
            return entry.model.objects.get(pk=doc_id)
        except (entry.model.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            # Malformed UUIDs are reported as missing rather than invalid
            raise NotFoundError(f"No document '{doc_id}' in '{entry.name}'")


ledger_store = CollectionStore()
