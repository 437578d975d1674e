"""
Tests for the collection store and atomic units of work.

Tests cover:
- Document contract (get, put, delete, list_all)
- Change notification and version counters
- Conflict retry in run_atomic
"""

import uuid
from unittest.mock import MagicMock

import pytest
from django.db import OperationalError

from apps.catalog.models import Product
from apps.ledger.exceptions import ConflictError, InvalidInputError, NotFoundError
from apps.ledger.store import ledger_store
from apps.ledger.transactions import ledger_transaction, run_atomic


# =============================================================================
# Document Contract Tests
# =============================================================================

@pytest.mark.django_db
class TestDocumentContract:

    def test_get(self, product):
        document = ledger_store.get('products', product.id)

        assert document['name'] == 'Cinema Ticket'
        assert document['price'] == 320

    def test_get_missing(self, db):
        with pytest.raises(NotFoundError):
            ledger_store.get('products', uuid.uuid4())

    def test_get_malformed_id_is_missing(self, db):
        with pytest.raises(NotFoundError):
            ledger_store.get('products', 'not-a-uuid')

    def test_unknown_collection(self, db):
        with pytest.raises(NotFoundError):
            ledger_store.list_all('spaceships')

    def test_put_creates_with_given_id(self, db):
        doc_id = uuid.uuid4()

        document = ledger_store.put('point_reasons', doc_id, {'title': 'Perfect attendance'})

        assert document['id'] == str(doc_id)
        assert ledger_store.get('point_reasons', doc_id)['title'] == 'Perfect attendance'

    def test_put_replaces_existing(self, product):
        document = ledger_store.put('products', product.id, {
            'name': 'Cinema Ticket',
            'price': 300,
            'stock': 2,
        })

        assert document['price'] == 300
        assert Product.objects.count() == 1

    def test_put_validates(self, db):
        with pytest.raises(InvalidInputError):
            ledger_store.put('products', None, {'name': 'Free lunch', 'price': 0, 'stock': 1})

        assert not Product.objects.exists()

    def test_delete(self, product):
        ledger_store.delete('products', product.id)

        with pytest.raises(NotFoundError):
            ledger_store.get('products', product.id)

    def test_list_all(self, product):
        assert [doc['id'] for doc in ledger_store.list_all('products')] == [str(product.id)]

    def test_registered_collections(self):
        assert {
            'accounts', 'products', 'categories', 'banners', 'missions',
            'submissions', 'completions', 'redemptions', 'wishes', 'point_reasons',
        } <= set(ledger_store.names())


# =============================================================================
# Change Notification Tests
# =============================================================================

@pytest.mark.django_db
class TestChangeNotification:

    def test_save_bumps_version(self, product):
        before = ledger_store.version('products')

        product.stock = 7
        product.save()

        assert ledger_store.version('products') == before + 1

    def test_touch_bumps_version(self, db):
        before = ledger_store.version('accounts')

        ledger_store.touch('accounts')

        assert ledger_store.version('accounts') == before + 1

    def test_subscriber_receives_snapshot_on_commit(self, product, django_capture_on_commit_callbacks):
        received = []
        unsubscribe = ledger_store.subscribe('products', received.append)
        try:
            with django_capture_on_commit_callbacks(execute=True):
                Product.objects.create(name='Cookie Box', price=150, stock=12)
        finally:
            unsubscribe()

        assert len(received) == 1
        assert {doc['name'] for doc in received[0]} == {'Cinema Ticket', 'Cookie Box'}

    def test_unsubscribe_stops_delivery(self, product, django_capture_on_commit_callbacks):
        received = []
        unsubscribe = ledger_store.subscribe('products', received.append)
        unsubscribe()
        unsubscribe()

        with django_capture_on_commit_callbacks(execute=True):
            product.delete()

        assert received == []

    def test_failing_subscriber_does_not_break_others(self, product, django_capture_on_commit_callbacks):
        received = []
        unsubscribe_bad = ledger_store.subscribe('products', MagicMock(side_effect=RuntimeError('boom')))
        unsubscribe_good = ledger_store.subscribe('products', received.append)
        try:
            with django_capture_on_commit_callbacks(execute=True):
                product.delete()
        finally:
            unsubscribe_bad()
            unsubscribe_good()

        assert received == [[]]


# =============================================================================
# Atomic Unit Tests
# =============================================================================

@pytest.mark.django_db(transaction=True)
class TestRunAtomic:

    def test_retries_once_then_succeeds(self, settings):
        settings.LEDGER_TRANSACTION_RETRIES = 1
        unit = MagicMock(side_effect=[OperationalError('database is locked'), 'done'])

        assert run_atomic(unit) == 'done'
        assert unit.call_count == 2

    def test_gives_up_with_conflict(self, settings):
        settings.LEDGER_TRANSACTION_RETRIES = 1
        unit = MagicMock(side_effect=OperationalError('database is locked'))

        with pytest.raises(ConflictError):
            run_atomic(unit)

        assert unit.call_count == 2

    def test_business_errors_are_not_retried(self):
        unit = MagicMock(side_effect=InvalidInputError('bad amount'))

        with pytest.raises(InvalidInputError):
            run_atomic(unit)

        assert unit.call_count == 1

    def test_failed_unit_rolls_back(self):
        @ledger_transaction
        def create_then_fail():
            Product.objects.create(name='Ghost', price=10, stock=1)
            raise InvalidInputError('nope')

        with pytest.raises(InvalidInputError):
            create_then_fail()

        assert not Product.objects.filter(name='Ghost').exists()

    def test_transact_runs_function(self):
        assert ledger_store.transact(lambda a, b: a + b, 2, 3) == 5


@pytest.mark.django_db
def test_nested_unit_is_not_retried():
    unit = MagicMock(side_effect=OperationalError('database is locked'))

    with pytest.raises(OperationalError):
        run_atomic(unit)

    assert unit.call_count == 1
