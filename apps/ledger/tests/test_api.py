import pytest
from django.urls import reverse
from rest_framework import status

from apps.catalog.models import Product


@pytest.mark.django_db
class TestCollectionEndpoints:
    """Tests for /api/ledger/"""

    def test_index_hides_staff_collections(self, student_client):
        response = student_client.get(reverse('ledger:collection-index'))

        assert response.status_code == status.HTTP_200_OK
        assert 'products' in response.data['collections']
        assert 'accounts' not in response.data['collections']
        assert 'point_reasons' not in response.data['collections']

    def test_index_for_admin(self, admin_client):
        response = admin_client.get(reverse('ledger:collection-index'))

        assert 'accounts' in response.data['collections']

    def test_snapshot(self, student_client, product):
        response = student_client.get(
            reverse('ledger:collection-snapshot', kwargs={'collection': 'products'})
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['changed'] is True
        assert response.data['documents'][0]['id'] == str(product.id)

    def test_poll_unchanged_then_changed(self, student_client, product):
        url = reverse('ledger:collection-snapshot', kwargs={'collection': 'products'})
        version = student_client.get(url).data['version']

        unchanged = student_client.get(url, {'since': version})
        assert unchanged.data == {'collection': 'products', 'version': version, 'changed': False}

        Product.objects.filter(id=product.id).update(stock=0)
        product.save()

        changed = student_client.get(url, {'since': version})
        assert changed.data['changed'] is True
        assert changed.data['version'] > version

    def test_since_must_be_integer(self, student_client):
        response = student_client.get(
            reverse('ledger:collection-snapshot', kwargs={'collection': 'products'}),
            {'since': 'yesterday'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_staff_collection_forbidden(self, student_client):
        response = student_client.get(
            reverse('ledger:collection-snapshot', kwargs={'collection': 'accounts'})
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_point_reasons_are_staff_only(self, student_client, admin_client):
        url = reverse('ledger:collection-snapshot', kwargs={'collection': 'point_reasons'})

        assert student_client.get(url).status_code == status.HTTP_403_FORBIDDEN
        assert admin_client.get(url).status_code == status.HTTP_200_OK

    def test_unknown_collection(self, student_client):
        response = student_client.get(
            reverse('ledger:collection-snapshot', kwargs={'collection': 'spaceships'})
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_document(self, student_client, product):
        response = student_client.get(
            reverse('ledger:collection-document', kwargs={'collection': 'products', 'doc_id': product.id})
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Cinema Ticket'

    def test_requires_authentication(self, client):
        response = client.get(reverse('ledger:collection-index'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
