import pytest
from django.urls import reverse
from rest_framework import status

from apps.wishes.models import Wish


@pytest.mark.django_db
class TestWishEndpoints:
    """Tests for /api/wishes/"""

    def test_post_wish(self, student_client):
        response = student_client.post(
            reverse('wishes:wish-list'),
            {'item_name': 'Board games', 'description': 'For rainy Fridays.'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['item_name'] == 'Board games'
        assert response.data['like_count'] == 0

    def test_post_during_cooldown(self, student_client, wish):
        response = student_client.post(
            reverse('wishes:wish-list'),
            {'item_name': 'Chess set'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'cooldown_active'

    def test_guest_cannot_post(self, guest_client):
        response = guest_client.post(
            reverse('wishes:wish-list'),
            {'item_name': 'Anything'},
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list(self, other_client, wish):
        response = other_client.get(reverse('wishes:wish-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['id'] == str(wish.id)
        assert response.data[0]['liked_by_me'] is False

    def test_like_twice(self, other_client, other_student, wish):
        url = reverse('wishes:wish-like', kwargs={'pk': wish.id})

        first = other_client.post(url)
        second = other_client.post(url)

        assert first.data['changed'] is True
        assert second.status_code == status.HTTP_200_OK
        assert second.data['changed'] is False
        assert second.data['wish']['like_count'] == 1
        assert second.data['wish']['liked_by'] == [str(other_student.id)]

    def test_cooldown_status(self, student_client, wish):
        response = student_client.get(reverse('wishes:wish-cooldown'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['on_cooldown'] is True
        assert response.data['remaining_seconds'] > 0

    def test_reset_cooldown(self, student_client, wish):
        response = student_client.post(reverse('wishes:wish-reset'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['balance'] == 500
        assert response.data['cooldown']['on_cooldown'] is False

    def test_reset_without_cooldown(self, student_client):
        response = student_client.post(reverse('wishes:wish-reset'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'no_active_cooldown'

    def test_delete_other_students_wish(self, other_client, wish):
        response = other_client.delete(reverse('wishes:wish-detail', kwargs={'pk': wish.id}))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Wish.objects.exists()

    def test_admin_deletes(self, admin_client, wish):
        response = admin_client.delete(reverse('wishes:wish-detail', kwargs={'pk': wish.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_like_malformed_id(self, other_client):
        response = other_client.post(reverse('wishes:wish-like', kwargs={'pk': 'not-a-uuid'}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'wish_not_found'
