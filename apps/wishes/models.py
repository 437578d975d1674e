from django.conf import settings
from django.db import models
from django.utils import timezone
import uuid


class Wish(models.Model):
    """
    A student's request for a new catalog item.

    Name and avatar are copied from the account when the wish is posted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wishes'
    )
    account_name = models.CharField(max_length=100)
    account_avatar = models.CharField(max_length=500, blank=True)
    item_name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    # Set when the owner paid to end the cooldown this wish started
    cooldown_waived_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'wishes'
        ordering = ['-created_at']
        verbose_name_plural = 'wishes'
        indexes = [
            models.Index(fields=['account', 'created_at'], name='wish_account_created_idx'),
        ]

    def __str__(self):
        return f"{self.account_name}: {self.item_name}"


class WishLike(models.Model):
    """One account's like on one wish."""

    wish = models.ForeignKey(Wish, on_delete=models.CASCADE, related_name='likes')
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wish_likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wish_likes'
        constraints = [
            models.UniqueConstraint(fields=['wish', 'account'], name='unique_wish_like'),
        ]

    def __str__(self):
        return f"{self.account_id} likes {self.wish_id}"
