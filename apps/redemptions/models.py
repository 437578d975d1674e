from django.conf import settings
from django.db import models
from django.db.models import Q
import uuid


class VoucherStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


class RedemptionVoucher(models.Model):
    """
    A claim on one unit of a product, paid for in points.

    ``points_spent`` and ``product_name`` are snapshots taken at redemption
    time; later product edits never change an issued voucher.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='redemptions'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='redemptions'
    )
    product_name = models.CharField(max_length=200)
    points_spent = models.PositiveIntegerField()
    status = models.CharField(
        max_length=10,
        choices=VoucherStatus.choices,
        default=VoucherStatus.PENDING,
        db_index=True
    )
    code = models.CharField(max_length=40, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'redemption_vouchers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['account', '-created_at'], name='voucher_account_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(points_spent__gt=0), name='voucher_points_positive'),
        ]

    def __str__(self):
        return f"{self.code} ({self.status})"
