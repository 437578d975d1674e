from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
import uuid


class Difficulty(models.TextChoices):
    NORMAL = 'normal', 'Normal'
    CHALLENGE = 'challenge', 'Challenge'
    HARD = 'hard', 'Hard'


class SubmissionStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class Mission(models.Model):
    """Admin-defined task carrying a point reward."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    points = models.PositiveIntegerField()
    difficulty = models.CharField(
        max_length=10,
        choices=Difficulty.choices,
        default=Difficulty.NORMAL
    )
    is_active = models.BooleanField(default=True, db_index=True)
    deadline = models.DateTimeField(null=True, blank=True)
    # Completions allowed per account per calendar day
    max_attempts = models.PositiveSmallIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'missions'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(condition=Q(points__gt=0), name='mission_points_positive'),
            models.CheckConstraint(condition=Q(max_attempts__gte=1), name='mission_max_attempts_positive'),
        ]

    def __str__(self):
        return f"{self.title} (+{self.points})"

    def is_expired(self, now=None):
        if self.deadline is None:
            return False
        return (now or timezone.now()) > self.deadline


class MissionSubmission(models.Model):
    """
    A student's claim of having completed a mission.

    Title and points are copied at submit time so later mission edits do
    not change pending rewards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='mission_submissions'
    )
    account_name = models.CharField(max_length=100)
    mission = models.ForeignKey(
        Mission,
        on_delete=models.SET_NULL,
        null=True,
        related_name='submissions'
    )
    mission_title = models.CharField(max_length=200)
    points = models.PositiveIntegerField()
    status = models.CharField(
        max_length=10,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.PENDING,
        db_index=True
    )
    created_at = models.DateTimeField(default=timezone.now)
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'mission_submissions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['account', 'mission', 'created_at'], name='submission_lookup_idx'),
        ]

    def __str__(self):
        return f"{self.account_name}: {self.mission_title} ({self.status})"


class CompletionRecord(models.Model):
    """Proof that a mission was credited to an account at a given time."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='mission_completions'
    )
    mission = models.ForeignKey(
        Mission,
        on_delete=models.SET_NULL,
        null=True,
        related_name='completions'
    )
    submission = models.OneToOneField(
        MissionSubmission,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='completion'
    )
    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'mission_completions'
        ordering = ['-completed_at']
        indexes = [
            models.Index(fields=['account', 'mission', 'completed_at'], name='completion_lookup_idx'),
        ]

    def __str__(self):
        return f"{self.account_id} completed {self.mission_id} at {self.completed_at:%Y-%m-%d %H:%M}"
