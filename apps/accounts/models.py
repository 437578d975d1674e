from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.db.models import Q
from urllib.parse import quote
import uuid

from .ranks import rank_for


class Role(models.TextChoices):
    STUDENT = 'STUDENT', 'Student'
    ADMIN = 'ADMIN', 'Admin'
    GUEST = 'GUEST', 'Guest'


AVATAR_URL = 'https://api.dicebear.com/7.x/avataaars/svg?seed={seed}'


class AccountManager(BaseUserManager):
    """Manager for name-based accounts."""

    def create_user(self, name, password=None, **extra_fields):
        if not name:
            raise ValueError('Name is required')

        account = self.model(name=name, **extra_fields)
        if password:
            account.set_password(password)
        else:
            account.set_unusable_password()
        account.save(using=self._db)
        return account

    def create_superuser(self, name, password=None, **extra_fields):
        extra_fields.setdefault('role', Role.ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_approved', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(name, password, **extra_fields)


class Account(AbstractBaseUser, PermissionsMixin):
    """
    Workshop account: a student, or one of the fixed ADMIN / GUEST accounts.

    ``balance`` is the spendable point balance. ``total_earned`` only ever
    grows and is the basis for the (never stored) rank.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True, db_index=True)
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.STUDENT)

    # Points
    balance = models.PositiveIntegerField(default=0)
    total_earned = models.PositiveIntegerField(default=0)

    # Registration
    is_approved = models.BooleanField(default=False)
    grade = models.CharField(max_length=20, blank=True)
    avatar = models.CharField(max_length=500, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = AccountManager()

    USERNAME_FIELD = 'name'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'accounts'
        indexes = [
            models.Index(fields=['role', 'is_approved'], name='accounts_role_b3f1a0_idx'),
            models.Index(fields=['created_at'], name='accounts_created_5d2c41_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(balance__gte=0), name='account_balance_non_negative'),
            models.CheckConstraint(condition=Q(total_earned__gte=0), name='account_total_earned_non_negative'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.avatar:
            self.avatar = AVATAR_URL.format(seed=quote(self.name))
        super().save(*args, **kwargs)

    @property
    def rank(self):
        return rank_for(self.total_earned)


class PointReason(models.Model):
    """Advisory, admin-managed justification shown when granting points."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'point_reasons'
        ordering = ['created_at']

    def __str__(self):
        return self.title
