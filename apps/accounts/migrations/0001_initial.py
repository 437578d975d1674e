# Generated manually for accounts app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=100, unique=True)),
                ('role', models.CharField(choices=[('STUDENT', 'Student'), ('ADMIN', 'Admin'), ('GUEST', 'Guest')], default='STUDENT', max_length=10)),
                ('balance', models.PositiveIntegerField(default=0)),
                ('total_earned', models.PositiveIntegerField(default=0)),
                ('is_approved', models.BooleanField(default=False)),
                ('grade', models.CharField(blank=True, max_length=20)),
                ('avatar', models.CharField(blank=True, max_length=500)),
                ('is_active', models.BooleanField(default=True)),
                ('is_staff', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('last_login', models.DateTimeField(blank=True, null=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'accounts',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['role', 'is_approved'], name='accounts_role_b3f1a0_idx'),
                    models.Index(fields=['created_at'], name='accounts_created_5d2c41_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('balance__gte', 0)), name='account_balance_non_negative'),
                    models.CheckConstraint(condition=models.Q(('total_earned__gte', 0)), name='account_total_earned_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PointReason',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'point_reasons',
                'ordering': ['created_at'],
            },
        ),
    ]
