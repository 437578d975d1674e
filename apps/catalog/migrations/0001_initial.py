# Generated manually for catalog app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ProductCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=50, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'product_categories',
                'ordering': ['name'],
                'verbose_name_plural': 'product categories',
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(blank=True, db_index=True, max_length=50)),
                ('price', models.PositiveIntegerField()),
                ('stock', models.PositiveIntegerField(default=0)),
                ('description', models.TextField(blank=True)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'products',
                'ordering': ['price', 'name'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('price__gt', 0)), name='product_price_positive'),
                    models.CheckConstraint(condition=models.Q(('stock__gte', 0)), name='product_stock_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Banner',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('image_url', models.URLField(max_length=500)),
                ('tag', models.CharField(default='Featured', max_length=50)),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('object_position', models.CharField(default='center', max_length=30)),
                ('mobile_height', models.CharField(default='h-48', max_length=30)),
                ('desktop_height', models.CharField(default='md:h-72', max_length=30)),
            ],
            options={
                'db_table': 'banners',
                'ordering': ['-created_at'],
            },
        ),
    ]
