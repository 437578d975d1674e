"""
Management command to load the default workshop catalog.

Creates the role accounts, the starter categories and six starter products.
Safe to run repeatedly: documents have stable ids and are replaced in place.

Usage:
    python manage.py seed_workshop
    python manage.py seed_workshop --dry-run
"""

import uuid

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import Role
from apps.accounts.services import ensure_role_account
from apps.ledger.store import ledger_store

SEED_NAMESPACE = uuid.UUID('6f1c2a7e-3b8d-4e59-9a21-5c0d7e4b8f10')

CATEGORIES = ['food', 'electronic', 'ticket', 'other']

PRODUCTS = [
    {
        'name': 'Handmade Cookie Box',
        'category': 'food',
        'price': 150,
        'stock': 12,
        'description': 'Crispy handmade cookies in assorted flavours.',
        'image_url': 'https://images.unsplash.com/photo-1558961363-fa8fdf82db35?q=80&w=400&h=300&auto=format&fit=crop',
    },
    {
        'name': 'Bubble Tea Voucher',
        'category': 'food',
        'price': 80,
        'stock': 45,
        'description': 'One medium bubble milk tea at any partner shop.',
        'image_url': 'https://images.unsplash.com/photo-1544467316-e97029d2d47b?q=80&w=400&h=300&auto=format&fit=crop',
    },
    {
        'name': 'Flagship Smartphone',
        'category': 'electronic',
        'price': 12000,
        'stock': 1,
        'description': "This year's flagship phone with a top-tier camera.",
        'image_url': 'https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?q=80&w=400&h=300&auto=format&fit=crop',
    },
    {
        'name': 'Cinema Ticket',
        'category': 'ticket',
        'price': 320,
        'stock': 8,
        'description': 'One standard screening at a partner cinema.',
        'image_url': 'https://images.unsplash.com/photo-1489599849927-2ee91cede3ba?q=80&w=400&h=300&auto=format&fit=crop',
    },
    {
        'name': 'Hotel Afternoon Tea',
        'category': 'food',
        'price': 800,
        'stock': 3,
        'description': 'English afternoon tea for two at a five-star hotel.',
        'image_url': 'https://images.unsplash.com/photo-1544739313-6fad02872377?q=80&w=400&h=300&auto=format&fit=crop',
    },
    {
        'name': 'Noise-Cancelling Headphones',
        'category': 'electronic',
        'price': 2500,
        'stock': 5,
        'description': 'Wireless headphones for quiet, focused study.',
        'image_url': 'https://images.unsplash.com/photo-1505740420928-5e560c06d30e?q=80&w=400&h=300&auto=format&fit=crop',
    },
]


def seed_id(kind, name):
    return uuid.uuid5(SEED_NAMESPACE, f'{kind}:{name}')


class Command(BaseCommand):
    help = 'Load the default workshop catalog and role accounts'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be created without making changes',
        )

    def handle(self, *args, **options):
        if options['dry_run']:
            self.stdout.write(f'Would seed {len(CATEGORIES)} categories and {len(PRODUCTS)} products:')
            for product in PRODUCTS:
                self.stdout.write(f"  - {product['name']} | {product['price']} pts | stock {product['stock']}")
            self.stdout.write(self.style.WARNING('\n--dry-run mode: No changes made.'))
            return

        with transaction.atomic():
            for role in (Role.ADMIN, Role.GUEST):
                ensure_role_account(role)

            for name in CATEGORIES:
                ledger_store.put('categories', seed_id('category', name), {'name': name})

            for product in PRODUCTS:
                ledger_store.put('products', seed_id('product', product['name']), product)

        self.stdout.write(
            self.style.SUCCESS(
                f'✓ Seeded {len(CATEGORIES)} categories and {len(PRODUCTS)} products.'
            )
        )
