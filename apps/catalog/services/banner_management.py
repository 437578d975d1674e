"""Promotional banner service."""

from uuid import UUID

from apps.ledger.exceptions import NotFoundError
from apps.ledger.store import ledger_store

from ..models import Banner
from .exceptions import BannerNotFoundError


def list_active_banners():
    """Active banners, newest first."""
    return Banner.objects.filter(active=True).order_by('-created_at')


def add_banner(
    *,
    image_url: str,
    tag: str = 'Featured',
    object_position: str = 'center',
    mobile_height: str = 'h-48',
    desktop_height: str = 'md:h-72',
) -> dict:
    return ledger_store.put('banners', None, {
        'image_url': image_url,
        'tag': tag,
        'active': True,
        'object_position': object_position,
        'mobile_height': mobile_height,
        'desktop_height': desktop_height,
    })


def delete_banner(*, banner_id: UUID) -> None:
    try:
        ledger_store.delete('banners', banner_id)
    except NotFoundError:
        raise BannerNotFoundError()
