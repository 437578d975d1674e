"""Services for wish business logic."""

from .exceptions import (
    WishNotFoundError,
    CooldownActiveError,
    NoActiveCooldownError,
    WishDeleteForbiddenError,
)
from .cooldown import cooldown_status, reset_cooldown, CooldownStatus
from .wish_board import list_wishes, get_wish, post_wish, like_wish, delete_wish

__all__ = [
    # Exceptions
    'WishNotFoundError',
    'CooldownActiveError',
    'NoActiveCooldownError',
    'WishDeleteForbiddenError',
    # Services
    'cooldown_status',
    'reset_cooldown',
    'CooldownStatus',
    'list_wishes',
    'get_wish',
    'post_wish',
    'like_wish',
    'delete_wish',
]
