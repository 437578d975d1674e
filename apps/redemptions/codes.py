"""
Voucher code generation.

Format: ``RDM-<base36 ms timestamp>-<4 hex of product id>-<4 random chars>``,
e.g. ``RDM-LZ4K2Q1A-3F9C-K7PX``. Random characters come from an uppercase
alphabet without look-alikes (0/O, 1/I/L) so staff can type codes by hand.
"""

import secrets
import time

CODE_PREFIX = 'RDM'
CODE_ALPHABET = 'ABCDEFGHJKMNPQRSTUVWXYZ23456789'
BASE36_DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'


def to_base36(value: int) -> str:
    if value == 0:
        return '0'
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return ''.join(reversed(digits))


def generate_voucher_code(product_id, *, now_ms=None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    product_part = str(product_id).replace('-', '')[:4].upper()
    random_part = ''.join(secrets.choice(CODE_ALPHABET) for _ in range(4))
    return f'{CODE_PREFIX}-{to_base36(now_ms)}-{product_part}-{random_part}'


def normalize_code(code: str) -> str:
    """Manual entry is case- and whitespace-insensitive."""
    return ''.join(code.split()).upper()
