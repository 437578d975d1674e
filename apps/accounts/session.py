"""
Cached account snapshot in the Django session.

The snapshot is advisory, for display only. Balance and stock decisions
always re-read the database.
"""

from django.conf import settings


def remember_account(request, account_data: dict) -> None:
    request.session[settings.SESSION_ACCOUNT_KEY] = _jsonable(account_data)


def cached_account(request):
    return request.session.get(settings.SESSION_ACCOUNT_KEY)


def forget_account(request) -> None:
    request.session.pop(settings.SESSION_ACCOUNT_KEY, None)


def _jsonable(data):
    if isinstance(data, dict):
        return {key: _jsonable(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_jsonable(value) for value in data]
    if isinstance(data, (str, int, float, bool)) or data is None:
        return data
    return str(data)
