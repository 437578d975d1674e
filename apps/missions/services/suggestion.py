"""Daily mission idea from the text-generation collaborator."""

import logging

from apps.accounts.services import generate_text
from apps.ledger.exceptions import UnavailableError

logger = logging.getLogger(__name__)

MIN_SUGGESTED_POINTS = 50
MAX_SUGGESTED_POINTS = 200

FALLBACK_SUGGESTION = {
    'title': 'Daily Reading',
    'description': 'Read a good book for 30 minutes and write down your favourite sentence.',
    'points': 100,
}

SUGGESTION_PROMPT = (
    'You are planning activities at a tutoring workshop. Suggest one short, '
    'achievable daily learning mission for a student{context}. Reply as JSON '
    'with the keys "title" (max 6 words), "description" (one sentence) and '
    '"points" (an integer between {low} and {high}).'
)


def suggest_daily_mission(*, account=None) -> dict:
    """
    Best-effort mission suggestion as ``{title, description, points}``.

    Returns the fixed fallback when the collaborator is unavailable or its
    reply is unusable.
    """
    context = ''
    if account is not None:
        context = f' who has earned {account.total_earned} points so far'
    prompt = SUGGESTION_PROMPT.format(context=context, low=MIN_SUGGESTED_POINTS, high=MAX_SUGGESTED_POINTS)

    try:
        reply = generate_text(prompt, json_mode=True)
    except UnavailableError:
        return dict(FALLBACK_SUGGESTION)

    try:
        title = str(reply['title']).strip()
        description = str(reply.get('description', '')).strip()
        points = int(reply['points'])
    except (KeyError, TypeError, ValueError, AttributeError):
        logger.warning('Unusable mission suggestion: %r', reply)
        return dict(FALLBACK_SUGGESTION)

    if not title:
        return dict(FALLBACK_SUGGESTION)

    return {
        'title': title,
        'description': description,
        'points': min(MAX_SUGGESTED_POINTS, max(MIN_SUGGESTED_POINTS, points)),
    }
