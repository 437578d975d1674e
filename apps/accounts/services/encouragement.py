"""Encouragement message for the student dashboard."""

from apps.ledger.exceptions import UnavailableError

from ..ranks import next_rank_for
from .text_generation import generate_text

FALLBACK_ENCOURAGEMENT = 'Keep going! Every mission brings you closer to your next rank.'

ENCOURAGEMENT_PROMPT = (
    'You are a warm tutor at a learning workshop. Write one short, upbeat '
    'sentence (max 30 words) encouraging the student {name}. They currently '
    'hold the rank "{rank}" with {total} lifetime points{next_rank}. '
    'Reply with the sentence only.'
)


def generate_encouragement(*, account, rank=None) -> str:
    """Best-effort personalised message; returns the fixed fallback on any failure."""
    rank = rank or account.rank
    upcoming = next_rank_for(account.total_earned)
    next_rank = (
        f' and need {upcoming.threshold - account.total_earned} more for "{upcoming.name}"'
        if upcoming else ''
    )
    prompt = ENCOURAGEMENT_PROMPT.format(
        name=account.name,
        rank=rank.name,
        total=account.total_earned,
        next_rank=next_rank,
    )
    try:
        message = generate_text(prompt)
    except UnavailableError:
        return FALLBACK_ENCOURAGEMENT
    return message or FALLBACK_ENCOURAGEMENT
