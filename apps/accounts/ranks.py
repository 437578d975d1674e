"""
Rank table.

Rank is a pure function of lifetime-earned points and is never stored.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Rank:
    name: str
    threshold: int
    icon: str


RANKS = (
    Rank('Apprentice', 0, '🌱'),
    Rank('Eager Learner', 500, '📖'),
    Rank('Knowledge Explorer', 2000, '🔍'),
    Rank('Skilled Practitioner', 5000, '🛠️'),
    Rank('Domain Navigator', 10000, '🚀'),
    Rank('Legendary Grandmaster', 30000, '👑'),
)


def rank_for(total_earned: int) -> Rank:
    """Return the highest rank whose threshold ``total_earned`` has reached."""
    current = RANKS[0]
    for rank in RANKS:
        if total_earned >= rank.threshold:
            current = rank
    return current


def next_rank_for(total_earned: int) -> Optional[Rank]:
    """Return the rank after the current one, or None at the top."""
    for rank in RANKS:
        if rank.threshold > total_earned:
            return rank
    return None
