from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class Player:
    name: str
    score: int = 0
    turns_played: int = 0


def rank_players(players: Iterable[Player]) -> list[Player]:
    """Players by cumulative score, highest first; ties keep their seating order."""
    return sorted(players, key=lambda p: p.score, reverse=True)


def winner_of(players: Iterable[Player]) -> Optional[Player]:
    ranked = rank_players(players)
    return ranked[0] if ranked else None
