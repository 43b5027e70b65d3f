"""Game domain models."""

from wargame.models.battle import BattleEntry, BattleResolution, RoundResult
from wargame.models.card import Card
from wargame.models.deck import Deck
from wargame.models.enums import GameState, LeftoverPolicy, Rank, Suit
from wargame.models.player import Player
from wargame.models.roster import Roster

__all__ = [
    "BattleEntry",
    "BattleResolution",
    "Card",
    "Deck",
    "GameState",
    "LeftoverPolicy",
    "Player",
    "Rank",
    "Roster",
    "RoundResult",
    "Suit",
]
