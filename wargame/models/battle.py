"""Battle entries and their results."""

from dataclasses import dataclass

from wargame.models.card import Card
from wargame.models.player import Player


@dataclass(frozen=True)
class BattleEntry:
    """A card played by a player in one battle or war."""

    card: Card
    player: Player

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.player.name}: {self.card}"


@dataclass(frozen=True)
class BattleResolution:
    """Outcome of a full round, wars included.

    Attributes:
        winner: Player who takes the pot
        pot: Every card drawn during the round, in draw order
        winning_card: Card that decided the round
        wars: Number of war escalations played

    """

    winner: Player
    pot: tuple[Card, ...]
    winning_card: Card
    wars: int = 0

    @property
    def pot_size(self) -> int:
        """Number of cards in the pot."""
        return len(self.pot)

    def __str__(self) -> str:
        """Return string representation."""
        wars = f" after {self.wars} war(s)" if self.wars else ""
        return f"{self.winner.name} wins {self.pot_size} cards with {self.winning_card}{wars}"


@dataclass(frozen=True)
class RoundResult:
    """A numbered round and the players it knocked out."""

    number: int
    resolution: BattleResolution
    eliminated: tuple[Player, ...] = ()
