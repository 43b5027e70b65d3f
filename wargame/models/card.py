"""Card model and the standard 52-card catalogue."""

from dataclasses import dataclass

from wargame.models.enums import Rank, Suit


@dataclass(frozen=True)
class Card:
    """Represents a playing card.

    Cards compare by value, but during a game each card exists once and is
    only ever moved between decks and the pot.

    Attributes:
        rank: Card rank, the only thing that matters in a battle
        suit: Card suit

    """

    rank: Rank
    suit: Suit

    def beats(self, other: "Card") -> bool:
        """Check if this card outranks another card."""
        return self.rank > other.rank

    def ties(self, other: "Card") -> bool:
        """Check if both cards share a rank."""
        return self.rank == other.rank

    def __str__(self) -> str:
        """Return string representation of card."""
        return f"{self.rank.label}{self.suit.symbol}"


# All cards in a standard deck (52 total), suit by suit
_CARDS: list[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]


def get_all_cards() -> list[Card]:
    """Get all cards in a standard deck."""
    return _CARDS.copy()
