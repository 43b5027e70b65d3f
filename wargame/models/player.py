"""Player model."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from wargame.exceptions import EmptyDeckError
from wargame.models.card import Card
from wargame.models.deck import Deck


@dataclass(eq=False)
class Player:
    """Represents a player in the game.

    Players compare by identity; name uniqueness is enforced by the roster.

    Attributes:
        name: Player's display name, unique within a roster
        deck: Cards the player owns, drawn from the front

    """

    name: str
    deck: Deck = field(default_factory=Deck)

    @property
    def card_count(self) -> int:
        """Number of cards the player holds."""
        return self.deck.size()

    def has_cards(self) -> bool:
        """Check if the player can still draw."""
        return not self.deck.is_empty()

    def draw(self) -> Card:
        """Draw the front card of the player's deck."""
        try:
            return self.deck.draw_front()
        except EmptyDeckError as e:
            raise EmptyDeckError(f"{self.name} has no cards left", player=self) from e

    def receive(self, cards: Iterable[Card]) -> None:
        """Add won cards at the back of the player's deck."""
        self.deck.append_all(cards)

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name} ({self.card_count} cards)"
