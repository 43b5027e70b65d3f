"""Deck model: a FIFO pile of cards."""

import random
from collections import deque
from collections.abc import Iterable, Iterator

from wargame.exceptions import EmptyDeckError
from wargame.models.card import Card, get_all_cards


class Deck:
    """
    Represents an ordered pile of cards.

    Cards are always drawn from the front and added at the back, so a
    player's winnings go under the cards they still hold.
    """

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        """Initialize a deck, empty unless cards are given (front first)."""
        self.cards: deque[Card] = deque(cards or ())

    @classmethod
    def standard(cls, rng: random.Random | None = None) -> "Deck":
        """Build a shuffled 52-card deck."""
        deck = cls()
        deck.shuffle(rng)
        return deck

    def fill(self) -> None:
        """Fill the deck with all 52 cards."""
        self.cards = deque(get_all_cards())

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck, filling it first if it is empty.

        Args:
            rng: Random source to shuffle with; module-level random if omitted

        """
        if not self.cards:
            self.fill()
        shuffled = list(self.cards)
        (rng or random).shuffle(shuffled)
        self.cards = deque(shuffled)

    def draw_front(self) -> Card:
        """Remove and return the front card.

        Raises:
            EmptyDeckError: If the deck has no cards left

        """
        if not self.cards:
            raise EmptyDeckError()
        return self.cards.popleft()

    def append_all(self, cards: Iterable[Card]) -> None:
        """Add cards at the back of the deck, keeping their order."""
        self.cards.extend(cards)

    def size(self) -> int:
        """Number of cards left."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if the deck has no cards."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        """Return string representation."""
        return " ".join(str(card) for card in self.cards)
