"""Enums and constants for the game."""

from enum import Enum, IntEnum


class Rank(IntEnum):
    """Card ranks, ordered from lowest to highest."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """Short face label (2-10, J, Q, K, A)."""
        if self <= Rank.TEN:
            return str(self.value)
        return self.name[0]


class Suit(str, Enum):
    """Card suits. Irrelevant to battle resolution."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        """Unicode suit symbol."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class GameState(str, Enum):
    """Game states during the lifecycle."""

    PENDING = "PENDING"
    PLAYING = "PLAYING"
    ENDED = "ENDED"


class LeftoverPolicy(str, Enum):
    """What to do with cards that do not split evenly between players."""

    KEEP = "keep"  # leave them in the source deck
    DISCARD = "discard"
    ASSIGN = "assign"  # give them all to one player


# Game configuration constants
MAX_PLAYERS = 52
MIN_PLAYERS = 2
