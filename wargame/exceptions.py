"""Error types raised by the War game."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wargame.models.card import Card
    from wargame.models.player import Player


class WarGameError(Exception):
    """Base class for all War game errors."""


class DuplicateNameError(WarGameError):
    """A player with the same name is already in the roster."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player name already taken: {name!r}")
        self.name = name


class CapacityError(WarGameError):
    """The roster is full."""

    def __init__(self, max_players: int) -> None:
        super().__init__(f"Roster is full ({max_players} players)")
        self.max_players = max_players


class EmptyDeckError(WarGameError):
    """A card was drawn from an exhausted deck.

    Attributes:
        player: Owner of the empty deck, when known
        pot: Cards already drawn in the aborted round (set by the engine)

    """

    def __init__(
        self, message: str = "Cannot draw from an empty deck", player: Player | None = None
    ) -> None:
        super().__init__(message)
        self.player = player
        self.pot: list[Card] = []


class RosterIntegrityError(EmptyDeckError):
    """The roster was not fit to start a round."""


class GameStateError(WarGameError):
    """Operation not allowed in the current game state."""
