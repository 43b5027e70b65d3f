"""Roster of active players."""

from collections.abc import Iterable, Iterator

from wargame.exceptions import CapacityError, DuplicateNameError
from wargame.models.enums import MAX_PLAYERS, MIN_PLAYERS
from wargame.models.player import Player


class Roster:
    """Ordered collection of the players still in the game.

    Join order is kept and drives the order in which players draw.
    """

    def __init__(self, max_players: int = MAX_PLAYERS) -> None:
        """Initialize an empty roster."""
        self.max_players = max_players
        self._players: list[Player] = []

    @property
    def players(self) -> list[Player]:
        """Players still in the game, in join order."""
        return list(self._players)

    def add(self, name: str) -> Player:
        """Create a player with an empty deck and add them.

        Raises:
            DuplicateNameError: If the name is already taken
            CapacityError: If the roster is full

        """
        player = Player(name)
        self.add_player(player)
        return player

    def add_player(self, player: Player) -> None:
        """Add an existing player to the roster."""
        if self.get(player.name) is not None:
            raise DuplicateNameError(player.name)
        if self.is_full():
            raise CapacityError(self.max_players)
        self._players.append(player)

    def get(self, name: str) -> Player | None:
        """Get a player by name."""
        for player in self._players:
            if player.name == name:
                return player
        return None

    def remove(self, player: Player) -> None:
        """Remove a player; does nothing if they are already gone."""
        self._players = [p for p in self._players if p is not player]

    def remove_many(self, players: Iterable[Player]) -> None:
        """Remove several players."""
        for player in players:
            self.remove(player)

    def is_full(self) -> bool:
        """Check if roster is at max capacity."""
        return len(self._players) >= self.max_players

    def can_start(self) -> bool:
        """Check if there are enough players for a game."""
        return len(self._players) >= MIN_PLAYERS

    def total_cards(self) -> int:
        """Count the cards held across all players."""
        return sum(p.card_count for p in self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __contains__(self, player: object) -> bool:
        return any(p is player for p in self._players)

    def __str__(self) -> str:
        """Return string representation."""
        return ", ".join(str(p) for p in self._players)
