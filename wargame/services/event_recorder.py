"""Event recorder service for capturing game events during play.

Used for game history and replay.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from wargame.models.game_event import GameEvent, GameEventType, GameHistory

if TYPE_CHECKING:
    from wargame.game import WarGame
    from wargame.models.battle import RoundResult


class EventRecorder:
    """Records game events for later replay."""

    def __init__(self) -> None:
        """Initialize the event recorder.

        Sets up in-memory storage for events of running games and completed game histories.
        """
        # Key: game_id, Value: list of events
        self._events: dict[str, list[GameEvent]] = {}
        self._game_start_times: dict[str, datetime] = {}
        self._players: dict[str, list[str]] = {}
        self._histories: dict[str, GameHistory] = {}

    def start_game(self, game: "WarGame") -> None:
        """Initialize event recording for a new game."""
        self._events[game.id] = []
        self._game_start_times[game.id] = datetime.now(UTC)
        self._players[game.id] = [p.name for p in game.roster]

        self.record_event(
            game_id=game.id,
            event_type=GameEventType.GAME_STARTED,
            data={"players": self._players[game.id]},
        )

    def record_event(
        self,
        game_id: str,
        event_type: GameEventType,
        round_number: int = 0,
        player_name: str | None = None,
        data: dict | None = None,
    ) -> None:
        """Record a single game event."""
        if game_id not in self._events:
            self._events[game_id] = []

        event = GameEvent(
            game_id=game_id,
            event_type=event_type,
            round_number=round_number,
            player_name=player_name,
            data=data or {},
        )
        self._events[game_id].append(event)

    def record_deal(self, game: "WarGame", cards_per_player: int, leftovers: int) -> None:
        """Record the opening deal."""
        self.record_event(
            game_id=game.id,
            event_type=GameEventType.CARDS_DEALT,
            data={
                "cards_per_player": cards_per_player,
                "leftovers": leftovers,
                "decks": {p.name: p.card_count for p in game.roster},
            },
        )

    def record_round(self, game: "WarGame", result: "RoundResult") -> None:
        """Record a finished round: wars, winner and eliminations."""
        resolution = result.resolution
        if resolution.wars:
            self.record_event(
                game_id=game.id,
                event_type=GameEventType.WAR_DECLARED,
                round_number=result.number,
                data={"wars": resolution.wars},
            )

        self.record_event(
            game_id=game.id,
            event_type=GameEventType.ROUND_WON,
            round_number=result.number,
            player_name=resolution.winner.name,
            data={
                "winning_card": str(resolution.winning_card),
                "pot": [str(card) for card in resolution.pot],
            },
        )

        for player in result.eliminated:
            self.record_event(
                game_id=game.id,
                event_type=GameEventType.PLAYER_ELIMINATED,
                round_number=result.number,
                player_name=player.name,
            )

    def get_events(self, game_id: str) -> list[GameEvent]:
        """Get events recorded so far for a game."""
        return list(self._events.get(game_id, []))

    def end_game(self, game: "WarGame") -> GameHistory | None:
        """Finalize game recording and create history."""
        if game.id not in self._events:
            return None

        winner = game.get_winner()
        self.record_event(
            game_id=game.id,
            event_type=GameEventType.GAME_ENDED,
            round_number=game.rounds_played,
            player_name=winner.name if winner else None,
            data={"decks": {p.name: p.card_count for p in game.roster}},
        )

        history = GameHistory(
            game_id=game.id,
            created_at=self._game_start_times.pop(game.id, datetime.now(UTC)),
            ended_at=datetime.now(UTC),
            players=self._players.pop(game.id, []),
            winner_name=winner.name if winner else None,
            total_rounds=game.rounds_played,
            events=self._events.pop(game.id),
        )
        self._histories[game.id] = history
        return history

    def get_history(self, game_id: str) -> GameHistory | None:
        """Get a completed game history."""
        return self._histories.get(game_id)

    def clear(self) -> None:
        """Drop all recorded state."""
        self._events.clear()
        self._game_start_times.clear()
        self._players.clear()
        self._histories.clear()


# Global instance
event_recorder = EventRecorder()
