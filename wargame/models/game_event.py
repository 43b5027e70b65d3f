"""Game event model for replay and history.

Captures the significant events of a game of War.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class GameEventType(str, Enum):
    """Types of game events that can be recorded."""

    # Game lifecycle
    GAME_STARTED = "GAME_STARTED"
    CARDS_DEALT = "CARDS_DEALT"
    GAME_ENDED = "GAME_ENDED"

    # Rounds
    WAR_DECLARED = "WAR_DECLARED"
    ROUND_WON = "ROUND_WON"
    PLAYER_ELIMINATED = "PLAYER_ELIMINATED"


@dataclass
class GameEvent:
    """Represents a single game event."""

    game_id: str
    event_type: GameEventType
    timestamp: datetime = field(default_factory=_utc_now)
    round_number: int = 0
    player_name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/transmission."""
        return {
            "game_id": self.game_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "round_number": self.round_number,
            "player_name": self.player_name,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            event_type=GameEventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            round_number=data.get("round_number", 0),
            player_name=data.get("player_name"),
            data=data.get("data", {}),
        )


@dataclass
class GameHistory:
    """Complete game history."""

    game_id: str
    created_at: datetime
    ended_at: datetime
    players: list[str]
    winner_name: str | None
    total_rounds: int
    events: list[GameEvent] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        """Wall-clock length of the game."""
        return (self.ended_at - self.created_at).total_seconds()

    def events_of(self, event_type: GameEventType) -> list[GameEvent]:
        """Get all events of one type, in order."""
        return [e for e in self.events if e.event_type == event_type]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "game_id": self.game_id,
            "created_at": self.created_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "players": self.players,
            "winner_name": self.winner_name,
            "total_rounds": self.total_rounds,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameHistory":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            ended_at=datetime.fromisoformat(data["ended_at"]),
            players=data["players"],
            winner_name=data.get("winner_name"),
            total_rounds=data["total_rounds"],
            events=[GameEvent.from_dict(e) for e in data.get("events", [])],
        )
