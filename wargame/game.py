"""Game model driving a full game of War."""

import random
from dataclasses import dataclass, field

from wargame.config import Settings, settings
from wargame.dealing import distribute, settle_leftovers
from wargame.engine import BattleEngine
from wargame.exceptions import EmptyDeckError, GameStateError
from wargame.models.battle import RoundResult
from wargame.models.card import Card
from wargame.models.deck import Deck
from wargame.models.enums import GameState, LeftoverPolicy
from wargame.models.game_event import GameHistory
from wargame.models.player import Player
from wargame.models.roster import Roster
from wargame.services.event_recorder import EventRecorder, event_recorder
from wargame.services.log_service import LogService


@dataclass
class WarGame:
    """Represents a complete game of War.

    Players join while the game is pending. Starting the game deals a deck
    between them; rounds are then played until a single player holds every
    card or the round cap is reached.

    Attributes:
        id: Unique game identifier
        config: Settings the game runs with
        roster: Players still in the game
        state: Current game state
        history: Results of the rounds played so far
        deck: Deck dealt from; keeps leftover cards under the KEEP policy
        discarded: Leftover cards taken out of play by the DISCARD policy

    """

    id: str
    config: Settings = field(default_factory=lambda: settings)
    state: GameState = GameState.PENDING
    history: list[RoundResult] = field(default_factory=list)
    deck: Deck = field(default_factory=Deck)
    discarded: list[Card] = field(default_factory=list)
    recorder: EventRecorder = field(default_factory=lambda: event_recorder, repr=False)
    roster: Roster = field(init=False)

    def __post_init__(self) -> None:
        """Build the roster, engine and logger from the settings."""
        self.roster = Roster(max_players=self.config.max_players)
        self.engine = BattleEngine(self.roster)
        self.log = LogService(self.config.log_level)

    @property
    def rounds_played(self) -> int:
        """Number of completed rounds."""
        return len(self.history)

    def add_player(self, name: str) -> Player:
        """Add a player to the game.

        Raises:
            GameStateError: If the game has already started
            DuplicateNameError: If the name is taken
            CapacityError: If the roster is full

        """
        if self.state != GameState.PENDING:
            raise GameStateError("Players can only join a pending game")
        player = self.roster.add(name)
        self.log.debug({"game": self.id, "event": "player_joined", "player": name})
        return player

    def start(self, deck: Deck | None = None, rng: random.Random | None = None) -> None:
        """Deal the cards and start playing.

        Args:
            deck: Deck to deal from; a shuffled standard deck if omitted
            rng: Random source for shuffling; seeded from the settings if omitted

        """
        if self.state != GameState.PENDING:
            raise GameStateError(f"Game {self.id} already started")
        if len(self.roster) < self.config.min_players:
            raise GameStateError(f"Need at least {self.config.min_players} players to start")

        if deck is not None:
            self.deck = deck
        else:
            self.deck.shuffle(rng or random.Random(self.config.shuffle_seed))

        players = self.roster.players
        policy = self.config.leftover_policy
        cards_per_player = distribute(self.deck, players)
        leftover_count = self.deck.size()
        moved = settle_leftovers(self.deck, players, policy)
        if policy == LeftoverPolicy.DISCARD:
            self.discarded = moved

        self.state = GameState.PLAYING
        self.recorder.start_game(self)
        self.recorder.record_deal(self, cards_per_player, leftover_count)
        self.log.info(
            {
                "game": self.id,
                "event": "game_started",
                "players": len(players),
                "cards_per_player": cards_per_player,
                "leftovers": leftover_count,
                "leftover_policy": self.config.leftover_policy.value,
            }
        )

        # A player dealt nothing cannot play a single round
        if self.engine.eliminate():
            self.log.warning({"game": self.id, "event": "empty_hands_after_deal"})
        if self.is_over():
            self._finish()

    def play_round(self) -> RoundResult:
        """Play one round and knock out players left without cards."""
        if self.state != GameState.PLAYING:
            raise GameStateError(f"Game {self.id} is not in progress")

        number = self.rounds_played + 1
        before = self.roster.players
        try:
            resolution = self.engine.run_round()
        except EmptyDeckError as e:
            self.log.error(
                {
                    "game": self.id,
                    "event": "round_aborted",
                    "round": number,
                    "player": e.player.name if e.player else None,
                    "stranded_cards": len(e.pot),
                }
            )
            raise

        eliminated = tuple(p for p in before if p not in self.roster)
        result = RoundResult(number=number, resolution=resolution, eliminated=eliminated)
        self.history.append(result)
        self.recorder.record_round(self, result)

        self.log.debug(
            {
                "game": self.id,
                "round": number,
                "winner": resolution.winner.name,
                "card": resolution.winning_card,
                "pot": resolution.pot_size,
                "wars": resolution.wars,
            }
        )
        for player in eliminated:
            self.log.info(
                {
                    "game": self.id,
                    "event": "player_eliminated",
                    "round": number,
                    "player": player.name,
                }
            )

        if self.is_over():
            self._finish()
        return result

    def play(self, max_rounds: int | None = None) -> Player | None:
        """Play rounds until the game is decided or the round cap is hit.

        Returns:
            The winner, or None if the cap ended the game first

        """
        limit = max_rounds or self.config.max_rounds
        while self.state == GameState.PLAYING and self.rounds_played < limit:
            self.play_round()

        if self.state == GameState.PLAYING:
            self.log.warning(
                {"game": self.id, "event": "round_cap_reached", "rounds": self.rounds_played}
            )
            self._finish()
        return self.get_winner()

    def is_over(self) -> bool:
        """Check if at most one player is left."""
        return len(self.roster) <= 1

    def get_winner(self) -> Player | None:
        """Get the winning player, once only one is left."""
        if self.state != GameState.ENDED or len(self.roster) != 1:
            return None
        return self.roster.players[0]

    def _finish(self) -> GameHistory | None:
        self.state = GameState.ENDED
        winner = self.get_winner()
        self.log.info(
            {
                "game": self.id,
                "event": "game_ended",
                "rounds": self.rounds_played,
                "winner": winner.name if winner else None,
            }
        )
        return self.recorder.end_game(self)

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game {self.id}: {len(self.roster)} players, "
            f"Round {self.rounds_played}, State: {self.state.value}"
        )
