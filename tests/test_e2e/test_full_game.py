"""End-to-end tests for complete games of War."""

import random

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from wargame.config import Settings
from wargame.exceptions import DuplicateNameError, EmptyDeckError, GameStateError
from wargame.game import WarGame
from wargame.models.card import Card
from wargame.models.deck import Deck
from wargame.models.enums import GameState, LeftoverPolicy, Rank, Suit
from wargame.models.game_event import GameEventType
from wargame.services.event_recorder import event_recorder


def stacked_deck(*ranks: Rank) -> Deck:
    """Build a deck in a known order, front first."""
    suits = list(Suit)
    return Deck(Card(rank, suits[i % len(suits)]) for i, rank in enumerate(ranks))


def two_player_game(**config) -> WarGame:
    """Create a pending game with alice and bob."""
    game = WarGame(id="test-game", config=Settings(**config))
    game.add_player("alice")
    game.add_player("bob")
    return game


# =============================================================================
# LIFECYCLE
# =============================================================================


class TestLifecycle:
    """Test game state transitions."""

    def test_new_game_is_pending(self):
        """Games start pending with no rounds."""
        game = two_player_game()
        assert game.state == GameState.PENDING
        assert game.rounds_played == 0
        assert game.get_winner() is None

    def test_start_deals_and_plays(self):
        """Starting deals the deck and moves to PLAYING."""
        game = two_player_game()
        game.start(rng=random.Random(7))

        assert game.state == GameState.PLAYING
        assert [p.card_count for p in game.roster] == [26, 26]
        assert game.deck.is_empty()

    def test_cannot_start_alone(self):
        """One player is not enough."""
        game = WarGame(id="solo", config=Settings())
        game.add_player("alice")
        with pytest.raises(GameStateError):
            game.start()

    def test_cannot_start_twice(self):
        """A game is dealt once."""
        game = two_player_game()
        game.start(rng=random.Random(1))
        with pytest.raises(GameStateError):
            game.start()

    def test_cannot_join_after_start(self):
        """Players join only before the deal."""
        game = two_player_game()
        game.start(rng=random.Random(1))
        with pytest.raises(GameStateError):
            game.add_player("carol")

    def test_cannot_play_before_start(self):
        """Rounds need a started game."""
        with pytest.raises(GameStateError):
            two_player_game().play_round()

    def test_duplicate_name(self):
        """Roster errors reach the caller."""
        game = two_player_game()
        with pytest.raises(DuplicateNameError):
            game.add_player("alice")
        assert len(game.roster) == 2


# =============================================================================
# FULL GAMES
# =============================================================================


class TestFullGame:
    """Test games played to the end."""

    def test_stacked_game(self):
        """Alice holds the high cards and wins in two rounds."""
        game = two_player_game()
        alice, bob = game.roster.players
        game.start(deck=stacked_deck(Rank.ACE, Rank.TWO, Rank.KING, Rank.THREE))

        first = game.play_round()
        assert first.number == 1
        assert first.resolution.winner is alice
        assert first.eliminated == ()
        assert bob.card_count == 1

        second = game.play_round()
        assert second.eliminated == (bob,)

        assert game.state == GameState.ENDED
        assert game.get_winner() is alice
        assert alice.card_count == 4
        assert game.rounds_played == 2

    def test_play_until_winner(self):
        """play() runs rounds until one player is left."""
        game = two_player_game()
        alice = game.roster.get("alice")
        game.start(deck=stacked_deck(Rank.ACE, Rank.TWO, Rank.KING, Rank.THREE))

        assert game.play() is alice
        assert game.is_over()

    def test_round_cap(self):
        """Hitting the round cap ends the game without a winner."""
        game = two_player_game()
        game.start(deck=stacked_deck(Rank.ACE, Rank.TWO, Rank.KING, Rank.THREE))

        assert game.play(max_rounds=1) is None
        assert game.state == GameState.ENDED
        assert game.rounds_played == 1
        assert len(game.roster) == 2

    def test_play_round_after_end(self):
        """No rounds after the game is over."""
        game = two_player_game()
        game.start(deck=stacked_deck(Rank.ACE, Rank.TWO, Rank.KING, Rank.THREE))
        game.play()
        with pytest.raises(GameStateError):
            game.play_round()

    def test_war_abort_propagates(self):
        """Running out of cards mid-war aborts the round."""
        game = two_player_game()
        game.start(deck=stacked_deck(Rank.QUEEN, Rank.QUEEN, Rank.FIVE))

        with pytest.raises(EmptyDeckError) as exc_info:
            game.play_round()

        assert len(exc_info.value.pot) == 2
        assert game.history == []
        assert game.state == GameState.PLAYING

    def test_nobody_dealt_cards(self):
        """A deck too small to deal ends the game at once."""
        game = two_player_game()
        game.add_player("carol")
        game.start(deck=stacked_deck(Rank.ACE, Rank.KING))

        assert game.state == GameState.ENDED
        assert len(game.roster) == 0
        assert game.get_winner() is None


# =============================================================================
# LEFTOVERS
# =============================================================================


class TestLeftovers:
    """Test the leftover policies in a real deal."""

    def three_players(self, policy: LeftoverPolicy) -> WarGame:
        game = WarGame(id="leftovers", config=Settings(leftover_policy=policy))
        for name in ("alice", "bob", "carol"):
            game.add_player(name)
        game.start(rng=random.Random(3))
        return game

    def test_keep(self):
        """KEEP leaves the odd card in the game's deck."""
        game = self.three_players(LeftoverPolicy.KEEP)
        assert game.deck.size() == 1
        assert game.roster.total_cards() == 51

    def test_discard(self):
        """DISCARD takes the odd card out of play."""
        game = self.three_players(LeftoverPolicy.DISCARD)
        assert len(game.discarded) == 1
        assert game.deck.is_empty()
        assert game.roster.total_cards() == 51

    def test_assign(self):
        """ASSIGN hands the odd card to the first player."""
        game = self.three_players(LeftoverPolicy.ASSIGN)
        assert [p.card_count for p in game.roster] == [18, 17, 17]
        assert game.discarded == []


# =============================================================================
# EVENTS
# =============================================================================


class TestEvents:
    """Test the recorded game history."""

    def test_history_recorded(self):
        """A finished game leaves a complete history."""
        game = two_player_game()
        game.start(deck=stacked_deck(Rank.ACE, Rank.TWO, Rank.KING, Rank.THREE))
        game.play()

        history = event_recorder.get_history(game.id)
        assert history is not None
        assert history.players == ["alice", "bob"]
        assert history.winner_name == "alice"
        assert history.total_rounds == 2
        assert [e.event_type for e in history.events] == [
            GameEventType.GAME_STARTED,
            GameEventType.CARDS_DEALT,
            GameEventType.ROUND_WON,
            GameEventType.ROUND_WON,
            GameEventType.PLAYER_ELIMINATED,
            GameEventType.GAME_ENDED,
        ]
        eliminated = history.events_of(GameEventType.PLAYER_ELIMINATED)
        assert eliminated[0].player_name == "bob"
        assert eliminated[0].round_number == 2

    def test_war_recorded(self):
        """Rounds with a war record how many were fought."""
        game = two_player_game()
        game.start(deck=stacked_deck(Rank.QUEEN, Rank.QUEEN, Rank.NINE, Rank.FOUR))
        game.play_round()

        history = event_recorder.get_history(game.id)
        wars = history.events_of(GameEventType.WAR_DECLARED)
        assert len(wars) == 1
        assert wars[0].data == {"wars": 1}


# =============================================================================
# RANDOM GAMES
# =============================================================================


class TestRandomGames:
    """Random games never create or lose cards."""

    @given(seed=st.integers(0, 100_000), players=st.integers(2, 5))
    @settings(
        max_examples=30,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    def test_cards_conserved(self, seed: int, players: int) -> None:
        """Decks, kept leftovers and stranded cards always add up to 52."""
        event_recorder.clear()
        game = WarGame(id=f"random-{seed}", config=Settings(leftover_policy=LeftoverPolicy.KEEP))
        for i in range(players):
            game.add_player(f"player-{i}")
        game.start(rng=random.Random(seed))

        stranded = 0
        try:
            winner = game.play(max_rounds=300)
        except EmptyDeckError as e:
            stranded = len(e.pot)
            winner = None

        assert game.roster.total_cards() + game.deck.size() + stranded == 52
        if winner is not None:
            assert winner.card_count == 52 - game.deck.size()
        for result in game.history:
            for player in result.eliminated:
                assert player.card_count == 0
