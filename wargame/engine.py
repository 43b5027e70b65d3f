"""Battle resolution for War.

A round starts with every player in the roster laying down one card. If two
or more cards share a rank a war is declared: every remaining player lays down
another card and the new batch is compared again, until no rank is shared or
only one player is left. The highest card of the last batch takes the whole
pot. Players left without cards after the pot is awarded are eliminated.
"""

from wargame.exceptions import EmptyDeckError, RosterIntegrityError
from wargame.models.battle import BattleEntry, BattleResolution
from wargame.models.card import Card
from wargame.models.enums import Rank
from wargame.models.player import Player
from wargame.models.roster import Roster


def identify_pairs(entries: list[BattleEntry]) -> dict[Rank, list[BattleEntry]]:
    """Group entries by rank, keeping only ranks played more than once.

    Args:
        entries: Cards played in one battle or war

    Returns:
        Tied ranks mapped to their entries, both in play order

    """
    by_rank: dict[Rank, list[BattleEntry]] = {}
    for entry in entries:
        by_rank.setdefault(entry.card.rank, []).append(entry)
    return {rank: group for rank, group in by_rank.items() if len(group) > 1}


def highest_entry(entries: list[BattleEntry]) -> BattleEntry:
    """Return the first entry holding the highest rank."""
    best = entries[0]
    for entry in entries[1:]:
        if entry.card.beats(best.card):
            best = entry
    return best


class BattleEngine:
    """Runs rounds of War over a roster.

    The engine holds the roster for the duration of a round and mutates it in
    place: decks are drawn, the pot is awarded and empty-handed players are
    removed. It neither logs nor recovers from errors.
    """

    def __init__(self, roster: Roster) -> None:
        """Initialize the engine for a roster."""
        self.roster = roster

    def draw_entries(self, players: list[Player] | None = None) -> list[BattleEntry]:
        """Draw one card from each player, in roster order."""
        if players is None:
            players = self.roster.players

        entries: list[BattleEntry] = []
        for player in players:
            try:
                entries.append(BattleEntry(player.draw(), player))
            except EmptyDeckError as e:
                e.pot = [entry.card for entry in entries]
                raise
        return entries

    def initiate_battle(self, entries: list[BattleEntry]) -> BattleResolution:
        """Resolve a battle from its opening cards, playing wars as needed.

        Every war draws from all players still in the roster, not only the
        tied ones. Cards drawn before a failed draw are attached to the raised
        error as ``pot``.

        Args:
            entries: Opening cards, one per player

        Returns:
            The round winner, the pot and the winning card

        Raises:
            EmptyDeckError: If a player runs out of cards during a war

        """
        if not entries:
            raise ValueError("A battle needs at least one entry")

        pot: list[Card] = [entry.card for entry in entries]
        latest = entries
        wars = 0

        while identify_pairs(latest) and len(self.roster) > 1:
            try:
                latest = self.draw_entries()
            except EmptyDeckError as e:
                e.pot = pot + e.pot
                raise
            pot.extend(entry.card for entry in latest)
            wars += 1

        best = highest_entry(latest)
        return BattleResolution(
            winner=best.player,
            pot=tuple(pot),
            winning_card=best.card,
            wars=wars,
        )

    def award(self, resolution: BattleResolution) -> None:
        """Move the whole pot to the back of the winner's deck."""
        resolution.winner.receive(resolution.pot)

    def ineligible_players(self) -> list[Player]:
        """Players who can no longer draw."""
        return [player for player in self.roster if not player.has_cards()]

    def eliminate(self) -> list[Player]:
        """Remove players with empty decks and return them."""
        out = self.ineligible_players()
        self.roster.remove_many(out)
        return out

    def check_roster(self) -> None:
        """Make sure a round can start.

        Raises:
            RosterIntegrityError: If the roster is empty or a player has no cards

        """
        if not len(self.roster):
            raise RosterIntegrityError("Cannot run a round without players")
        for player in self.roster:
            if not player.has_cards():
                raise RosterIntegrityError(
                    f"{player.name} entered the round with an empty deck", player=player
                )

    def run_round(self) -> BattleResolution:
        """Play one full round: draw, resolve, award and eliminate."""
        self.check_roster()
        resolution = self.initiate_battle(self.draw_entries())
        self.award(resolution)
        self.eliminate()
        return resolution
