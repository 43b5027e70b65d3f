"""Dealing the starting cards."""

from wargame.models.card import Card
from wargame.models.deck import Deck
from wargame.models.enums import LeftoverPolicy
from wargame.models.player import Player


def distribute(source: Deck, players: list[Player]) -> int:
    """Deal an equal share of the source deck to every player.

    Cards go out one at a time, each pass giving every player the next card
    from the front of the source. Cards that do not split evenly stay in the
    source deck.

    Args:
        source: Deck to deal from; it is consumed
        players: Players to deal to, in dealing order

    Returns:
        Number of cards each player received

    """
    if not players:
        raise ValueError("Cannot deal to zero players")

    cards_per_player = source.size() // len(players)
    for _ in range(cards_per_player):
        for player in players:
            player.receive([source.draw_front()])
    return cards_per_player


def settle_leftovers(
    source: Deck,
    players: list[Player],
    policy: LeftoverPolicy,
    recipient: Player | None = None,
) -> list[Card]:
    """Decide what happens to cards left over after dealing.

    Args:
        source: Deck holding the leftovers
        players: Players that were dealt to
        policy: Leftover policy to apply
        recipient: Player receiving the cards under ASSIGN (first player by default)

    Returns:
        Cards taken out of the source deck

    """
    if policy == LeftoverPolicy.KEEP or source.is_empty():
        return []

    target = None
    if policy == LeftoverPolicy.ASSIGN:
        target = recipient or (players[0] if players else None)
        if target is None:
            raise ValueError("No player to assign leftover cards to")

    leftovers = [source.draw_front() for _ in range(source.size())]
    if target is not None:
        target.receive(leftovers)
    return leftovers
