"""Decide the outcome of a battle between two cards."""

from dataclasses import dataclass

from pokebattle.models.card import BattleCard


@dataclass(frozen=True, slots=True)
class BattleOutcome:
    """Result of comparing two cards by HP."""

    winner: BattleCard | None
    is_draw: bool
    message: str


def decide_battle(left: BattleCard, right: BattleCard) -> BattleOutcome:
    """
    Compare two cards; the higher HP wins.

    Args:
        left: First card
        right: Second card

    Returns:
        BattleOutcome with the winner, or no winner on equal HP
    """
    if left.hp == right.hp:
        return BattleOutcome(winner=None, is_draw=True, message="It's a draw!")

    winner = left if left.hp > right.hp else right
    return BattleOutcome(winner=winner, is_draw=False, message=f"{winner.name} wins!")
