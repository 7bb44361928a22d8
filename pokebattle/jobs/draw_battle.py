"""
Draw a battle from the command line.

Fetches two cards, prints them with the winner, and marks draws that came
from the offline fallback dataset.
"""

import asyncio
import logging
import sys

from pokebattle.models.card import BattleCard
from pokebattle.models.failure import FallbackUnavailableError
from pokebattle.services.battle import decide_battle
from pokebattle.services.battle_cards import fetch_two_battle_cards

logger = logging.getLogger(__name__)

FALLBACK_MARKER = "Offline fallback (API down)"


def format_card(card: BattleCard) -> str:
    """One-line summary of a card."""
    return f"{card.name} (HP: {card.hp})"


async def run_draw() -> list[str]:
    """
    Draw one battle.

    Returns:
        Output lines for the battle

    Raises:
        FallbackUnavailableError: If no card source is available
    """
    result = await fetch_two_battle_cards()
    outcome = decide_battle(result.left, result.right)

    lines = [
        f"{format_card(result.left)} VS {format_card(result.right)}",
        outcome.message,
    ]
    if result.from_fallback:
        lines.append(FALLBACK_MARKER)
    return lines


def main() -> int:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        lines = asyncio.run(run_draw())
    except FallbackUnavailableError as e:
        logger.error("%s (%s)", e.message, e.detail)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
