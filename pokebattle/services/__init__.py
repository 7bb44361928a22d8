"""
PokeBattle services.

Card acquisition with retry and fallback, HP derivation and battle
resolution.
"""

from pokebattle.services.battle import BattleOutcome, decide_battle
from pokebattle.services.battle_cards import fetch_two_battle_cards
from pokebattle.services.fallback import load_fallback_cards, parse_fallback_payload, pick_two
from pokebattle.services.hp import MAX_DERIVED_HP, MIN_DERIVED_HP, derive_hp
from pokebattle.services.retry import backoff_delay, retry_with_backoff

__all__ = [
    "MAX_DERIVED_HP",
    "MIN_DERIVED_HP",
    "BattleOutcome",
    "backoff_delay",
    "decide_battle",
    "derive_hp",
    "fetch_two_battle_cards",
    "load_fallback_cards",
    "parse_fallback_payload",
    "pick_two",
    "retry_with_backoff",
]
