"""
Deterministic HP derivation.

The fallback dataset's HP values are not trusted, so HP is synthesized
from the card name instead. The same name always yields the same HP, in
this process and any other.
"""

MIN_DERIVED_HP = 40
HP_SPREAD = 151
MAX_DERIVED_HP = MIN_DERIVED_HP + HP_SPREAD - 1


def derive_hp(identifier: str) -> int:
    """
    Derive a stable HP value from a card identifier.

    Args:
        identifier: Card name (used as the key in the fallback path)

    Returns:
        HP in the range [MIN_DERIVED_HP, MAX_DERIVED_HP]
    """
    total = sum(ord(ch) for ch in identifier)
    return MIN_DERIVED_HP + (total % HP_SPREAD)
