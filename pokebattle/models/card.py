"""
Battle card models.

Raw card records come from two sources with slightly different shapes:
the Pokémon TCG API and a static fallback dataset. Both are normalized
into BattleCard so the rest of the system never touches raw JSON.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from pokebattle.config import UNKNOWN_CARD_NAME

_NON_DIGITS = re.compile(r"[^0-9]")


def _parse_hp(raw_hp: Any) -> int:
    """Extract an integer HP from values like "120", 120 or "120 HP"."""
    if raw_hp is None:
        raw_hp = "0"
    try:
        digits = _NON_DIGITS.sub("", str(raw_hp))
        return int(digits) if digits else 0
    except ValueError:
        # Past the interpreter's int/str conversion digit limit
        return 0


def _image_url(images: Mapping[str, Any], size: str) -> str | None:
    value = images.get(size)
    return value if isinstance(value, str) else None


@dataclass(frozen=True, slots=True)
class BattleCard:
    """
    A card reduced to what a battle needs.

    Attributes:
        name: Card name, "Unknown" when the source had none
        small_image: URL of the small card image, None when absent
        large_image: URL of the large card image, None when absent
        hp: Hit points, never negative
    """

    name: str
    small_image: str | None = None
    large_image: str | None = None
    hp: int = 0

    @classmethod
    def from_raw(cls, record: Any) -> "BattleCard":
        """
        Normalize a raw card record.

        Never raises: missing or malformed fields degrade to None, 0
        or "Unknown".

        Args:
            record: Untyped JSON value, normally a dict with optional
                    name, hp and images keys

        Returns:
            Normalized BattleCard
        """
        if not isinstance(record, Mapping):
            record = {}

        name = record.get("name")
        images = record.get("images")
        if not isinstance(images, Mapping):
            images = {}

        return cls(
            name=str(name) if name else UNKNOWN_CARD_NAME,
            small_image=_image_url(images, "small"),
            large_image=_image_url(images, "large"),
            hp=_parse_hp(record.get("hp")),
        )

    def with_hp(self, hp: int) -> "BattleCard":
        """Return a copy with a different HP, keeping name and images."""
        return replace(self, hp=hp)


@dataclass(frozen=True, slots=True)
class FetchResult:
    """
    Two cards ready for battle and where they came from.

    INVARIANT: Exactly two cards, regardless of the path that produced them.
    """

    cards: tuple[BattleCard, BattleCard]
    from_fallback: bool

    def __post_init__(self) -> None:
        if len(self.cards) != 2:
            raise ValueError(f"FetchResult requires exactly 2 cards, got {len(self.cards)}")
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "cards", tuple(self.cards))

    @property
    def left(self) -> BattleCard:
        return self.cards[0]

    @property
    def right(self) -> BattleCard:
        return self.cards[1]
