"""
Fallback card provider.

Used only after the primary API is exhausted. Loads a static dataset,
picks two cards uniformly at random and replaces their HP with a value
derived from the card name.

Any failure here is terminal and surfaces as FallbackUnavailableError.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any

import httpx

from pokebattle.config import settings
from pokebattle.models.card import BattleCard
from pokebattle.models.failure import FallbackUnavailableError
from pokebattle.services.hp import derive_hp

logger = logging.getLogger(__name__)


def parse_fallback_payload(payload: Any) -> list[BattleCard]:
    """
    Normalize every record of a fallback payload.

    Args:
        payload: Decoded JSON, either a list of records or {"data": [...]}

    Returns:
        One BattleCard per record, in payload order

    Raises:
        FallbackUnavailableError: If the payload has neither shape
    """
    records = payload.get("data") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise FallbackUnavailableError(
            detail=f"Unexpected fallback payload type: {type(payload).__name__}"
        )
    return [BattleCard.from_raw(record) for record in records]


def pick_two(
    candidates: Sequence[BattleCard],
    rng: random.Random | None = None,
) -> tuple[BattleCard, BattleCard]:
    """
    Pick two cards at random and give them derived HP.

    The candidates are shuffled (Fisher-Yates via random.shuffle) and the
    first two are taken, so every pair is equally likely. Whatever HP the
    dataset carried is replaced by derive_hp(name).

    Args:
        candidates: Normalized fallback cards; left untouched
        rng: Random source, replaceable in tests. Defaults to the module RNG.

    Returns:
        Two cards with derived HP

    Raises:
        FallbackUnavailableError: If fewer than two candidates exist
    """
    if len(candidates) < 2:
        raise FallbackUnavailableError(
            detail=f"Fallback dataset has {len(candidates)} usable cards, need 2"
        )

    pool = list(candidates)
    (rng or random).shuffle(pool)
    first, second = pool[0], pool[1]

    return first.with_hp(derive_hp(first.name)), second.with_hp(derive_hp(second.name))


async def load_fallback_cards(
    client: httpx.AsyncClient,
    url: str | None = None,
) -> tuple[BattleCard, BattleCard]:
    """
    Fetch the fallback dataset and pick two cards from it.

    Single request, no retry. The client's own timeout applies.

    Args:
        client: httpx client used for the GET
        url: Dataset URL. Defaults to settings.fallback_data_url.

    Returns:
        Two cards with derived HP

    Raises:
        FallbackUnavailableError: If the dataset is unreachable, malformed
            or has fewer than two entries
    """
    url = url or settings.fallback_data_url

    try:
        response = await client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        raise FallbackUnavailableError(
            detail=f"Fallback dataset returned HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise FallbackUnavailableError(detail=f"Fallback dataset unreachable: {e}") from e
    except ValueError as e:
        raise FallbackUnavailableError(detail="Fallback dataset is not valid JSON") from e

    candidates = parse_fallback_payload(payload)
    logger.info("Loaded %d fallback cards from %s", len(candidates), url)
    return pick_two(candidates)
