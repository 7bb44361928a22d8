"""
Battle card acquisition.

Single entry point for callers: fetch_two_battle_cards(). Tries the
primary API with retry and backoff, then falls back to the static
dataset. Only a fallback failure reaches the caller.

Each call is independent. Primary and fallback requests run one after
the other, never at the same time.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

import httpx

from pokebattle.clients.pokemontcg import PokemonTCGClient
from pokebattle.models.card import FetchResult
from pokebattle.models.failure import FallbackUnavailableError, RetryExhaustedError
from pokebattle.services.fallback import load_fallback_cards
from pokebattle.services.retry import retry_with_backoff

logger = logging.getLogger(__name__)


async def fetch_two_battle_cards(
    client: httpx.AsyncClient | None = None,
    *,
    primary: PokemonTCGClient | None = None,
    fallback_url: str | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> FetchResult:
    """
    Fetch two battle cards, falling back to static data if needed.

    Args:
        client: Optional httpx client for connection reuse. When omitted a
                client is opened for this call and closed afterwards.
        primary: Primary API client. Defaults to one built from settings.
        fallback_url: Fallback dataset URL. Defaults to settings.fallback_data_url.
        sleep: Backoff delay function, replaceable in tests

    Returns:
        FetchResult with two cards and from_fallback set when the static
        dataset produced them

    Raises:
        FallbackUnavailableError: If the primary API is exhausted and the
            fallback dataset cannot be used either
    """
    if client is None:
        async with httpx.AsyncClient() as owned_client:
            return await _fetch(owned_client, primary, fallback_url, sleep)
    return await _fetch(client, primary, fallback_url, sleep)


async def _fetch(
    client: httpx.AsyncClient,
    primary: PokemonTCGClient | None,
    fallback_url: str | None,
    sleep: Callable[[float], Awaitable[None]],
) -> FetchResult:
    primary = primary or PokemonTCGClient()

    try:
        cards = await retry_with_backoff(lambda: primary.fetch_two_random(client), sleep=sleep)
    except RetryExhaustedError as e:
        logger.warning("Primary API exhausted after %d attempts, using fallback", e.attempts)
    else:
        logger.info("Drew %s vs %s from primary API", cards[0].name, cards[1].name)
        return FetchResult(cards=cards, from_fallback=False)

    try:
        cards = await load_fallback_cards(client, fallback_url)
    except FallbackUnavailableError as e:
        logger.error("Fallback dataset unavailable: %s", e.detail)
        raise

    logger.info("Drew %s vs %s from fallback dataset", cards[0].name, cards[1].name)
    return FetchResult(cards=cards, from_fallback=True)
