"""
Pokémon TCG API client.

Requests two random cards in a single call. Every failure is reported as
TransientNetworkError; deciding whether to try again belongs to the
caller.
"""

import logging

import httpx

from pokebattle.config import API_KEY_HEADER, settings
from pokebattle.models.card import BattleCard
from pokebattle.models.failure import TransientNetworkError

logger = logging.getLogger(__name__)


class PokemonTCGClient:
    """
    Client for the Pokémon TCG random-cards endpoint.

    Holds configuration only. The HTTP client is passed per call so one
    instance can serve concurrent fetches without sharing connection state.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Random-two-cards endpoint. Defaults to settings.ptcg_api_url.
            api_key: Optional API key. Defaults to settings.ptcg_api_key.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout_seconds.
        """
        self.base_url = base_url or settings.ptcg_api_url
        self.api_key = settings.ptcg_api_key if api_key is None else api_key
        self.timeout = settings.request_timeout_seconds if timeout is None else timeout

    def build_headers(self) -> dict[str, str]:
        """Headers for the request; the key header only when a key is configured."""
        headers: dict[str, str] = {}
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    async def fetch_two_random(self, client: httpx.AsyncClient) -> tuple[BattleCard, BattleCard]:
        """
        Fetch and normalize two random cards.

        Args:
            client: httpx client used for the single GET

        Returns:
            The first two cards of the response, normalized

        Raises:
            TransientNetworkError: On timeout, transport error, non-200
                status, unreadable body or fewer than two cards
        """
        try:
            response = await client.get(
                self.base_url,
                headers=self.build_headers(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise TransientNetworkError(f"Timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransientNetworkError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise TransientNetworkError(f"Unexpected HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise TransientNetworkError("Response body is not valid JSON") from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise TransientNetworkError("Response has no data array")
        if len(data) < 2:
            raise TransientNetworkError(f"Expected at least 2 cards, got {len(data)}")

        cards = (BattleCard.from_raw(data[0]), BattleCard.from_raw(data[1]))
        logger.debug("Fetched %s and %s from primary API", cards[0].name, cards[1].name)
        return cards
