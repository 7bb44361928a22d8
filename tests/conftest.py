from unittest.mock import AsyncMock

import pytest

from pokebattle.clients.pokemontcg import PokemonTCGClient


@pytest.fixture
def primary_url() -> str:
    return "https://api.test/v2/cards?pageSize=2&random=true"


@pytest.fixture
def fallback_url() -> str:
    return "https://static.test/pokemontcg/api.json"


@pytest.fixture
def primary_client(primary_url: str) -> PokemonTCGClient:
    """Primary API client pointed at a test URL, without an API key."""
    return PokemonTCGClient(base_url=primary_url, api_key="", timeout=20.0)


@pytest.fixture
def recorded_sleep() -> AsyncMock:
    """Stand-in for asyncio.sleep that records requested delays."""
    return AsyncMock(return_value=None)


@pytest.fixture
def primary_payload() -> dict:
    """Two-card response from the Pokémon TCG API."""
    return {
        "data": [
            {"name": "Pikachu", "hp": "60", "images": {"small": "a.png"}},
            {"name": "Charmander", "hp": "50"},
        ]
    }


@pytest.fixture
def fallback_records() -> list[dict]:
    """Records from the static fallback dataset."""
    return [{"name": "Bulbasaur"}, {"name": "Squirtle"}, {"name": "Charmander"}]
