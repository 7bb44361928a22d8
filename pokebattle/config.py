from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", frozen=True)

    app_name: str = "PokeBattle"
    debug: bool = False

    # Primary source: two random cards per request
    ptcg_api_url: str = "https://api.pokemontcg.io/v2/cards?pageSize=2&random=true"

    # Optional; sent as X-Api-Key only when non-empty
    ptcg_api_key: str = ""

    # Static dataset used once the primary source is exhausted
    fallback_data_url: str = "https://nawazchowdhury.github.io/pokemontcg/api.json"

    request_timeout_seconds: float = 20.0
    max_attempts: int = 3
    backoff_base_seconds: float = 0.6


settings = Settings()


# =============================================================================
# CARD NORMALIZATION
# =============================================================================

# Name used when a raw record carries no usable name
UNKNOWN_CARD_NAME = "Unknown"

# Header carrying the optional Pokémon TCG API key
API_KEY_HEADER = "X-Api-Key"
