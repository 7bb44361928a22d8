"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from pokebattle.config import Settings, settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults match the public card sources and retry policy."""
        monkeypatch.delenv("PTCG_API_KEY", raising=False)

        defaults = Settings(_env_file=None)

        assert defaults.ptcg_api_url == "https://api.pokemontcg.io/v2/cards?pageSize=2&random=true"
        assert defaults.fallback_data_url == "https://nawazchowdhury.github.io/pokemontcg/api.json"
        assert defaults.ptcg_api_key == ""
        assert defaults.request_timeout_seconds == 20.0
        assert defaults.max_attempts == 3
        assert defaults.backoff_base_seconds == 0.6

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("PTCG_API_KEY", "secret")

        assert Settings(_env_file=None).ptcg_api_key == "secret"

    def test_is_read_only(self) -> None:
        """Settings cannot be changed after startup."""
        with pytest.raises(ValidationError):
            settings.max_attempts = 5  # type: ignore[misc]
