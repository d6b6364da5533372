from pathlib import Path

import pytest
from pydantic import ValidationError

from tea_roulette.config import Settings, get_settings


def test_defaults(monkeypatch):
    for key in ("TEA_ROULETTE_PORT", "TEA_ROULETTE_DATA_FILE", "TEA_ROULETTE_API_BASE_URL"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.data_file == Path("data/preferences.json")
    assert settings.spin_duration == 3.0
    assert settings.extra_spins == 6


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TEA_ROULETTE_DATA_FILE", str(tmp_path / "prefs.json"))
    monkeypatch.setenv("TEA_ROULETTE_API_BASE_URL", "http://tea.local:8080/")
    monkeypatch.setenv("TEA_ROULETTE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.data_file == tmp_path / "prefs.json"
    assert settings.api_base_url == "http://tea.local:8080"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "key, value",
    [
        ("TEA_ROULETTE_PORT", "0"),
        ("TEA_ROULETTE_SPIN_DURATION", "-1"),
        ("TEA_ROULETTE_EXTRA_SPINS", "-2"),
        ("TEA_ROULETTE_API_BASE_URL", "  "),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        get_settings()
