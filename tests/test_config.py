"""Unit tests for environment-driven settings."""

import pytest

from threetaps.config import DEFAULT_SERVER, Settings, load_settings

ENV_VARS = ("THREETAPS_SERVER", "THREETAPS_TIMEOUT_SEC", "THREETAPS_AGENT_ID", "THREETAPS_AUTH_ID")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    settings = load_settings()

    assert settings == Settings()
    assert settings.server == DEFAULT_SERVER
    assert settings.timeout_sec == 20
    assert not settings.has_credentials


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("THREETAPS_SERVER", "http://localhost:9000")
    monkeypatch.setenv("THREETAPS_TIMEOUT_SEC", "7")
    monkeypatch.setenv("THREETAPS_AGENT_ID", " agent ")
    monkeypatch.setenv("THREETAPS_AUTH_ID", "auth")

    settings = load_settings()

    assert settings.server == "http://localhost:9000"
    assert settings.timeout_sec == 7
    assert settings.agent_id == "agent"
    assert settings.auth_id == "auth"
    assert settings.has_credentials


def test_half_a_credential_pair_is_a_config_error(monkeypatch):
    monkeypatch.setenv("THREETAPS_AGENT_ID", "agent")

    with pytest.raises(ValueError, match="must be set together"):
        load_settings()


def test_bad_timeout_is_a_config_error(monkeypatch):
    monkeypatch.setenv("THREETAPS_TIMEOUT_SEC", "soon")

    with pytest.raises(ValueError, match="THREETAPS_TIMEOUT_SEC"):
        load_settings()
