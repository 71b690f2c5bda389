"""Tests for ClientConfig loading."""

import pytest
from pydantic import ValidationError

from n26.models import ClientConfig

ENV_VARS = ("N26_BASE_URL", "N26_REQUEST_TIMEOUT", "N26_MFA_POLL_INTERVAL", "N26_MFA_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so the variable is removed again on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / ".env"


def test_defaults():
    config = ClientConfig()

    assert config.base_url == "https://api.tech26.de"
    assert config.mfa_timeout == 120
    assert config.mfa_poll_interval == 5


def test_load_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("N26_MFA_TIMEOUT", "60")
    monkeypatch.setenv("N26_BASE_URL", "http://localhost:8080")

    config = ClientConfig.load(clean_env)

    assert config.mfa_timeout == 60.0
    assert config.base_url == "http://localhost:8080"
    assert config.request_timeout == 30.0


def test_load_from_dotenv_file(clean_env):
    clean_env.write_text("N26_MFA_POLL_INTERVAL=2\n")

    config = ClientConfig.load(clean_env)

    assert config.mfa_poll_interval == 2.0


def test_rejects_base_url_with_path():
    with pytest.raises(ValidationError):
        ClientConfig(base_url="https://api.tech26.de/api/")


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        ClientConfig(mfa_timeout=0)
