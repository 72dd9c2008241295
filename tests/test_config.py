# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-10
# Description: test_config.py
# -----------------------------------------------------------------------------
import pytest

from config.Config import Config
from utility.errors import ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    for env_name in Config.ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)
    return monkeypatch


def test_from_env_reads_all_fields(clean_env):
    clean_env.setenv("PINECONE_API_KEY", " key ")
    clean_env.setenv("PINECONE_PROJECT", "abc123")
    clean_env.setenv("PINECONE_INDEX", "symbols")
    clean_env.setenv("PINECONE_ENVIRONMENT", "us-west1-gcp")

    cfg = Config.from_env()

    assert cfg == Config(api_key="key", project="abc123", index="symbols", environment="us-west1-gcp")


def test_explicit_values_win_over_environment(clean_env):
    clean_env.setenv("PINECONE_API_KEY", "from-env")
    clean_env.setenv("PINECONE_PROJECT", "abc123")
    clean_env.setenv("PINECONE_INDEX", "symbols")
    clean_env.setenv("PINECONE_ENVIRONMENT", "us-west1-gcp")

    cfg = Config.from_env(api_key="from-flag", index=None)

    assert cfg.api_key == "from-flag"
    assert cfg.index == "symbols"


def test_missing_values_fail_fast_with_env_var_names(clean_env):
    clean_env.setenv("PINECONE_API_KEY", "key")

    with pytest.raises(ConfigError) as exc:
        Config.from_env(project="abc123")

    msg = str(exc.value)
    assert "PINECONE_INDEX" in msg
    assert "PINECONE_ENVIRONMENT" in msg
    assert "PINECONE_PROJECT" not in msg


def test_unknown_override_is_rejected(clean_env):
    with pytest.raises(ConfigError):
        Config.from_env(region="eu")


def test_service_host_and_base_url(cfg):
    assert cfg.service_host() == "symbols-abc123.svc.us-west1-gcp.pinecone.io"
    assert cfg.base_url("example.test") == "https://symbols-abc123.svc.us-west1-gcp.example.test"


def test_summary_hides_api_key(cfg):
    summary = cfg.summary()
    assert "test-key" not in summary.values()
    assert summary["api_key_set"] is True
    assert summary["index"] == "symbols"


def test_config_is_immutable(cfg):
    with pytest.raises(Exception):
        cfg.index = "other"
