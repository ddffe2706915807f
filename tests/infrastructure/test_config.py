"""Tests for environment configuration and the service container."""

import pytest

from trust_scorer.infrastructure.analysis.lexicon_analyzer import LexiconContentAnalyzer
from trust_scorer.infrastructure.analysis.openai_analyzer import OpenAIContentAnalyzer
from trust_scorer.infrastructure.config import AppConfig
from trust_scorer.infrastructure.dependencies import ServiceContainer
from trust_scorer.infrastructure.evidence.perplexity_adapter import PerplexityEvidenceProvider

ENV_VARS = [
    "PERPLEXITY_API_KEY",
    "PERPLEXITY_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "TRUST_SCORER_HISTORY_FILE",
    "TRUST_SCORER_CLAIM_QUOTA",
    "TRUST_SCORER_PROVIDER_TIMEOUT",
    "TRUST_SCORER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test configuration without any environment variables."""
    config = AppConfig.from_env(load_env_file=False)

    assert config.perplexity_api_key == ""
    assert config.history_file is None
    assert config.engine.claim_quota == 3
    assert config.log_level == "INFO"


def test_from_env(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("PERPLEXITY_API_KEY", "pplx-key")
    monkeypatch.setenv("PERPLEXITY_MODEL", "sonar")
    monkeypatch.setenv("TRUST_SCORER_CLAIM_QUOTA", "5")
    monkeypatch.setenv("TRUST_SCORER_PROVIDER_TIMEOUT", "12.5")
    monkeypatch.setenv("TRUST_SCORER_LOG_LEVEL", "debug")

    config = AppConfig.from_env(load_env_file=False)

    assert config.perplexity_api_key == "pplx-key"
    assert config.perplexity_model == "sonar"
    assert config.engine.claim_quota == 5
    assert config.engine.provider_timeout == 12.5
    assert config.log_level == "DEBUG"


def test_invalid_numbers_fall_back(monkeypatch):
    """Test that malformed numbers keep the defaults."""
    monkeypatch.setenv("TRUST_SCORER_CLAIM_QUOTA", "many")

    assert AppConfig.from_env(load_env_file=False).engine.claim_quota == 3


def test_container_without_credentials(tmp_path):
    """Test the offline wiring."""
    container = ServiceContainer(AppConfig())

    assert isinstance(container.analyzer, LexiconContentAnalyzer)
    assert container.history_store.backend_name == "memory"


def test_container_with_credentials(tmp_path):
    """Test the online wiring."""
    config = AppConfig(openai_api_key="sk-test", history_file=str(tmp_path / "history.json"))

    container = ServiceContainer(config)

    assert isinstance(container.analyzer, OpenAIContentAnalyzer)
    assert container.history_store.backend_name == "json_file"


@pytest.mark.asyncio
async def test_container_without_evidence_key():
    """Test that the service is built without an evidence provider."""
    container = ServiceContainer(AppConfig())

    service = await container.get_verification_service()

    assert service is await container.get_verification_service()
    assert container.evidence_status == {"perplexity": False}
    await container.shutdown()


@pytest.mark.asyncio
async def test_container_with_evidence_key():
    """Test that the Perplexity provider is created when a key is set."""
    container = ServiceContainer(AppConfig(perplexity_api_key="pplx-key"))

    await container.get_verification_service()

    assert container.evidence_status == {"perplexity": True}
    await container.shutdown()
    assert container.evidence_status == {"perplexity": False}


@pytest.mark.asyncio
async def test_container_builds_provider_from_config():
    """Test that the evidence provider takes its settings from the app config."""
    config = AppConfig(perplexity_api_key="pplx-key", perplexity_model="sonar")
    container = ServiceContainer(config)

    service = await container.get_verification_service()

    provider = service._verifier._provider
    assert isinstance(provider, PerplexityEvidenceProvider)
    assert provider._config.model == "sonar"
    assert provider._config.timeout == config.engine.provider_timeout
    await container.shutdown()


@pytest.mark.asyncio
async def test_container_survives_provider_initialization_failure(monkeypatch):
    """Test that a provider that cannot start leaves verification without evidence."""

    async def refuse(self):
        raise ConnectionError("unreachable")

    monkeypatch.setattr(PerplexityEvidenceProvider, "initialize", refuse)
    container = ServiceContainer(AppConfig(perplexity_api_key="pplx-key"))

    await container.get_verification_service()

    assert container.evidence_status == {"perplexity": False}
    await container.shutdown()
