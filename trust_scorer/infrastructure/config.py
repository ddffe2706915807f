"""Application configuration loaded from environment variables."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ..domain.models.settings import EngineSettings

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"⚠️ {name}={value!r} is not an integer, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"⚠️ {name}={value!r} is not a number, using {default}")
        return default


class AppConfig(BaseModel):
    """Deployment configuration; secrets only ever come from the environment."""

    perplexity_api_key: str = ""
    perplexity_model: str = "sonar-pro"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    history_file: Optional[str] = None
    log_level: str = "INFO"
    engine: EngineSettings = EngineSettings()

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "AppConfig":
        """Create configuration from environment variables.

        Args:
            load_env_file: Load a ``.env`` file first, if one exists
        """
        if load_env_file:
            load_dotenv()

        defaults = EngineSettings()
        engine = EngineSettings(
            claim_quota=_env_int("TRUST_SCORER_CLAIM_QUOTA", defaults.claim_quota),
            provider_timeout=_env_float("TRUST_SCORER_PROVIDER_TIMEOUT", defaults.provider_timeout),
            analysis_timeout=_env_float("TRUST_SCORER_ANALYSIS_TIMEOUT", defaults.analysis_timeout),
            extraction_timeout=_env_float("TRUST_SCORER_EXTRACTION_TIMEOUT", defaults.extraction_timeout),
        )

        config = cls(
            perplexity_api_key=os.getenv("PERPLEXITY_API_KEY", ""),
            perplexity_model=os.getenv("PERPLEXITY_MODEL", "sonar-pro"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            history_file=os.getenv("TRUST_SCORER_HISTORY_FILE") or None,
            log_level=os.getenv("TRUST_SCORER_LOG_LEVEL", "INFO").upper(),
            engine=engine,
        )

        if not config.perplexity_api_key:
            logger.warning("⚠️ PERPLEXITY_API_KEY not found - source verification will use sanity-derived results")
        else:
            logger.info(f"✅ Perplexity API key loaded: {len(config.perplexity_api_key)} chars")
        if not config.openai_api_key:
            logger.warning("⚠️ OPENAI_API_KEY not found - using lexicon analyzer")
        return config
