from __future__ import annotations

import logging

from .base import GenerativeModelClient
from .gemini_client import GeminiClient
from ..config import GenAIConfig
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_model(model_identifier: str, config: GenAIConfig) -> GenerativeModelClient:
    model = model_identifier.strip()
    if not model:
        raise ConfigurationError("A model identifier is required.")

    api_key = (config.api_key or "").strip()
    if not api_key:
        raise ConfigurationError(
            "api_key is required. Set GOOGLE_AI_STUDIO_API_KEY or pass GenAIConfig(api_key=...)."
        )

    if config.model_client is not None:
        return config.model_client

    logger.debug("Creating Gemini model handle for %s", model)
    return GeminiClient(model=model, api_key=api_key)
