from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

API_KEY_ENV_VARS = ("GOOGLE_AI_STUDIO_API_KEY", "GEMINI_API_KEY")
TEXT_MODEL_ENV_VAR = "GENPROMPT_TEXT_MODEL"
VISION_MODEL_ENV_VAR = "GENPROMPT_VISION_MODEL"

# Both default ids are retired on the public Gemini API; set
# GENPROMPT_TEXT_MODEL / GENPROMPT_VISION_MODEL (e.g. "gemini-2.5-flash") to use a live model.
DEFAULT_TEXT_MODEL = "gemini-pro"
DEFAULT_VISION_MODEL = "gemini-pro-vision"


class GenAIConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    api_key: str | None = None
    text_model: str = DEFAULT_TEXT_MODEL
    vision_model: str = DEFAULT_VISION_MODEL

    model_client: Any | None = None

    @field_validator("text_model", "vision_model")
    @classmethod
    def validate_model_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("model name cannot be empty")
        return normalized

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GenAIConfig:
        """Build a config from environment variables.

        The API key is taken from the first non-empty variable in
        ``API_KEY_ENV_VARS``. Missing keys are not an error here; the client
        factory rejects them when a model is requested.
        """
        env = os.environ if environ is None else environ

        api_key = next((env[name] for name in API_KEY_ENV_VARS if env.get(name)), None)
        overrides: dict[str, Any] = {}
        if env.get(TEXT_MODEL_ENV_VAR):
            overrides["text_model"] = env[TEXT_MODEL_ENV_VAR]
        if env.get(VISION_MODEL_ENV_VAR):
            overrides["vision_model"] = env[VISION_MODEL_ENV_VAR]

        return cls(api_key=api_key, **overrides)
