from __future__ import annotations

import base64
import logging
from typing import Any

from google import genai
from google.genai import types

from .base import GenerativeModelClient
from ..errors import RemoteGenerationError
from ..models import GenerationPart, TextPart

logger = logging.getLogger(__name__)


class GeminiClient(GenerativeModelClient):
    """Model handle backed by the ``google-genai`` async API."""

    def __init__(self, model: str, api_key: str, sdk_client: Any | None = None) -> None:
        self.model = model
        self._client = sdk_client if sdk_client is not None else genai.Client(api_key=api_key)

    async def generate_from_text(self, prompt: str) -> str:
        logger.debug("Requesting text completion from %s (prompt: %d chars)", self.model, len(prompt))
        return await self._generate([types.Part.from_text(text=prompt)])

    async def generate_from_parts(self, parts: list[GenerationPart]) -> str:
        logger.debug("Requesting completion from %s with %d parts", self.model, len(parts))
        return await self._generate([self._to_sdk_part(part) for part in parts])

    async def _generate(self, contents: list[types.Part]) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except Exception as exc:
            raise RemoteGenerationError(f"Gemini request to {self.model} failed: {exc}") from exc
        return self._extract_response_text(response)

    @staticmethod
    def _to_sdk_part(part: GenerationPart) -> types.Part:
        if isinstance(part, TextPart):
            return types.Part.from_text(text=part.text)
        return types.Part.from_bytes(data=base64.b64decode(part.data), mime_type=part.mime_type)

    @staticmethod
    def _extract_response_text(response: Any) -> str:
        try:
            text = response.text
        except Exception as exc:
            raise RemoteGenerationError("Gemini returned an unexpected response shape.") from exc

        if isinstance(text, str) and text:
            return text

        block_reason = getattr(getattr(response, "prompt_feedback", None), "block_reason", None)
        logger.warning("Gemini response carried no text (block reason: %s)", block_reason)
        if block_reason:
            raise RemoteGenerationError(f"Gemini returned no text; prompt blocked: {block_reason}")
        raise RemoteGenerationError("Gemini returned no text.")
