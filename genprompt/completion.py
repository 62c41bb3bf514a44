from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Iterable

from .config import GenAIConfig
from .errors import GenPromptError, RemoteGenerationError
from .llm import create_model
from .models import FileInput
from .parts import build_parts, files_to_parts

logger = logging.getLogger(__name__)


class GenPrompt:
    """Send prompts, with or without file attachments, to a hosted Gemini model.

    A fresh model handle is created for every call; nothing is cached between
    calls and failures are never retried.
    """

    def __init__(self, config: GenAIConfig | None = None) -> None:
        self.config = config if config is not None else GenAIConfig.from_env()

    async def complete_text(self, prompt: str) -> str:
        model = create_model(self.config.text_model, self.config)
        return await self._call_remote(model.generate_from_text, prompt)

    async def complete_with_files(self, prompt: str, files: Iterable[FileInput]) -> str:
        model = create_model(self.config.vision_model, self.config)
        file_parts = await files_to_parts(files)
        logger.debug("Prepared %d file parts for %s", len(file_parts), self.config.vision_model)
        return await self._call_remote(model.generate_from_parts, build_parts(prompt, file_parts))

    @staticmethod
    async def _call_remote(generate: Callable[[Any], Awaitable[str]], payload: Any) -> str:
        try:
            return await generate(payload)
        except GenPromptError:
            raise
        except Exception as exc:
            raise RemoteGenerationError(f"Remote generation failed: {exc}") from exc


async def complete_text(prompt: str, config: GenAIConfig | None = None) -> str:
    return await GenPrompt(config).complete_text(prompt)


async def complete_with_files(
    prompt: str,
    files: Iterable[FileInput],
    config: GenAIConfig | None = None,
) -> str:
    return await GenPrompt(config).complete_with_files(prompt, files)
