from __future__ import annotations

import asyncio
import base64
import logging
from typing import Iterable

from .models import FileInput, GenerationPart, InlineDataPart, TextPart

logger = logging.getLogger(__name__)


async def file_to_part(file: FileInput) -> InlineDataPart:
    data = await file.read()
    encoded = base64.b64encode(data).decode("ascii")
    logger.debug("Converted %s (%s, %d bytes) to inline data", file.label, file.mime_type, len(data))
    return InlineDataPart(mime_type=file.mime_type, data=encoded)


async def files_to_parts(files: Iterable[FileInput]) -> list[InlineDataPart]:
    """Convert every file concurrently; the first read failure fails the whole batch."""
    parts = await asyncio.gather(*(file_to_part(file) for file in files))
    return list(parts)


def build_parts(prompt: str, file_parts: Iterable[InlineDataPart]) -> list[GenerationPart]:
    return [TextPart(text=prompt), *file_parts]
