from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import GenerationPart


class GenerativeModelClient(ABC):
    @abstractmethod
    async def generate_from_text(self, prompt: str) -> str:
        """Generate from a single text prompt and return the response text."""

    @abstractmethod
    async def generate_from_parts(self, parts: list[GenerationPart]) -> str:
        """Generate from ordered text/inline-data parts and return the response text."""
