from .base import GenerativeModelClient
from .factory import create_model
from .gemini_client import GeminiClient

__all__ = ["GenerativeModelClient", "GeminiClient", "create_model"]
