from .completion import GenPrompt, complete_text, complete_with_files
from .config import GenAIConfig
from .errors import ConfigurationError, FileReadError, GenPromptError, RemoteGenerationError
from .llm import GeminiClient, GenerativeModelClient, create_model
from .models import FileInput, GenerationPart, InlineDataPart, TextPart

__all__ = [
    "GenPrompt",
    "GenAIConfig",
    "complete_text",
    "complete_with_files",
    "create_model",
    "GenerativeModelClient",
    "GeminiClient",
    "FileInput",
    "GenerationPart",
    "TextPart",
    "InlineDataPart",
    "GenPromptError",
    "ConfigurationError",
    "FileReadError",
    "RemoteGenerationError",
]
