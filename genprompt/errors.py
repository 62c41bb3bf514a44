from __future__ import annotations


class GenPromptError(Exception):
    """Base exception for genprompt failures."""


class ConfigurationError(GenPromptError):
    """Raised when the API key or a model identifier is missing."""


class FileReadError(GenPromptError):
    """Raised when a file input cannot be read into memory."""


class RemoteGenerationError(GenPromptError):
    """Raised when the remote model call fails or returns no text."""
