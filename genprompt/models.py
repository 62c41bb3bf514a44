from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import FileReadError


class FileInput(BaseModel):
    """A file attached to a prompt: raw bytes, a path, or a readable binary stream.

    Seekable streams are rewound before every read, so the same input can be sent
    more than once. Non-seekable streams are read from their current position
    and yield their remaining bytes only on the first read.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: Any
    mime_type: str
    name: str | None = None

    @field_validator("source")
    @classmethod
    def validate_source(cls, value: Any) -> Any:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, Path):
            return value
        if callable(getattr(value, "read", None)):
            return value
        raise ValueError("file source must be bytes, a Path, or a readable binary stream")

    @field_validator("mime_type")
    @classmethod
    def validate_mime_type(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("file mime_type cannot be empty")
        return normalized

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str, name: str | None = None) -> FileInput:
        return cls(source=data, mime_type=mime_type, name=name)

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> FileInput:
        file_path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(file_path.name)
        if not mime_type:
            raise FileReadError(f"Cannot determine media type of file: {file_path}")
        return cls(source=file_path, mime_type=mime_type, name=file_path.name)

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        if isinstance(self.source, Path):
            return str(self.source)
        return f"<{self.mime_type} input>"

    async def read(self) -> bytes:
        source = self.source
        if isinstance(source, bytes):
            return source

        if isinstance(source, Path):
            try:
                data = await asyncio.to_thread(source.read_bytes)
            except (OSError, ValueError) as exc:
                raise FileReadError(f"Failed to read file {self.label}: {exc}") from exc
        else:
            try:
                data = await asyncio.to_thread(_read_stream, source)
            except Exception as exc:
                raise FileReadError(f"Failed to read file {self.label}: {exc}") from exc

        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        if not isinstance(data, bytes):
            raise FileReadError(
                f"File {self.label} did not yield bytes (got {type(data).__name__}); "
                "open streams in binary mode."
            )
        return data


class TextPart(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class InlineDataPart(BaseModel):
    kind: Literal["inline_data"] = "inline_data"
    mime_type: str
    data: str


GenerationPart = TextPart | InlineDataPart


def _read_stream(stream: Any) -> Any:
    seekable = getattr(stream, "seekable", None)
    if callable(seekable) and seekable():
        stream.seek(0)
    return stream.read()
