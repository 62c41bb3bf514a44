from __future__ import annotations

import asyncio
import base64
from types import SimpleNamespace

import pytest
from google.genai import types

from genprompt.errors import RemoteGenerationError
from genprompt.llm.gemini_client import GeminiClient
from genprompt.models import InlineDataPart, TextPart


class FakeModels:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.requests: list[dict] = []

    async def generate_content(self, *, model, contents):
        self.requests.append({"model": model, "contents": contents})
        if self.error is not None:
            raise self.error
        return self.response


def make_sdk_client(models: FakeModels) -> SimpleNamespace:
    return SimpleNamespace(aio=SimpleNamespace(models=models))


def test_generate_from_text_sends_one_text_part() -> None:
    models = FakeModels(response=SimpleNamespace(text="Hi there"))
    client = GeminiClient("gemini-pro", "key", sdk_client=make_sdk_client(models))

    text = asyncio.run(client.generate_from_text("Say hi"))

    assert text == "Hi there"
    assert len(models.requests) == 1
    request = models.requests[0]
    assert request["model"] == "gemini-pro"
    assert [part.text for part in request["contents"]] == ["Say hi"]


def test_generate_from_parts_maps_inline_data_to_bytes() -> None:
    payload = b"\x89PNG\r\n\x1a\n"
    models = FakeModels(response=SimpleNamespace(text="A pixel"))
    client = GeminiClient("gemini-pro-vision", "key", sdk_client=make_sdk_client(models))
    parts = [
        TextPart(text="Describe this"),
        InlineDataPart(mime_type="image/png", data=base64.b64encode(payload).decode("ascii")),
    ]

    asyncio.run(client.generate_from_parts(parts))

    contents = models.requests[0]["contents"]
    assert all(isinstance(part, types.Part) for part in contents)
    assert contents[0].text == "Describe this"
    assert contents[1].inline_data.mime_type == "image/png"
    assert contents[1].inline_data.data == payload


def test_sdk_failure_becomes_remote_generation_error() -> None:
    cause = RuntimeError("429 RESOURCE_EXHAUSTED")
    client = GeminiClient("gemini-pro", "key", sdk_client=make_sdk_client(FakeModels(error=cause)))

    with pytest.raises(RemoteGenerationError) as exc_info:
        asyncio.run(client.generate_from_text("Say hi"))

    assert exc_info.value.__cause__ is cause


@pytest.mark.parametrize("text", [None, ""])
def test_response_without_text_is_an_error(text) -> None:
    response = SimpleNamespace(text=text, prompt_feedback=None)
    client = GeminiClient("gemini-pro", "key", sdk_client=make_sdk_client(FakeModels(response=response)))

    with pytest.raises(RemoteGenerationError, match="no text"):
        asyncio.run(client.generate_from_text("Say hi"))


def test_blocked_prompt_reports_block_reason() -> None:
    response = SimpleNamespace(text=None, prompt_feedback=SimpleNamespace(block_reason="SAFETY"))
    client = GeminiClient("gemini-pro", "key", sdk_client=make_sdk_client(FakeModels(response=response)))

    with pytest.raises(RemoteGenerationError, match="SAFETY"):
        asyncio.run(client.generate_from_text("Say hi"))
