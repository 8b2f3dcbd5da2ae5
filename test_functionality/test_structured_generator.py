"""
Test the LangChain-backed generator and the LLM builder
"""
import json

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from conftest import nutrition_payload
from domain.exceptions import GenerationError
from infrastructure.llm.llm_builder import build_llm
from infrastructure.llm.structured_generator import (
    REQUEST_FAILED_MESSAGE,
    LangChainStructuredGenerator,
    build_message,
)

SCHEMA = {"type": "object", "properties": {"summary": {"type": "string"}}}


class ExplodingChatModel:
    def invoke(self, messages):
        raise ConnectionError("connection reset by peer")


async def test_generate_returns_model_text():
    payload = json.dumps(nutrition_payload())
    generator = LangChainStructuredGenerator(FakeListChatModel(responses=[payload]))

    text = await generator.generate("Analyze this meal.", SCHEMA, "aGVsbG8=", "image/png")

    assert json.loads(text) == nutrition_payload()


async def test_generate_wraps_provider_errors(caplog):
    generator = LangChainStructuredGenerator(ExplodingChatModel())

    with pytest.raises(GenerationError) as exc_info:
        await generator.generate("Plan my week.", SCHEMA)

    assert str(exc_info.value) == REQUEST_FAILED_MESSAGE
    assert "connection reset" not in str(exc_info.value)
    assert "connection reset by peer" in caplog.text


async def test_llm_factory_runs_on_first_request_only():
    payload = json.dumps(nutrition_payload())
    built = []

    def build():
        built.append(True)
        return FakeListChatModel(responses=[payload, payload])

    generator = LangChainStructuredGenerator(llm_factory=build)
    assert built == []

    await generator.generate("Analyze this meal.", SCHEMA)
    await generator.generate("Analyze this meal.", SCHEMA)

    assert built == [True]


async def test_llm_build_failure_is_generation_error():
    generator = LangChainStructuredGenerator(
        llm_factory=lambda: build_llm(provider="google", model="gemini-2.5-flash"),
    )

    with pytest.raises(GenerationError, match="request failed"):
        await generator.generate("Plan my week.", SCHEMA)


def test_text_only_message_embeds_schema():
    message = build_message("Plan my week.", SCHEMA)

    assert isinstance(message.content, str)
    assert message.content.startswith("Plan my week.")
    assert '"summary"' in message.content


def test_image_message_carries_data_url():
    message = build_message("Analyze this meal.", SCHEMA, "aGVsbG8=", "image/webp")

    image_part, text_part = message.content
    assert image_part == {"type": "image_url", "image_url": {"url": "data:image/webp;base64,aGVsbG8="}}
    assert text_part["type"] == "text"
    assert text_part["text"].startswith("Analyze this meal.")


def test_build_llm_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unsupported LLM_PROVIDER"):
        build_llm(provider="watson", model="x")


def test_build_llm_requires_google_key():
    with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
        build_llm(provider="google", model="gemini-2.5-flash")
