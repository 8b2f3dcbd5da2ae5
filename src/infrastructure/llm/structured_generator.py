"""
infrastructure.llm.structured_generator - Schema-constrained JSON generation.

Implements StructuredGeneratorPort on top of any LangChain chat model built
by build_llm(). The model runs in JSON mode and the expected schema is
appended to the prompt, so every provider receives the same constraint.

The chat model can be given directly or as a zero-argument builder; a
builder is called on the first generate() call, so wiring the generator
never requires provider credentials.

Returns the raw response text; parsing and shape validation belong to the
caller (application.contracts).
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from domain.exceptions import GenerationError

logger = logging.getLogger(__name__)

REQUEST_FAILED_MESSAGE = "The AI service request failed. Please try again."

_SCHEMA_INSTRUCTIONS = (
    "Respond with a single JSON object and nothing else. "
    "It must conform to this JSON schema:\n{schema}"
)


class LangChainStructuredGenerator:
    """Implements StructuredGeneratorPort using a LangChain chat model."""

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        *,
        llm_factory: Optional[Callable[[], BaseChatModel]] = None,
    ):
        if llm is None and llm_factory is None:
            raise ValueError("Either llm or llm_factory is required")
        self._llm = llm
        self._llm_factory = llm_factory

    async def generate(
        self,
        prompt: str,
        schema: dict[str, Any],
        image_base64: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> str:
        """Send the prompt (and image, if any) and return the response text.

        Runs the sync LangChain call in a thread pool to avoid blocking.
        """
        message = build_message(prompt, schema, image_base64, mime_type)
        try:
            llm = self._get_llm()
            loop = asyncio.get_event_loop()
            response = await loop.run_in_executor(None, llm.invoke, [message])
        except Exception as e:
            logger.error("Generative model call failed: %s", e)
            raise GenerationError(REQUEST_FAILED_MESSAGE) from e

        text = _content_text(response.content)
        logger.info("Received %d characters from the generative model", len(text))
        return text

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self._llm_factory()
            logger.info("Generative model ready: %s", type(self._llm).__name__)
        return self._llm


def build_message(
    prompt: str,
    schema: dict[str, Any],
    image_base64: Optional[str] = None,
    mime_type: Optional[str] = None,
) -> HumanMessage:
    """Build the (optionally multimodal) user message for one request."""
    text = f"{prompt.strip()}\n\n" + _SCHEMA_INSTRUCTIONS.format(
        schema=json.dumps(schema, indent=2),
    )
    if image_base64 is None:
        return HumanMessage(content=text)

    data_url = f"data:{mime_type or 'image/jpeg'};base64,{image_base64}"
    return HumanMessage(content=[
        {"type": "image_url", "image_url": {"url": data_url}},
        {"type": "text", "text": text},
    ])


def _content_text(content: Any) -> str:
    """Flatten a chat response's content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)
