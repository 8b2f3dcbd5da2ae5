"""
infrastructure.llm.llm_builder - Centralized LLM construction.

Single source of truth for building chat models for both AI calls. The
provider is controlled by the LLM_PROVIDER environment variable.

Supported providers:
    - "google"  → langchain_google_genai.ChatGoogleGenerativeAI (default)
    - "openai"  → langchain_openai.ChatOpenAI
    - "groq"    → langchain_groq.ChatGroq
    - "ollama"  → langchain_ollama.ChatOllama

All providers are built as chat models because meal analysis sends a
multimodal (text + image) message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


def build_llm(
    *,
    provider: str,
    model: str,
    temperature: float = 0,
    google_api_key: str = "",
    openai_api_key: str = "",
    groq_api_key: str = "",
    ollama_base_url: str = "http://localhost:11434/",
    json_mode: bool = False,
    max_tokens: Optional[int] = None,
) -> BaseChatModel:
    """Build a chat model for the given provider.

    Args:
        provider: One of "google", "openai", "groq", "ollama".
        model: Model name for the selected provider.
        temperature: Sampling temperature.
        google_api_key: API key for Google Gemini.
        openai_api_key: API key for OpenAI.
        groq_api_key: API key for Groq.
        ollama_base_url: Ollama server URL (only used when provider="ollama").
        json_mode: Ask the provider to emit a JSON document only.
        max_tokens: Maximum output tokens. Provider default when None.

    Returns:
        A configured LangChain chat model.

    Raises:
        ValueError: If the provider is unknown or required credentials are missing.
    """
    provider = provider.lower().strip()

    if provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        if not google_api_key:
            raise ValueError("GOOGLE_API_KEY is required when LLM_PROVIDER='google'")

        kwargs: Dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "google_api_key": google_api_key,
        }
        if json_mode:
            kwargs["response_mime_type"] = "application/json"
        if max_tokens is not None:
            kwargs["max_output_tokens"] = max_tokens

        logger.info("Building Gemini LLM (model=%s, json_mode=%s)", model, json_mode)
        return ChatGoogleGenerativeAI(**kwargs)

    elif provider == "openai":
        from langchain_openai import ChatOpenAI

        if not openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when LLM_PROVIDER='openai'")

        kwargs = {
            "model": model,
            "temperature": temperature,
            "openai_api_key": openai_api_key,
        }
        if json_mode:
            kwargs["model_kwargs"] = {"response_format": {"type": "json_object"}}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        logger.info("Building OpenAI LLM (model=%s, json_mode=%s)", model, json_mode)
        return ChatOpenAI(**kwargs)

    elif provider == "groq":
        from langchain_groq import ChatGroq

        if not groq_api_key:
            raise ValueError("GROQ_API_KEY is required when LLM_PROVIDER='groq'")

        kwargs = {
            "model": model,
            "temperature": temperature,
            "groq_api_key": groq_api_key,
            "max_tokens": max_tokens if max_tokens is not None else 4096,
        }
        if json_mode:
            kwargs["model_kwargs"] = {"response_format": {"type": "json_object"}}

        logger.info("Building Groq LLM (model=%s, json_mode=%s)", model, json_mode)
        return ChatGroq(**kwargs)

    elif provider == "ollama":
        from langchain_ollama import ChatOllama

        kwargs = {
            "model": model,
            "temperature": temperature,
            "base_url": ollama_base_url,
        }
        if json_mode:
            kwargs["format"] = "json"

        logger.info("Building ChatOllama (model=%s, json_mode=%s)", model, json_mode)
        return ChatOllama(**kwargs)

    else:
        raise ValueError(
            f"Unsupported LLM_PROVIDER: '{provider}'. "
            "Must be 'google', 'openai', 'groq', or 'ollama'."
        )
