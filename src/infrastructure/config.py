"""
infrastructure.config - Typed, injectable configuration.

A frozen dataclass that can be constructed from environment or passed
explicitly (tests build it directly with zero delays).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the meal analyzer backend.

    No module-level globals: construct via from_env() or pass explicitly
    in tests.
    """
    project_root: Path

    # ── Centralized LLM Provider ────────────────────────────────
    # One setting controls both AI calls (meal analysis, plan
    # generation). Allowed: "google", "openai", "groq", "ollama"
    llm_provider: str = "google"

    # Model names, only the one matching llm_provider is used.
    llm_model_google: str = "gemini-2.5-flash"
    llm_model_openai: str = "gpt-4.1-mini"
    llm_model_groq: str = "llama-3.3-70b-versatile"
    llm_model_ollama: str = "llama3.2"

    llm_temperature: float = 0.4

    # Connection details
    google_api_key: str = ""
    openai_api_key: str = ""
    groq_api_key: str = ""
    ollama_base_url: str = "http://localhost:11434/"

    # Local key/value storage (current user + registered-user list).
    # Empty means in-memory only.
    storage_path: str = ""

    # Simulated latency, in milliseconds
    history_delay_ms: int = 500
    auth_delay_ms: int = 1000
    google_login_delay_ms: int = 500

    @property
    def active_llm_model(self) -> str:
        """Return the model name for the currently active LLM provider."""
        if self.llm_provider == "openai":
            return self.llm_model_openai
        elif self.llm_provider == "groq":
            return self.llm_model_groq
        elif self.llm_provider == "ollama":
            return self.llm_model_ollama
        return self.llm_model_google

    @classmethod
    def from_env(cls, project_root: Optional[Path] = None) -> Settings:
        """Build Settings from the environment (and a .env file if present)."""
        from dotenv import load_dotenv
        load_dotenv()

        root = project_root or Path(__file__).resolve().parent.parent.parent

        return cls(
            project_root=root,
            llm_provider=os.getenv("LLM_PROVIDER", "google"),
            llm_model_google=os.getenv("LLM_MODEL_GOOGLE", "gemini-2.5-flash"),
            llm_model_openai=os.getenv("LLM_MODEL_OPENAI", "gpt-4.1-mini"),
            llm_model_groq=os.getenv("LLM_MODEL_GROQ", "llama-3.3-70b-versatile"),
            llm_model_ollama=os.getenv("LLM_MODEL_OLLAMA", "llama3.2"),
            llm_temperature=float(os.getenv("LLM_TEMPERATURE", "0.4")),
            google_api_key=os.getenv("GOOGLE_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            groq_api_key=os.getenv("GROQ_API_KEY", ""),
            ollama_base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/"),
            storage_path=os.getenv("STORAGE_PATH", str(root / "local_storage.json")),
            history_delay_ms=int(os.getenv("HISTORY_DELAY_MS", "500")),
            auth_delay_ms=int(os.getenv("AUTH_DELAY_MS", "1000")),
            google_login_delay_ms=int(os.getenv("GOOGLE_LOGIN_DELAY_MS", "500")),
        )
