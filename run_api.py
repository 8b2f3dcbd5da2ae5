"""
Run the Meal Analyzer & Personal Coach REST API.

Usage:
    python run_api.py

Environment variables (all optional):
    LLM_PROVIDER          "google", "openai", "groq" or "ollama" (default: google)
    LLM_MODEL_GOOGLE      Model name when LLM_PROVIDER=google (default: gemini-2.5-flash)
    LLM_MODEL_OPENAI      Model name when LLM_PROVIDER=openai (default: gpt-4.1-mini)
    LLM_MODEL_GROQ        Model name when LLM_PROVIDER=groq (default: llama-3.3-70b-versatile)
    LLM_MODEL_OLLAMA      Model name when LLM_PROVIDER=ollama (default: llama3.2)
    GOOGLE_API_KEY        Required when LLM_PROVIDER=google
    OPENAI_API_KEY        Required when LLM_PROVIDER=openai
    GROQ_API_KEY          Required when LLM_PROVIDER=groq
    OLLAMA_BASE_URL       Ollama server URL (default: http://localhost:11434/)
    STORAGE_PATH          Local storage JSON file (default: ./local_storage.json)
    HISTORY_DELAY_MS      Simulated history latency (default: 500)
    AUTH_DELAY_MS         Simulated login/register latency (default: 1000)
    GOOGLE_LOGIN_DELAY_MS Simulated Google sign-in latency (default: 500)
"""

import logging
import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "adapters.rest.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
