"""
factory - Composition root for the meal analyzer backend.

ALL dependency wiring happens here. No other module constructs its own
dependencies. Adapters (REST, tests) call this factory to get fully
configured services.

Usage:
    from factory import ServiceFactory
    from infrastructure.config import Settings

    config = Settings.from_env()
    factory = ServiceFactory(config)
    factory.initialize()  # one-time startup: restores the stored session

    gateway = factory.create_ai_gateway()
    info = await gateway.analyze_meal_image(image_b64, "image/jpeg")

Services that share state (history store, key/value storage, session)
are created once per factory; stateless ones are created on demand.
"""

from __future__ import annotations

import logging
from typing import Optional

from domain.ports import KeyValueStore, StructuredGeneratorPort
from infrastructure.config import Settings
from infrastructure.identifiers import SystemClock, TimestampIdGenerator
from infrastructure.llm.llm_builder import build_llm
from infrastructure.llm.structured_generator import LangChainStructuredGenerator
from infrastructure.persistence.history_repo import InMemoryHistoryRepository
from infrastructure.persistence.local_storage import InMemoryKeyValueStore, JsonFileKeyValueStore
from infrastructure.persistence.user_repo import KeyValueUserDirectory
from application.services.ai_gateway import AIGatewayService
from application.services.authentication import AcceptAnyPasswordVerifier, AuthenticationService
from application.services.session import SessionService

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Composition root: wires all dependencies together.

    generator and store may be passed in to replace the LLM-backed
    generator and the configured key/value storage (tests use this).
    """

    def __init__(
        self,
        config: Settings,
        *,
        generator: Optional[StructuredGeneratorPort] = None,
        store: Optional[KeyValueStore] = None,
    ):
        self._config = config
        self._generator = generator
        self._store = store or self._build_store()
        self._history_repo = InMemoryHistoryRepository()
        self._id_generator = TimestampIdGenerator()
        self._clock = SystemClock()
        self._session = SessionService(
            self._store, self._history_repo, history_delay_ms=config.history_delay_ms,
        )

    def initialize(self) -> None:
        """One-time startup: restore the persisted session, if any."""
        logger.info("Initializing ServiceFactory (provider=%s)", self._config.llm_provider)
        user = self._session.restore()
        logger.info("ServiceFactory ready (session user: %s)", user.email if user else None)

    # ------------------------------------------------------------------
    # Service creation
    # ------------------------------------------------------------------

    def create_ai_gateway(self) -> AIGatewayService:
        """Create an AIGatewayService bound to the shared history store."""
        return AIGatewayService(
            generator=self._get_generator(),
            history_repo=self._history_repo,
            id_generator=self._id_generator,
            clock=self._clock,
            history_delay_ms=self._config.history_delay_ms,
        )

    def create_authentication_service(self) -> AuthenticationService:
        """Create an AuthenticationService over the mock user database."""
        return AuthenticationService(
            user_directory=KeyValueUserDirectory(self._store),
            verifier=AcceptAnyPasswordVerifier(),
            auth_delay_ms=self._config.auth_delay_ms,
            google_login_delay_ms=self._config.google_login_delay_ms,
        )

    @property
    def session(self) -> SessionService:
        return self._session

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _get_generator(self) -> StructuredGeneratorPort:
        """Wire the LLM-backed generator; the chat model is built on first request."""
        if self._generator is None:
            self._generator = LangChainStructuredGenerator(llm_factory=self._build_llm)
        return self._generator

    def _build_llm(self):
        return build_llm(
            provider=self._config.llm_provider,
            model=self._config.active_llm_model,
            temperature=self._config.llm_temperature,
            google_api_key=self._config.google_api_key,
            openai_api_key=self._config.openai_api_key,
            groq_api_key=self._config.groq_api_key,
            ollama_base_url=self._config.ollama_base_url,
            json_mode=True,
        )

    def _build_store(self) -> KeyValueStore:
        if self._config.storage_path:
            logger.info("Local storage file: %s", self._config.storage_path)
            return JsonFileKeyValueStore(self._config.storage_path)
        return InMemoryKeyValueStore()
