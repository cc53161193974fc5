"""
Kontekst aplikacji per przeglądarka.

Każda przeglądarka dostaje własnego klienta Supabase (własne tokeny auth),
SessionManager i serwisy. Kontekst jest wstrzykiwany do stron zamiast
globalnego stanu sesji i zamykany przy wyłączaniu aplikacji.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
import threading

from supabase import Client, create_client

from core.config_manager import AppConfig, ConfigManager
from core.log_utils import log
from core.repositories import AnswerRepository, QuestionRepository, VoteRepository
from core.services import QuestionCatalog, QuestionThreadService
from core.session_manager import SessionManager


@dataclass
class ForumContext:
    """Stan aplikacji jednej przeglądarki."""
    client: Client
    session: SessionManager
    catalog: QuestionCatalog
    threads: QuestionThreadService

    @classmethod
    def from_client(cls, client: Client) -> 'ForumContext':
        """Składa repozytoria i serwisy nad jednym klientem."""
        session = SessionManager(client)
        question_repo = QuestionRepository(client)
        return cls(
            client=client,
            session=session,
            catalog=QuestionCatalog(question_repo, session),
            threads=QuestionThreadService(
                question_repo=question_repo,
                answer_repo=AnswerRepository(client),
                vote_repo=VoteRepository(client),
                session=session
            )
        )

    def close(self) -> None:
        self.session.close()


def supabase_client_factory(config: AppConfig) -> Callable[[], Client]:
    """Zwraca fabrykę klientów Supabase dla danej konfiguracji."""
    if not config.has_backend:
        raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be configured")

    def _create() -> Client:
        return create_client(config.supabase_url, config.supabase_key)

    return _create


class ContextRegistry:
    """Rejestr kontekstów kluczowany identyfikatorem przeglądarki."""

    def __init__(self, client_factory: Callable[[], Client]):
        self._client_factory = client_factory
        self._contexts: Dict[str, ForumContext] = {}
        self._lock = threading.Lock()

    def get(self, browser_id: str) -> ForumContext:
        """Zwraca kontekst przeglądarki, tworząc go przy pierwszym użyciu."""
        with self._lock:
            context = self._contexts.get(browser_id)
            if context is None:
                context = ForumContext.from_client(self._client_factory())
                self._contexts[browser_id] = context
                log(f"[APP] Nowy kontekst dla przeglądarki {browser_id[:8]}...")
            return context

    def release(self, browser_id: str) -> None:
        """
        Zamyka kontekst po rozłączeniu ostatniej strony przeglądarki.

        Usuwany jest tylko kontekst z załadowaną sesją SIGNED_OUT i bez
        słuchaczy; zalogowana sesja zostaje, bo klient Supabase trzyma jej tokeny.
        """
        with self._lock:
            context = self._contexts.get(browser_id)
            if context is None or context.session.has_listeners:
                return
            state = context.session.state
            if not state.is_loaded or state.is_signed_in:
                return
            del self._contexts[browser_id]
        context.close()
        log(f"[APP] Zwolniono kontekst przeglądarki {browser_id[:8]}...")

    def __len__(self) -> int:
        return len(self._contexts)

    def close_all(self) -> None:
        """Odsubskrybowuje wszystkie sesje (przy zamykaniu aplikacji)."""
        with self._lock:
            contexts = list(self._contexts.values())
            self._contexts.clear()
        for context in contexts:
            context.close()
        log(f"[APP] Zamknięto {len(contexts)} kontekst(ów)")


# Singleton instance
_registry: Optional[ContextRegistry] = None


def get_context_registry(config: Optional[AppConfig] = None) -> ContextRegistry:
    """Zwraca singleton ContextRegistry (bez configu czyta go z ConfigManager)."""
    global _registry
    if _registry is None:
        if config is None:
            config = ConfigManager().config
        _registry = ContextRegistry(supabase_client_factory(config))
    return _registry
