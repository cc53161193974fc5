# tests/test_forum_context.py
"""Tests for per-browser context wiring and teardown."""

import pytest

from core.config_manager import AppConfig
import core.forum_context as forum_context
from core.forum_context import ContextRegistry, get_context_registry, supabase_client_factory
from tests.fakes import FakeSupabaseClient


@pytest.fixture
def clients():
    return []


@pytest.fixture
def registry(clients):
    def _factory():
        client = FakeSupabaseClient()
        clients.append(client)
        return client
    return ContextRegistry(_factory)


class TestContextRegistry:
    def test_same_browser_reuses_context(self, registry, clients):
        assert registry.get("browser-1") is registry.get("browser-1")
        assert len(clients) == 1

    def test_browsers_get_separate_clients(self, registry, clients):
        first = registry.get("browser-1")
        second = registry.get("browser-2")
        assert first.client is not second.client
        assert len(registry) == 2

    def test_services_share_one_session(self, registry):
        context = registry.get("browser-1")
        assert context.catalog.session is context.session
        assert context.threads.session is context.session

    def test_close_all_unsubscribes_sessions(self, registry, clients):
        registry.get("browser-1").session.start()
        registry.get("browser-2").session.start()
        registry.close_all()
        assert all(client.auth.subscriptions == [] for client in clients)
        assert len(registry) == 0

    def test_release_drops_idle_signed_out_context(self, registry, clients):
        context = registry.get("browser-1")
        context.session.start()
        registry.release("browser-1")
        assert len(registry) == 0
        assert clients[0].auth.subscriptions == []
        assert registry.get("browser-1") is not context

    def test_release_keeps_context_with_open_pages(self, registry):
        context = registry.get("browser-1")
        context.session.start()
        context.session.add_listener(lambda state: None)
        registry.release("browser-1")
        assert registry.get("browser-1") is context

    def test_release_keeps_signed_in_context(self, registry, clients):
        context = registry.get("browser-1")
        clients[0].auth.add_user("carol@example.com", "pw")
        context.session.start()
        context.session.sign_in("carol@example.com", "pw")
        registry.release("browser-1")
        assert registry.get("browser-1") is context

    def test_release_keeps_context_while_session_loads(self, registry):
        context = registry.get("browser-1")
        registry.release("browser-1")
        assert registry.get("browser-1") is context

    def test_release_of_unknown_browser_is_noop(self, registry):
        registry.release("nobody")
        assert len(registry) == 0


class TestClientFactory:
    def test_requires_backend_settings(self):
        with pytest.raises(RuntimeError):
            supabase_client_factory(AppConfig())


class TestGetContextRegistry:
    def test_uses_given_config_without_reading_file(self, monkeypatch):
        def _unexpected_config_load(*args, **kwargs):
            raise AssertionError("config must not be loaded again")

        monkeypatch.setattr(forum_context, "_registry", None)
        monkeypatch.setattr(forum_context, "ConfigManager", _unexpected_config_load)
        config = AppConfig(supabase_url="https://example.supabase.co", supabase_key="anon")

        registry = get_context_registry(config)
        assert get_context_registry() is registry
        assert len(registry) == 0
