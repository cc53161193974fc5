# tests/conftest.py
"""
Shared fixtures: a fake Supabase client and a ForumContext wired on top of it.
"""

import pytest

from core.forum_context import ForumContext
from tests.fakes import FakeSupabaseClient


@pytest.fixture(autouse=True)
def _isolated_log_file(tmp_path, monkeypatch):
    """Logi testów nie trafiają do logs/app.log repozytorium."""
    monkeypatch.setattr("core.log_utils.LOG_FILE", tmp_path / "test.log")


@pytest.fixture
def client():
    return FakeSupabaseClient()


@pytest.fixture
def context(client):
    context = ForumContext.from_client(client)
    context.session.start()
    yield context
    context.close()


@pytest.fixture
def alice(client):
    return client.auth.add_user("alice@example.com", "alice-pw")


@pytest.fixture
def bob(client):
    return client.auth.add_user("bob@example.com", "bob-pw")


@pytest.fixture
def signed_in(context, alice):
    """Kontekst z zalogowaną Alice."""
    context.session.sign_in("alice@example.com", "alice-pw")
    return context


def seed_question(client, title, user_id, is_answered=False):
    """Wstawia pytanie bezpośrednio do magazynu (z odpowiedzią, jeśli is_answered)."""
    question = client.table('questions').insert(
        {'title': title, 'content': f'{title} body', 'user_id': user_id}
    ).execute().data[0]
    if is_answered:
        client.table('answers').insert(
            {'content': 'seed answer', 'question_id': question['id'], 'user_id': user_id}
        ).execute()
    return question
