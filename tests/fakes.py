"""
In-process fake of the Supabase client surface used by the app.

Emulates the PostgREST query builder (select/insert/upsert/delete with eq,
order, limit) and the auth client. The store keeps the derived columns
(is_answered, likes, dislikes) and cascades deletes the way the hosted
backend does with triggers and foreign keys.
"""

import itertools
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace


class FakeStoreError(Exception):
    """Remote call failure injected by a test."""


class FakeAuthError(Exception):
    pass


def _norm(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.operation = 'select'
        self.payload = None
        self.on_conflict = None
        self.filters = []
        self.ordering = None
        self.row_limit = None

    # Builders

    def select(self, columns='*'):
        self.operation = 'select'
        return self

    def insert(self, rows):
        self.operation = 'insert'
        self.payload = rows if isinstance(rows, list) else [rows]
        return self

    def upsert(self, rows, on_conflict=''):
        self.operation = 'upsert'
        self.payload = rows if isinstance(rows, list) else [rows]
        self.on_conflict = [c for c in on_conflict.split(',') if c]
        return self

    def delete(self):
        self.operation = 'delete'
        return self

    def eq(self, column, value):
        self.filters.append((column, _norm(value)))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def execute(self):
        self.store.calls.append((self.table, self.operation, list(self.filters)))
        if self.table in self.store.failing_tables:
            raise FakeStoreError(f"{self.table} unavailable")
        handler = getattr(self.store, f'_{self.operation}')
        return FakeResponse(handler(self))

    def matches(self, row):
        return all(_norm(row.get(column)) == value for column, value in self.filters)


class FakeStore:
    """Tabele questions / answers / votes w pamięci."""

    def __init__(self):
        self.tables = {'questions': [], 'answers': [], 'votes': []}
        self.calls = []
        self.failing_tables = set()
        self._clock = itertools.count()
        self._epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _timestamp(self):
        return (self._epoch + timedelta(minutes=next(self._clock))).isoformat()

    def _select(self, query):
        rows = [dict(row) for row in self.tables[query.table] if query.matches(row)]
        if query.ordering:
            column, desc = query.ordering
            rows.sort(key=lambda row: row[column], reverse=desc)
        if query.row_limit is not None:
            rows = rows[:query.row_limit]
        return rows

    def _insert(self, query):
        inserted = []
        for payload in query.payload:
            row = dict(payload)
            row.setdefault('id', uuid.uuid4().hex)
            row.setdefault('created_at', self._timestamp())
            if query.table == 'questions':
                row.setdefault('is_answered', False)
            if query.table == 'answers':
                row.setdefault('likes', 0)
                row.setdefault('dislikes', 0)
            self.tables[query.table].append(row)
            inserted.append(dict(row))
        self._recompute()
        return inserted

    def _upsert(self, query):
        result = []
        table = self.tables[query.table]
        for payload in query.payload:
            existing = next(
                (row for row in table
                 if all(_norm(row.get(c)) == _norm(payload.get(c)) for c in query.on_conflict)),
                None
            )
            if existing is not None:
                existing.update(payload)
                result.append(dict(existing))
            else:
                table.append(dict(payload))
                result.append(dict(payload))
        self._recompute()
        return result

    def _delete(self, query):
        table = self.tables[query.table]
        removed = [row for row in table if query.matches(row)]
        self.tables[query.table] = [row for row in table if not query.matches(row)]
        if query.table == 'questions':
            ids = {row['id'] for row in removed}
            self.tables['answers'] = [a for a in self.tables['answers'] if a['question_id'] not in ids]
        answer_ids = {a['id'] for a in self.tables['answers']}
        self.tables['votes'] = [v for v in self.tables['votes'] if v['answer_id'] in answer_ids]
        self._recompute()
        return removed

    def _recompute(self):
        answered = {a['question_id'] for a in self.tables['answers']}
        for question in self.tables['questions']:
            question['is_answered'] = question['id'] in answered
        for answer in self.tables['answers']:
            votes = [v for v in self.tables['votes'] if v['answer_id'] == answer['id']]
            answer['likes'] = sum(1 for v in votes if v['vote_type'] == 'like')
            answer['dislikes'] = sum(1 for v in votes if v['vote_type'] == 'dislike')


class FakeSubscription:
    def __init__(self, auth, callback):
        self.auth = auth
        self.callback = callback
        self.active = True

    def unsubscribe(self):
        self.active = False
        if self in self.auth.subscriptions:
            self.auth.subscriptions.remove(self)


class FakeAuth:
    def __init__(self):
        self.users = {}
        self.session = None
        self.subscriptions = []
        self.require_confirmation = False

    def add_user(self, email, password='secret'):
        user = SimpleNamespace(id=uuid.uuid4().hex, email=email)
        self.users[email] = (user, password)
        return user

    def _notify(self, event):
        for subscription in list(self.subscriptions):
            subscription.callback(event, self.session)

    def get_session(self):
        return self.session

    def get_user(self, jwt=None):
        if self.session is None:
            return None
        return SimpleNamespace(user=self.session.user)

    def sign_in_with_password(self, credentials):
        entry = self.users.get(credentials['email'])
        if entry is None or entry[1] != credentials['password']:
            raise FakeAuthError("Invalid login credentials")
        self.session = SimpleNamespace(user=entry[0], access_token=uuid.uuid4().hex)
        self._notify('SIGNED_IN')
        return SimpleNamespace(user=entry[0], session=self.session)

    def sign_up(self, credentials):
        user = self.add_user(credentials['email'], credentials['password'])
        if self.require_confirmation:
            return SimpleNamespace(user=user, session=None)
        return self.sign_in_with_password(credentials)

    def sign_out(self):
        self.session = None
        self._notify('SIGNED_OUT')

    def on_auth_state_change(self, callback):
        subscription = FakeSubscription(self, callback)
        self.subscriptions.append(subscription)
        return subscription


class FakeSupabaseClient:
    def __init__(self, store=None):
        self.store = store or FakeStore()
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self.store, name)
