"""Repozytorium odpowiedzi."""

from typing import List

from .base import BaseRepository
from core.models import Answer


class AnswerRepository(BaseRepository):
    """Repozytorium odpowiedzi (tabela answers)."""

    table_name = "answers"

    def find_by_question(self, question_id: str) -> List[Answer]:
        """Pobiera odpowiedzi na pytanie, od najstarszej."""
        query = (
            self._table()
            .select('*')
            .eq('question_id', question_id)
            .order('created_at', desc=False)
        )
        return [Answer.from_dict(row) for row in self._fetch_all(query)]

    def save(self, answer: Answer) -> Answer:
        rows = self._execute(self._table().insert([answer.to_insert()]))
        return Answer.from_dict(rows[0]) if rows else answer

    def delete(self, answer_id: str) -> None:
        self._execute(self._table().delete().eq('id', answer_id))
