"""Repozytorium pytań."""

from typing import Optional, List

from .base import BaseRepository
from core.models import Question


class QuestionRepository(BaseRepository):
    """Repozytorium do zarządzania pytaniami (tabela questions)."""

    table_name = "questions"

    def find_all(self, is_answered: Optional[bool] = None) -> List[Question]:
        """
        Pobiera pytania od najnowszego.

        Args:
            is_answered: Predykat równości na fladze is_answered (None = wszystkie)
        """
        query = self._table().select('*')
        if is_answered is not None:
            query = query.eq('is_answered', self._filter_value(is_answered))
        query = query.order('created_at', desc=True)
        return [Question.from_dict(row) for row in self._fetch_all(query)]

    def get_by_id(self, question_id: str) -> Optional[Question]:
        """Pobiera pytanie po ID."""
        row = self._fetch_one(self._table().select('*').eq('id', question_id))
        return Question.from_dict(row) if row else None

    def save(self, question: Question) -> Question:
        """
        Zapisuje nowe pytanie (INSERT).

        Returns:
            Pytanie z polami nadanymi przez backend (jeśli zwrócił wiersz).
        """
        rows = self._execute(self._table().insert([question.to_insert()]))
        return Question.from_dict(rows[0]) if rows else question

    def delete(self, question_id: str) -> None:
        """Usuwa pytanie. Odpowiedzi kasuje kaskadowo backend."""
        self._execute(self._table().delete().eq('id', question_id))
