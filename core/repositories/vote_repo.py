"""Repozytorium głosów (rejestr głosów użytkownika)."""

from typing import Dict

from .base import BaseRepository
from core.models import Vote, VoteType


class VoteRepository(BaseRepository):
    """
    Rejestr głosów: jeden rekord na parę (answer_id, user_id).

    Zmiana like -> dislike to zwykły upsert, bez osobnego kroku "zamiany".
    """

    table_name = "votes"
    conflict_columns = "answer_id,user_id"

    def votes_for_question(self, question_id: str, user_id: str) -> Dict[str, VoteType]:
        """Zwraca mapę answer_id -> typ głosu użytkownika dla pytania."""
        query = (
            self._table()
            .select('*')
            .eq('question_id', question_id)
            .eq('user_id', user_id)
        )
        votes = [Vote.from_dict(row) for row in self._fetch_all(query)]
        return {vote.answer_id: vote.vote_type for vote in votes}

    def cast(self, vote: Vote) -> None:
        """Zapisuje głos, zastępując poprzedni głos użytkownika na tę odpowiedź."""
        self._execute(
            self._table().upsert(vote.to_dict(), on_conflict=self.conflict_columns)
        )

    def remove(self, answer_id: str, user_id: str) -> None:
        """Usuwa głos użytkownika na odpowiedź."""
        self._execute(
            self._table()
            .delete()
            .eq('answer_id', answer_id)
            .eq('user_id', user_id)
        )
