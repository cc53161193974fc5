"""
Serwis katalogu pytań.

Lista pytań z filtrem po fladze is_answered oraz tworzenie pytań.
Bez cache: każda zmiana filtra to pełne ponowne pobranie.
"""

from typing import List

from core.errors import ValidationError
from core.log_utils import log
from core.models import Question, QuestionFilter
from core.repositories import QuestionRepository
from core.session_manager import SessionManager


class QuestionCatalog:
    """Katalog pytań forum."""

    def __init__(self, question_repo: QuestionRepository, session: SessionManager):
        self.question_repo = question_repo
        self.session = session

    def list(self, question_filter: QuestionFilter = QuestionFilter.ALL) -> List[Question]:
        """
        Pobiera pytania od najnowszego.

        Args:
            question_filter: all / answered / unanswered (predykat liczony po stronie backendu)
        """
        question_filter = QuestionFilter(question_filter)
        return self.question_repo.find_all(is_answered=question_filter.answered_flag)

    def create(self, title: str, content: str) -> Question:
        """
        Tworzy pytanie w imieniu zalogowanego użytkownika.

        Raises:
            ValidationError: pusty tytuł lub treść
            NotAuthenticatedError: brak zalogowanego użytkownika (nic nie jest zapisywane)
        """
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            raise ValidationError("Title and details are required")

        user_id = self.session.require_user_id()
        question = self.question_repo.save(
            Question(title=title, content=content, user_id=user_id)
        )
        log(f"[CATALOG] Utworzono pytanie {question.id}")
        return question
