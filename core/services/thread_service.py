"""
Serwis wątku pytania.

Szczegóły pytania, odpowiedzi i głosy bieżącego użytkownika. Każda mutacja
kończy się pełnym przeładowaniem wątku (brak aktualizacji przyrostowych).
"""

from typing import Dict

from core.errors import QuestionNotFoundError
from core.log_utils import log
from core.models import Answer, QuestionThread, Vote, VoteType
from core.repositories import AnswerRepository, QuestionRepository, VoteRepository
from core.session_manager import SessionManager


class QuestionThreadService:
    """Operacje na pojedynczym pytaniu i jego odpowiedziach."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        answer_repo: AnswerRepository,
        vote_repo: VoteRepository,
        session: SessionManager
    ):
        self.question_repo = question_repo
        self.answer_repo = answer_repo
        self.vote_repo = vote_repo
        self.session = session

    def load(self, question_id: str) -> QuestionThread:
        """
        Pobiera pytanie, odpowiedzi (od najstarszej) i mapę głosów użytkownika.

        Raises:
            QuestionNotFoundError: pytanie nie istnieje
        """
        question = self.question_repo.get_by_id(question_id)
        if question is None:
            raise QuestionNotFoundError(question_id)
        answers = self.answer_repo.find_by_question(question_id)
        return QuestionThread(
            question=question,
            answers=answers,
            votes=self.load_votes(question_id)
        )

    def load_votes(self, question_id: str) -> Dict[str, VoteType]:
        """
        Głosy zalogowanego użytkownika; bez sesji mapa jest pusta.

        Błąd pobrania głosów nie blokuje wątku: pytanie i odpowiedzi
        renderują się bez podświetlenia głosów.
        """
        state = self.session.state
        if not state.is_signed_in:
            return {}
        try:
            return self.vote_repo.votes_for_question(question_id, state.user_id)
        except Exception as e:
            log(f"[THREAD] Błąd ładowania głosów dla pytania {question_id}", e)
            return {}

    def submit_answer(self, question_id: str, content: str) -> QuestionThread:
        """Dodaje odpowiedź i przeładowuje wątek. Pusta treść jest ignorowana."""
        content = (content or "").strip()
        if content:
            user_id = self.session.require_user_id()
            self.answer_repo.save(
                Answer(content=content, question_id=question_id, user_id=user_id)
            )
            log(f"[THREAD] Dodano odpowiedź do pytania {question_id}")
        return self.load(question_id)

    def toggle_vote(
        self,
        thread: QuestionThread,
        answer_id: str,
        vote_type: VoteType
    ) -> QuestionThread:
        """
        Przełącza głos na odpowiedź.

        Ten sam typ co obecny głos -> usunięcie głosu. W przeciwnym razie
        upsert nowego typu (przeciwny głos jest po prostu nadpisywany).
        Po obu gałęziach wątek i głosy są przeładowywane.
        """
        vote_type = VoteType(vote_type)
        question_id = thread.question.id
        user_id = self.session.require_user_id()

        if thread.vote_for(answer_id) == vote_type:
            self.vote_repo.remove(answer_id, user_id)
            log(f"[THREAD] Cofnięto głos {vote_type} na {answer_id}")
        else:
            self.vote_repo.cast(Vote(
                answer_id=answer_id,
                user_id=user_id,
                vote_type=vote_type,
                question_id=question_id
            ))
            log(f"[THREAD] Głos {vote_type} na {answer_id}")

        return self.load(question_id)

    def delete_answer(self, question_id: str, answer_id: str) -> QuestionThread:
        """Usuwa odpowiedź (autoryzację wymusza backend) i przeładowuje wątek."""
        self.answer_repo.delete(answer_id)
        log(f"[THREAD] Usunięto odpowiedź {answer_id}")
        return self.load(question_id)

    def delete_question(self, question_id: str) -> None:
        """Usuwa pytanie; widok po sukcesie wraca do katalogu."""
        self.question_repo.delete(question_id)
        log(f"[THREAD] Usunięto pytanie {question_id}")
