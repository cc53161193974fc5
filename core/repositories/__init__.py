"""Repozytoria do obsługi danych."""

from .question_repo import QuestionRepository
from .answer_repo import AnswerRepository
from .vote_repo import VoteRepository

__all__ = ['QuestionRepository', 'AnswerRepository', 'VoteRepository']
