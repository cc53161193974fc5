"""Modele danych aplikacji."""

from .enums import VoteType, QuestionFilter
from .question import Question
from .answer import Answer
from .vote import Vote, QuestionThread

__all__ = [
    'VoteType',
    'QuestionFilter',
    'Question',
    'Answer',
    'Vote',
    'QuestionThread',
]
