"""Enumy używane w modelach."""

from enum import Enum
from typing import Optional


class VoteType(str, Enum):
    """Rodzaj głosu oddanego na odpowiedź."""
    LIKE = "like"
    DISLIKE = "dislike"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Nazwa do wyświetlenia w UI."""
        return {
            VoteType.LIKE: "Like",
            VoteType.DISLIKE: "Dislike"
        }.get(self, self.value)


class QuestionFilter(str, Enum):
    """Filtr katalogu pytań."""
    ALL = "all"
    ANSWERED = "answered"
    UNANSWERED = "unanswered"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Nazwa do wyświetlenia w UI."""
        return {
            QuestionFilter.ALL: "All Questions",
            QuestionFilter.ANSWERED: "Answered",
            QuestionFilter.UNANSWERED: "Unanswered"
        }.get(self, self.value)

    @property
    def answered_flag(self) -> Optional[bool]:
        """Wartość is_answered dla predykatu równości (None = bez filtra)."""
        return {
            QuestionFilter.ANSWERED: True,
            QuestionFilter.UNANSWERED: False
        }.get(self)
