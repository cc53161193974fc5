"""Model głosu i wątku pytania."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .enums import VoteType
from .question import Question
from .answer import Answer


@dataclass
class Vote:
    """Głos użytkownika na odpowiedź; unikalny per (answer_id, user_id)."""
    answer_id: str
    user_id: str
    vote_type: VoteType
    question_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'answer_id': self.answer_id,
            'question_id': self.question_id,
            'user_id': self.user_id,
            'vote_type': str(self.vote_type)
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Vote':
        return cls(
            answer_id=data['answer_id'],
            user_id=data.get('user_id'),
            vote_type=VoteType(data['vote_type']),
            question_id=data.get('question_id')
        )


@dataclass
class QuestionThread:
    """Pytanie z odpowiedziami (od najstarszej) i głosami bieżącego użytkownika."""
    question: Question
    answers: List[Answer] = field(default_factory=list)
    votes: Dict[str, VoteType] = field(default_factory=dict)

    def vote_for(self, answer_id: str) -> Optional[VoteType]:
        return self.votes.get(answer_id)

    @property
    def answer_count_label(self) -> str:
        count = len(self.answers)
        return f"{count} {'Answer' if count == 1 else 'Answers'}"
