"""Model odpowiedzi."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .timestamps import parse_timestamp


@dataclass
class Answer:
    """Odpowiedź na pytanie. Liczniki likes/dislikes liczy backend."""
    id: Optional[str] = None
    content: str = ""
    question_id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    likes: int = 0
    dislikes: int = 0

    def to_insert(self) -> dict:
        return {
            'content': self.content,
            'question_id': self.question_id,
            'user_id': self.user_id
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Answer':
        return cls(
            id=data.get('id'),
            content=data.get('content', ''),
            question_id=data.get('question_id'),
            user_id=data.get('user_id'),
            created_at=parse_timestamp(data.get('created_at')),
            likes=data.get('likes') or 0,
            dislikes=data.get('dislikes') or 0
        )
