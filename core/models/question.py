"""Model pytania."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .timestamps import parse_timestamp


@dataclass
class Question:
    """
    Pytanie na forum.

    Flagę is_answered utrzymuje backend (na podstawie istnienia odpowiedzi),
    klient tylko ją odczytuje.
    """
    id: Optional[str] = None
    title: str = ""
    content: str = ""
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    is_answered: bool = False

    def to_insert(self) -> dict:
        """Wiersz do INSERT (id, created_at i is_answered ustawia backend)."""
        return {
            'title': self.title,
            'content': self.content,
            'user_id': self.user_id
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Question':
        """Tworzy obiekt z wiersza tabeli questions."""
        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            content=data.get('content', ''),
            user_id=data.get('user_id'),
            created_at=parse_timestamp(data.get('created_at')),
            is_answered=bool(data.get('is_answered', False))
        )
