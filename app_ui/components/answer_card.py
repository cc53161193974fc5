"""
Answer Card Component
Karta odpowiedzi z przyciskami like/dislike i (dla autora) usuwaniem.

Aktywny głos użytkownika podświetla odpowiedni przycisk.
"""

from nicegui import ui
from typing import Callable, Optional

from core.models import Answer, VoteType


class AnswerCard:
    """Karta pojedynczej odpowiedzi w wątku."""

    def __init__(
        self,
        answer: Answer,
        current_vote: Optional[VoteType] = None,
        can_delete: bool = False,
        on_vote: Optional[Callable[[str, VoteType], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None
    ):
        self.answer = answer
        self.current_vote = current_vote
        self.can_delete = can_delete
        self.on_vote = on_vote
        self.on_delete = on_delete
        self.card = None

    def create(self) -> ui.card:
        """Tworzy i zwraca kartę."""
        with ui.card().classes('w-full p-6 border border-gray-200 shadow-sm') as self.card:
            ui.label(self.answer.content).classes('text-gray-700 whitespace-pre-wrap mb-2')

            with ui.row().classes('w-full items-center justify-between'):
                with ui.row().classes('items-center gap-4'):
                    self._vote_button(VoteType.LIKE, 'thumb_up', self.answer.likes, 'green')
                    self._vote_button(VoteType.DISLIKE, 'thumb_down', self.answer.dislikes, 'red')

                if self.can_delete:
                    ui.button(
                        icon='delete',
                        on_click=self._handle_delete
                    ).props('flat round dense color=negative')

        return self.card

    def _vote_button(self, vote_type: VoteType, icon: str, count: int, color: str) -> ui.button:
        active = self.current_vote == vote_type
        button = ui.button(
            str(count),
            icon=icon,
            on_click=lambda: self._handle_vote(vote_type)
        ).props(f'flat dense no-caps color={color if active else "grey"}')
        button.tooltip(vote_type.display_name)
        return button

    def _handle_vote(self, vote_type: VoteType):
        if self.on_vote:
            return self.on_vote(self.answer.id, vote_type)

    def _handle_delete(self):
        if self.on_delete:
            return self.on_delete(self.answer.id)
