"""
Widok szczegółów pytania.

Pytanie, odpowiedzi z głosowaniem, formularz odpowiedzi. Każda akcja
kończy się przeładowaniem całego wątku.
"""

import asyncio
from typing import Optional
from nicegui import ui

from app_ui import ui_labels
from app_ui.components.answer_card import AnswerCard
from core.errors import QuestionNotFoundError
from core.forum_context import ForumContext
from core.log_utils import log
from core.models import QuestionThread, VoteType
from core.models.timestamps import format_date


class QuestionDetailView:
    """Widok pojedynczego pytania i jego odpowiedzi."""

    def __init__(self, context: ForumContext, question_id: str):
        self.threads = context.threads
        self.session = context.session
        self.question_id = question_id

        # Stan
        self.thread: Optional[QuestionThread] = None
        self.loading = True
        self.error: Optional[str] = None
        self.submitting = False
        self.new_answer = ""

        self.container = None

    def create(self) -> None:
        """Tworzy widok i uruchamia ładowanie."""
        self.container = ui.column().classes('w-full max-w-4xl mx-auto px-4 py-8 gap-6')
        self.render()
        ui.timer(0.1, self.load, once=True)

    async def load(self) -> None:
        """Ładuje pytanie, odpowiedzi i głosy."""
        self.loading = True
        self.render()
        try:
            self.thread = await asyncio.to_thread(self.threads.load, self.question_id)
            self.error = None
        except QuestionNotFoundError:
            self.thread = None
            self.error = ui_labels.QUESTION_NOT_FOUND
        except Exception as e:
            log(f"[THREAD] Błąd ładowania pytania {self.question_id}", e)
            self.error = ui_labels.FAILED_LOAD_QUESTION
        finally:
            self.loading = False
            self.render()

    def render(self) -> None:
        if self.container is None:
            return
        self.container.clear()
        with self.container:
            if self.loading and self.thread is None:
                ui.label(ui_labels.LOADING).classes('w-full text-center py-8')
            elif self.error or self.thread is None:
                ui.label(self.error or ui_labels.QUESTION_NOT_FOUND).classes(
                    'w-full text-center py-8 text-red-600'
                )
            else:
                self._create_question_section()
                self._create_answers_section()
                self._create_answer_form()

    def _create_question_section(self) -> None:
        question = self.thread.question

        ui.button(
            ui_labels.BACK_TO_QUESTIONS,
            icon='arrow_back',
            on_click=lambda: ui.navigate.to('/')
        ).props('flat no-caps').classes('text-gray-600')

        with ui.card().classes('w-full p-6 border border-gray-200 shadow-sm'):
            with ui.row().classes('w-full items-start justify-between'):
                ui.label(question.title).classes('text-2xl font-bold')
                # Kontrolki właściciela tylko przy załadowanej sesji
                if self.session.is_owner(question.user_id):
                    ui.button(
                        icon='delete',
                        on_click=self._delete_question
                    ).props('flat round dense color=negative')
            ui.label(question.content).classes('text-gray-700 whitespace-pre-wrap')
            ui.label(f'{ui_labels.POSTED_ON} {format_date(question.created_at)}').classes(
                'text-sm text-gray-500'
            )

    def _create_answers_section(self) -> None:
        ui.label(self.thread.answer_count_label).classes('text-xl font-semibold')
        with ui.column().classes('w-full gap-6'):
            for answer in self.thread.answers:
                AnswerCard(
                    answer=answer,
                    current_vote=self.thread.vote_for(answer.id),
                    can_delete=self.session.is_owner(answer.user_id),
                    on_vote=self._vote,
                    on_delete=self._delete_answer
                ).create()

    def _create_answer_form(self) -> None:
        with ui.card().classes('w-full p-6 border border-gray-200 shadow-sm'):
            ui.label(ui_labels.YOUR_ANSWER).classes('text-lg font-semibold')
            ui.textarea(placeholder=ui_labels.ANSWER_PLACEHOLDER).props(
                'outlined rows=6'
            ).classes('w-full').bind_value(self, 'new_answer')
            button = ui.button(
                ui_labels.POSTING if self.submitting else ui_labels.POST_ANSWER,
                on_click=self._submit_answer
            ).props('no-caps')
            if self.submitting:
                button.disable()

    # === Akcje ===

    async def _submit_answer(self) -> None:
        if not self.new_answer.strip() or self.submitting:
            return
        self.submitting = True
        self.render()
        try:
            self.thread = await asyncio.to_thread(
                self.threads.submit_answer, self.question_id, self.new_answer
            )
            self.new_answer = ""
        except Exception as e:
            log(f"[THREAD] Błąd dodawania odpowiedzi do {self.question_id}", e)
            ui.notify(ui_labels.FAILED_SUBMIT_ANSWER, type='negative')
        finally:
            self.submitting = False
            self.render()

    async def _vote(self, answer_id: str, vote_type: VoteType) -> None:
        try:
            self.thread = await asyncio.to_thread(
                self.threads.toggle_vote, self.thread, answer_id, vote_type
            )
        except Exception as e:
            log(f"[THREAD] Błąd głosowania na {answer_id}", e)
            ui.notify(ui_labels.FAILED_VOTE, type='negative')
        self.render()

    async def _delete_answer(self, answer_id: str) -> None:
        try:
            self.thread = await asyncio.to_thread(
                self.threads.delete_answer, self.question_id, answer_id
            )
        except Exception as e:
            log(f"[THREAD] Błąd usuwania odpowiedzi {answer_id}", e)
            ui.notify(ui_labels.FAILED_DELETE_ANSWER, type='negative')
        self.render()

    async def _delete_question(self) -> None:
        try:
            await asyncio.to_thread(self.threads.delete_question, self.question_id)
        except Exception as e:
            log(f"[THREAD] Błąd usuwania pytania {self.question_id}", e)
            ui.notify(ui_labels.FAILED_DELETE_QUESTION, type='negative')
            return
        ui.navigate.to('/')
