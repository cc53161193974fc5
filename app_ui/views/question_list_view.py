"""
Widok katalogu pytań.

Wyświetla listę pytań z filtrem (wszystkie / z odpowiedzią / bez odpowiedzi)
i przyciskiem zadawania pytania.
"""

import asyncio
from typing import Dict, List
from nicegui import ui

from app_ui import ui_labels
from app_ui.components.create_question_dialog import CreateQuestionDialog
from core.forum_context import ForumContext
from core.log_utils import log
from core.models import Question, QuestionFilter
from core.models.timestamps import format_date


class QuestionListView:
    """Widok katalogu pytań."""

    def __init__(self, context: ForumContext):
        self.catalog = context.catalog

        # Stan
        self.question_filter = QuestionFilter.ALL
        self.questions: List[Question] = []
        self.loading = True

        # Referencje do komponentów
        self.filter_buttons: Dict[QuestionFilter, ui.button] = {}
        self.list_container = None

    def create(self) -> None:
        """Tworzy widok katalogu."""
        with ui.column().classes('w-full max-w-4xl mx-auto px-4 py-8 gap-6'):
            self._create_toolbar()
            self.list_container = ui.column().classes('w-full gap-4')

        self._render_list()
        # Załaduj dane po wyrenderowaniu strony
        ui.timer(0.1, self.refresh_data, once=True)

    def _create_toolbar(self) -> None:
        """Przyciski filtrów i "Ask Question"."""
        with ui.row().classes('w-full items-center justify-between'):
            with ui.row().classes('gap-2'):
                for question_filter in QuestionFilter:
                    self.filter_buttons[question_filter] = ui.button(
                        question_filter.display_name,
                        icon=ui_labels.FILTER_ICONS[question_filter.value],
                        on_click=lambda f=question_filter: self._on_filter_change(f)
                    ).props('no-caps')
                self._update_filter_buttons()

            ui.button(
                ui_labels.ASK_QUESTION,
                icon='add_comment',
                on_click=self._open_create_dialog
            ).props('no-caps')

    def _update_filter_buttons(self) -> None:
        """Aktywny filtr jako przycisk główny, pozostałe jako obrys."""
        for question_filter, button in self.filter_buttons.items():
            if question_filter == self.question_filter:
                button.props(remove='outline')
            else:
                button.props('outline')

    async def refresh_data(self) -> None:
        """Pobiera pytania dla bieżącego filtra."""
        self.loading = True
        self._render_list()
        try:
            self.questions = await asyncio.to_thread(self.catalog.list, self.question_filter)
        except Exception as e:
            log("[CATALOG] Błąd ładowania pytań", e)
            ui.notify(ui_labels.FAILED_LOAD_QUESTIONS, type='negative')
        finally:
            self.loading = False
            self._render_list()

    def _render_list(self) -> None:
        if self.list_container is None:
            return
        self.list_container.clear()
        with self.list_container:
            if self.loading:
                ui.label(ui_labels.CATALOG_LOADING).classes('w-full text-center py-8')
            elif not self.questions:
                ui.label(ui_labels.CATALOG_EMPTY).classes('w-full text-center py-8 text-gray-500')
            else:
                for question in self.questions:
                    self._question_card(question)

    def _question_card(self, question: Question) -> None:
        with ui.card().classes('w-full p-6 border border-gray-200 shadow-sm hover:border-blue-500'):
            ui.link(question.title, f'/question/{question.id}').classes(
                'text-xl font-semibold text-gray-900 no-underline hover:text-blue-600'
            )
            ui.label(question.content).classes('text-gray-600 line-clamp-2')

            with ui.row().classes('items-center gap-2 text-sm text-gray-500'):
                if question.is_answered:
                    ui.icon('check', color='green').classes('text-base')
                    ui.label(ui_labels.STATUS_ANSWERED)
                else:
                    ui.icon('close', color='red').classes('text-base')
                    ui.label(ui_labels.STATUS_UNANSWERED)
                ui.label('•')
                ui.label(format_date(question.created_at))

    async def _on_filter_change(self, question_filter: QuestionFilter) -> None:
        """Obsługa zmiany filtra - zawsze pełne ponowne pobranie."""
        self.question_filter = question_filter
        self._update_filter_buttons()
        await self.refresh_data()

    def _open_create_dialog(self) -> None:
        CreateQuestionDialog(self.catalog, on_created=self.refresh_data).open()
