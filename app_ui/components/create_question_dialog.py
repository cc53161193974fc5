"""
Dialog tworzenia pytania.

Błędy walidacji i brak sesji pokazywane są w dialogu, błędy backendu
sprowadzane do ogólnego komunikatu.
"""

import asyncio
from typing import Awaitable, Callable, Optional
from nicegui import ui

from app_ui import ui_labels
from core.errors import ForumError
from core.log_utils import log
from core.services import QuestionCatalog


class CreateQuestionDialog:
    """Dialog "Ask a Question"."""

    def __init__(
        self,
        catalog: QuestionCatalog,
        on_created: Optional[Callable[[], Awaitable[None]]] = None
    ):
        self.catalog = catalog
        self.on_created = on_created
        self.dialog = None

        # Stan formularza
        self.title = ""
        self.content = ""

        # Komponenty
        self.error_label = None
        self.submit_button = None

    def open(self) -> None:
        """Otwiera dialog."""
        with ui.dialog() as self.dialog, ui.card().classes('w-full max-w-2xl'):
            self._create_content()

        self.dialog.open()

    def close(self) -> None:
        """Zamyka dialog."""
        if self.dialog:
            self.dialog.close()

    def _create_content(self) -> None:
        with ui.row().classes('w-full items-center justify-between'):
            ui.label(ui_labels.DIALOG_TITLE).classes('text-xl font-semibold')
            ui.button(icon='close', on_click=self.close).props('flat round dense')

        ui.separator()

        ui.input(
            label=ui_labels.DIALOG_TITLE_LABEL,
            placeholder=ui_labels.DIALOG_TITLE_PLACEHOLDER
        ).props('outlined').classes('w-full').bind_value(self, 'title')

        ui.textarea(
            label=ui_labels.DIALOG_DETAILS_LABEL,
            placeholder=ui_labels.DIALOG_DETAILS_PLACEHOLDER
        ).props('outlined rows=6').classes('w-full').bind_value(self, 'content')

        self.error_label = ui.label('').classes('text-red-600 text-sm bg-red-50 p-3 rounded-md w-full')
        self.error_label.set_visibility(False)

        with ui.row().classes('w-full justify-end gap-3'):
            ui.button(ui_labels.DIALOG_CANCEL, on_click=self.close).props('flat no-caps')
            self.submit_button = ui.button(
                ui_labels.DIALOG_SUBMIT,
                on_click=self._submit
            ).props('no-caps')

    async def _submit(self) -> None:
        """Zapisuje pytanie i odświeża katalog."""
        self.error_label.set_visibility(False)
        self.submit_button.disable()
        self.submit_button.text = ui_labels.POSTING
        try:
            await asyncio.to_thread(self.catalog.create, self.title, self.content)
        except ForumError as e:
            self._show_error(str(e))
            return
        except Exception as e:
            log("[CATALOG] Błąd tworzenia pytania", e)
            self._show_error(ui_labels.FAILED_CREATE_QUESTION)
            return
        finally:
            self.submit_button.enable()
            self.submit_button.text = ui_labels.DIALOG_SUBMIT

        self.title = ""
        self.content = ""
        self.close()
        if self.on_created:
            await self.on_created()

    def _show_error(self, message: str) -> None:
        self.error_label.text = message
        self.error_label.set_visibility(True)
