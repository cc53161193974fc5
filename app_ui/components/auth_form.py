"""
Formularz logowania / rejestracji.

Wyświetlany zamiast aplikacji, gdy sesja jest w stanie SIGNED_OUT.
"""

import asyncio
from nicegui import ui

from app_ui import ui_labels
from core.log_utils import log
from core.session_manager import SessionManager


class AuthForm:
    """Formularz e-mail + hasło."""

    def __init__(self, session: SessionManager):
        self.session = session
        self.email = ""
        self.password = ""

        self.error_label = None
        self.buttons = []

    def create(self) -> None:
        with ui.column().classes('w-full min-h-screen items-center justify-center bg-gray-100'):
            with ui.card().classes('w-full max-w-md p-6 gap-4'):
                ui.label(ui_labels.AUTH_TITLE).classes('text-xl font-semibold')

                ui.input(ui_labels.AUTH_EMAIL).props('outlined dense type=email').classes(
                    'w-full'
                ).bind_value(self, 'email')
                ui.input(
                    ui_labels.AUTH_PASSWORD,
                    password=True,
                    password_toggle_button=True
                ).props('outlined dense').classes('w-full').bind_value(self, 'password')

                self.error_label = ui.label('').classes('text-red-600 text-sm bg-red-50 p-3 rounded-md w-full')
                self.error_label.set_visibility(False)

                with ui.row().classes('w-full justify-end gap-3'):
                    self.buttons = [
                        ui.button(ui_labels.AUTH_SIGN_UP, on_click=self._sign_up).props('flat no-caps'),
                        ui.button(ui_labels.AUTH_SIGN_IN, on_click=self._sign_in).props('no-caps'),
                    ]

    async def _sign_in(self) -> None:
        await self._run(self.session.sign_in)

    async def _sign_up(self) -> None:
        state = await self._run(self.session.sign_up)
        if state is not None and not state.is_signed_in:
            ui.notify(ui_labels.AUTH_CHECK_EMAIL, type='info')

    async def _run(self, action):
        """Wykonuje akcję auth w wątku; sukces przerysuje shell przez zmianę sesji."""
        if not self.email.strip() or not self.password:
            self._show_error(ui_labels.AUTH_FAILED)
            return None

        self.error_label.set_visibility(False)
        for button in self.buttons:
            button.disable()
        try:
            return await asyncio.to_thread(action, self.email.strip(), self.password)
        except Exception as e:
            log("[SESSION] Logowanie/rejestracja nie powiodły się", e)
            self._show_error(ui_labels.AUTH_FAILED)
            return None
        finally:
            for button in self.buttons:
                button.enable()

    def _show_error(self, message: str) -> None:
        self.error_label.text = message
        self.error_label.set_visibility(True)
