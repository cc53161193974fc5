"""
App shell - bramka między formularzem logowania a aplikacją.

Shell słucha zmian SessionManager i przerysowuje całość przy każdej zmianie.
Callbacki auth mogą przyjść z wątku SDK, więc przerysowanie jest
przekazywane do pętli zdarzeń przez call_soon_threadsafe.
"""

import asyncio
from typing import Callable, Optional
from nicegui import ui

from app_ui import ui_labels
from app_ui.components.auth_form import AuthForm
from app_ui.components.header import create_header
from core.forum_context import ForumContext
from core.log_utils import log
from core.session_manager import SessionState


class AppShell:
    """Opakowanie strony: spinner / formularz logowania / nagłówek + treść."""

    def __init__(
        self,
        context: ForumContext,
        build_content: Callable[[ForumContext], None],
        on_detach: Optional[Callable[[], None]] = None
    ):
        self.context = context
        self.build_content = build_content
        self.on_detach = on_detach
        self.container = None
        self._loop = None
        self._client = None

    def create(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._client = ui.context.client
        self.container = ui.column().classes('w-full min-h-screen bg-gray-100 gap-0')

        self.context.session.add_listener(self._on_session_change)
        self._client.on_disconnect(self._detach)

        self.render()
        if not self.context.session.state.is_loaded:
            ui.timer(0.1, self._start_session, once=True)

    async def _start_session(self) -> None:
        """Odczytuje sesję i subskrybuje zmiany (pierwsze wejście przeglądarki)."""
        await asyncio.to_thread(self.context.session.start)

    def _detach(self) -> None:
        self.context.session.remove_listener(self._on_session_change)
        if self.on_detach:
            self.on_detach()

    def _on_session_change(self, state: SessionState) -> None:
        self._loop.call_soon_threadsafe(self.render)

    def render(self) -> None:
        if self.container is None or self.container.is_deleted:
            return
        state = self.context.session.state
        self.container.clear()
        with self.container:
            if not state.is_loaded:
                with ui.row().classes('w-full justify-center py-8'):
                    ui.spinner(size='lg')
            elif not state.is_signed_in:
                AuthForm(self.context.session).create()
            else:
                create_header(state, on_sign_out=self._sign_out)
                self.build_content(self.context)

    async def _sign_out(self) -> None:
        try:
            await asyncio.to_thread(self.context.session.sign_out)
        except Exception as e:
            log("[SESSION] Błąd wylogowania", e)
            ui.notify(ui_labels.FAILED_SIGN_OUT, type='negative')
