from typing import Awaitable, Callable, Optional

from nicegui import ui

from app_ui import ui_labels
from core.session_manager import SessionState


def create_header(state: SessionState, on_sign_out: Optional[Callable[[], Awaitable[None]]] = None):
    """
    Tworzy pasek nagłówka aplikacji.

    Args:
        state: Bieżący stan sesji (e-mail zalogowanego użytkownika)
        on_sign_out: Handler przycisku wylogowania
    """
    with ui.row().classes('w-full bg-white shadow'):
        with ui.row().classes('w-full max-w-4xl mx-auto px-4 py-4 items-center justify-between'):
            ui.label(ui_labels.APP_TITLE).classes(
                'text-xl font-bold text-gray-900 cursor-pointer'
            ).on('click', lambda: ui.navigate.to('/'))

            with ui.row().classes('items-center gap-4'):
                ui.label(state.email or '').classes('text-sm text-gray-600')
                if on_sign_out:
                    ui.button(
                        ui_labels.SIGN_OUT,
                        on_click=on_sign_out
                    ).props('flat dense no-caps').classes('text-sm text-red-600')
