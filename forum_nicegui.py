"""
Forum App - NiceGUI web client for a question-and-answer forum.

Storage, auth and queries live in Supabase; this process only renders pages
and forwards CRUD calls.
"""

import os
import sys

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse
from nicegui import app, ui

from app_ui.shell import AppShell
from app_ui.views.question_detail_view import QuestionDetailView
from app_ui.views.question_list_view import QuestionListView
from core.config_manager import ConfigManager
from core.forum_context import ContextRegistry, get_context_registry
from core.log_utils import log


def _current_browser_id() -> str:
    return app.storage.browser['id']


def _create_shell(registry: ContextRegistry, build_content) -> None:
    """Shell strony z kontekstem przeglądarki; zwalnia go po rozłączeniu."""
    browser_id = _current_browser_id()
    AppShell(
        registry.get(browser_id),
        build_content,
        on_detach=lambda: registry.release(browser_id)
    ).create()


async def redirect_unknown_path(request: Request, exc: Exception):
    """Nieznana ścieżka HTML -> katalog; pozostałe żądania dostają zwykłe 404."""
    if request.method == 'GET' and 'text/html' in request.headers.get('accept', ''):
        return RedirectResponse('/')
    return JSONResponse({'detail': 'Not Found'}, status_code=404)


def register_pages(registry: ContextRegistry) -> None:
    """Rejestruje strony: katalog, szczegóły pytania, przekierowanie nieznanych ścieżek."""

    @ui.page('/')
    async def index():
        """Katalog pytań."""
        _create_shell(registry, lambda context: QuestionListView(context).create())

    @ui.page('/question/{question_id}')
    async def question_page(question_id: str):
        """Szczegóły pytania."""
        _create_shell(
            registry,
            lambda context: QuestionDetailView(context, question_id).create()
        )

    app.add_exception_handler(404, redirect_unknown_path)


# === RUN ===

def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(line_buffering=True)

    log("[STARTUP] Starting app...")
    config = ConfigManager().config
    if not config.has_backend:
        log("[STARTUP] Brak SUPABASE_URL / SUPABASE_ANON_KEY (config.json lub zmienne środowiskowe)")
        sys.exit(1)

    registry = get_context_registry(config)
    register_pages(registry)

    def cleanup():
        log("[APP] Shutting down...")
        registry.close_all()
        log("[APP] Cleanup done.")

    app.on_shutdown(cleanup)

    ui.run(
        title=config.title,
        host=config.host,
        port=config.port,
        reload=False,
        show=os.environ.get("FORUM_AUTO_OPEN") == "1",
        storage_secret=config.storage_secret,  # Wymagane dla app.storage.browser
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
