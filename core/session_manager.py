"""
Session Manager - stan uwierzytelnienia jednej przeglądarki.

Odpowiedzialność:
- Odczyt bieżącej sesji przy starcie (brak sesji = zwykły stan "wylogowany")
- Subskrypcja zmian stanu auth i powiadamianie słuchaczy (shell przerysowuje UI)
- Jawny stan LOADING -> SIGNED_IN / SIGNED_OUT, żeby kontrolki właściciela
  nie były renderowane na podstawie niezaładowanej sesji
- Odsubskrybowanie przy zamknięciu
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
import threading

from supabase import AuthError, Client

from core.errors import NotAuthenticatedError
from core.log_utils import log


class SessionStatus(Enum):
    """Stan sesji."""
    LOADING = "loading"
    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class SessionState:
    """Niezmienny obraz sesji przekazywany do UI."""
    status: SessionStatus = SessionStatus.LOADING
    user_id: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self.status != SessionStatus.LOADING

    @property
    def is_signed_in(self) -> bool:
        return self.status == SessionStatus.SIGNED_IN

    @classmethod
    def from_session(cls, session) -> 'SessionState':
        """Buduje stan z obiektu Session SDK (None = wylogowany)."""
        user = getattr(session, 'user', None) if session else None
        if user is None:
            return cls(status=SessionStatus.SIGNED_OUT)
        return cls(
            status=SessionStatus.SIGNED_IN,
            user_id=user.id,
            email=getattr(user, 'email', None)
        )


SessionListener = Callable[[SessionState], None]


class SessionManager:
    """Zarządza sesją użytkownika na bazie klienta auth Supabase."""

    def __init__(self, client: Client):
        self.client = client
        self._state = SessionState()
        self._listeners: List[SessionListener] = []
        self._subscription = None
        self._lock = threading.Lock()
        # Osobny lock: callback SDK może wołać _set_state w trakcie subskrypcji
        self._subscribe_lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    def start(self) -> SessionState:
        """Odczytuje bieżącą sesję i subskrybuje zmiany stanu auth."""
        try:
            session = self.client.auth.get_session()
        except AuthError as e:
            log("[SESSION] Nie udało się odczytać sesji, traktuję jak wylogowanie", e)
            session = None
        self._set_state(SessionState.from_session(session))

        with self._subscribe_lock:
            if self._subscription is None:
                self._subscription = self.client.auth.on_auth_state_change(self._handle_auth_event)
        return self._state

    def close(self) -> None:
        """Kończy subskrypcję zmian stanu auth."""
        with self._subscribe_lock:
            subscription, self._subscription = self._subscription, None
        with self._lock:
            self._listeners.clear()
        if subscription is not None:
            subscription.unsubscribe()
            log("[SESSION] Subskrypcja auth zamknięta")

    # === Słuchacze ===

    def add_listener(self, listener: SessionListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def _handle_auth_event(self, event, session) -> None:
        """Callback SDK: każda zmiana auth aktualizuje stan i powiadamia UI."""
        log(f"[SESSION] Zdarzenie auth: {event}")
        self._set_state(SessionState.from_session(session))

    def _set_state(self, state: SessionState) -> None:
        with self._lock:
            if state == self._state:
                return
            self._state = state
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state)

    # === Operacje auth ===

    def sign_in(self, email: str, password: str) -> SessionState:
        """Logowanie e-mailem i hasłem."""
        response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        # SDK powiadamia subskrybentów sam; identyczny stan nie wywoła drugiego przerysowania
        self._set_state(SessionState.from_session(response.session))
        return self._state

    def sign_up(self, email: str, password: str) -> SessionState:
        """
        Rejestracja.

        Jeśli backend wymaga potwierdzenia e-maila, sesji nie ma i stan
        pozostaje SIGNED_OUT.
        """
        response = self.client.auth.sign_up({"email": email, "password": password})
        self._set_state(SessionState.from_session(response.session))
        return self._state

    def sign_out(self) -> None:
        self.client.auth.sign_out()
        self._set_state(SessionState(status=SessionStatus.SIGNED_OUT))

    # === Tożsamość ===

    def require_user_id(self) -> str:
        """
        Pyta serwis auth o bieżącego użytkownika.

        Raises:
            NotAuthenticatedError: brak zalogowanego użytkownika
        """
        try:
            response = self.client.auth.get_user()
        except AuthError as e:
            log("[SESSION] get_user nie powiódł się", e)
            response = None
        user = getattr(response, 'user', None) if response else None
        if user is None:
            raise NotAuthenticatedError()
        return user.id

    def is_owner(self, user_id: Optional[str]) -> bool:
        """Czy zalogowany użytkownik jest właścicielem rekordu (tylko przy załadowanej sesji)."""
        state = self._state
        return state.is_loaded and state.is_signed_in and bool(user_id) and state.user_id == user_id
