"""Bazowe klasy dla repozytoriów."""

from typing import Optional, List, Any
from abc import ABC

from supabase import Client


class BaseRepository(ABC):
    """
    Bazowa klasa repozytorium.

    Repozytorium opakowuje jedną tabelę zdalnego magazynu (PostgREST)
    dostępnego przez klienta Supabase. Błędy SDK nie są tu łapane.
    """

    table_name: str = ""

    def __init__(self, client: Client):
        self.client = client

    def _table(self):
        """Zwraca query builder dla tabeli repozytorium."""
        return self.client.table(self.table_name)

    def _execute(self, query) -> List[dict]:
        """Wykonuje zapytanie i zwraca wiersze."""
        response = query.execute()
        return response.data or []

    def _fetch_one(self, query) -> Optional[dict]:
        """Pobiera jeden rekord (albo None)."""
        rows = self._execute(query.limit(1))
        return rows[0] if rows else None

    def _fetch_all(self, query) -> List[dict]:
        """Pobiera wszystkie rekordy."""
        return self._execute(query)

    @staticmethod
    def _filter_value(value: Any) -> Any:
        """Boole w filtrach PostgREST zapisujemy małymi literami."""
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return value
