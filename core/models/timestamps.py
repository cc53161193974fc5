"""Parsowanie znaczników czasu zwracanych przez backend."""

from datetime import datetime
from typing import Optional, Union


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Zamienia timestamp ISO 8601 (np. '2024-05-01T10:00:00+00:00') na datetime."""
    if value is None or isinstance(value, datetime):
        return value
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


def format_date(value: Optional[datetime]) -> str:
    """Data w formacie do wyświetlenia ('-' gdy brak)."""
    if not value:
        return '-'
    return value.strftime('%d.%m.%Y')
