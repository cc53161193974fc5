"""Serwisy - logika aplikacji nad repozytoriami."""

from .catalog_service import QuestionCatalog
from .thread_service import QuestionThreadService

__all__ = ['QuestionCatalog', 'QuestionThreadService']
