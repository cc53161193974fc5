"""Wyjątki domenowe forum."""


class ForumError(Exception):
    """Bazowy wyjątek aplikacji."""


class NotAuthenticatedError(ForumError):
    """Operacja wymaga zalogowanego użytkownika."""

    def __init__(self, message: str = "You must be logged in to create a question"):
        super().__init__(message)


class ValidationError(ForumError):
    """Niepoprawne dane wejściowe (np. pusty tytuł)."""


class QuestionNotFoundError(ForumError):
    """Pytanie nie istnieje (lub zostało usunięte)."""

    def __init__(self, question_id: str):
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id
