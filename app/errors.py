from typing import Any, Sequence


class DataAccessError(Exception):
    """Raised when the store rejects a statement or cannot be reached."""

    def __init__(self, message: str, statement: str, params: Sequence[Any] = ()):
        super().__init__(message)
        self.message = message
        self.statement = statement
        self.params = list(params)

    def __str__(self) -> str:
        return f"{self.message} (params={self.params!r})"


class IntegrityViolation(DataAccessError):
    """Raised when a write breaks a constraint, e.g. a duplicate unique key."""
