"""Custom exceptions for dbdelegate"""

from typing import Optional


class DatabaseDelegateException(Exception):
    """Base exception for dbdelegate"""

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class ConnectionCreationException(DatabaseDelegateException):
    """Raised when a connection to the database cannot be established"""

    def __init__(
        self, message: str = "Could not obtain connection", detail: Optional[str] = None
    ):
        super().__init__(message, detail=detail)


class ScriptStatementFailedException(DatabaseDelegateException):
    """Raised when a script statement fails and the error policy does not absorb it.

    The driver error, when there is one, is chained as ``__cause__``.
    """

    def __init__(self, statement: str, line_number: int, script_path: str):
        self.statement = statement
        self.line_number = line_number
        self.script_path = script_path
        super().__init__(
            f"Script execution failed ({script_path}:{line_number}): {statement}",
            detail=statement,
        )


# Short alias used throughout the docs
StatementFailed = ScriptStatementFailedException


class DelegateClosedError(DatabaseDelegateException):
    """Raised when a closed delegate is asked for its connection"""

    def __init__(self, message: str = "Database delegate is closed", detail: Optional[str] = None):
        super().__init__(message, detail=detail)
