"""Abstract base classes for database delegates.

A delegate hides how a backend is connected to and how a single statement is
run behind one small interface, so init scripts can be applied to any
database the same way.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from ..core.exceptions import DelegateClosedError

logger = logging.getLogger(__name__)


class DatabaseDelegate(ABC):
    """Database delegate interface."""

    @abstractmethod
    def execute(
        self,
        statement: str,
        script_path: str,
        line_number: int,
        continue_on_error: bool,
        ignore_failed_drops: bool,
    ) -> None:
        """Execute a single statement."""
        pass

    @abstractmethod
    def execute_script(
        self,
        statements: Iterable[str],
        script_path: str,
        continue_on_error: bool,
        ignore_failed_drops: bool,
    ) -> None:
        """Execute the statements in order and close the underlying connection."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the connection to the database. Never raises."""
        pass

    def __enter__(self) -> "DatabaseDelegate":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AbstractDatabaseDelegate(DatabaseDelegate):
    """Connection lifecycle shared by every backend.

    The connection is created lazily by :meth:`create_new_connection` on first
    access and memoized for the lifetime of the delegate. Subclasses supply
    the connection hooks and :meth:`execute`.
    """

    def __init__(self, container: Any = None):
        self.container = container
        self._connection: Optional[Any] = None
        self._closed = False

    @property
    def connection(self) -> Any:
        """Get or create the connection to the database."""
        if self._closed:
            raise DelegateClosedError()
        if self._connection is None:
            self._connection = self.create_new_connection()
            logger.debug(f"{self.__class__.__name__} opened a new connection")
        return self._connection

    @property
    def closed(self) -> bool:
        return self._closed

    def execute_script(self, statements, script_path, continue_on_error, ignore_failed_drops):
        with self:
            for line_number, statement in enumerate(statements, start=1):
                self.execute(
                    statement, script_path, line_number, continue_on_error, ignore_failed_drops
                )

    def close(self) -> None:
        if self._closed:
            return
        try:
            if self._connection is not None:
                self.close_connection_quietly()
        except Exception:
            logger.error(
                f"{self.__class__.__name__} raised while closing its connection", exc_info=True
            )
        finally:
            self._connection = None
            self._closed = True

    @abstractmethod
    def create_new_connection(self) -> Any:
        """Template method for creating new connections to the database."""
        pass

    @abstractmethod
    def close_connection_quietly(self) -> None:
        """Close the memoized connection, logging instead of raising."""
        pass

    def __repr__(self):
        state = "closed" if self._closed else "open" if self._connection is not None else "idle"
        return f"<{self.__class__.__name__} {state}>"
