"""DB-API 2.0 database delegates."""
import logging
from abc import abstractmethod
from typing import Any, Optional

from ..core.exceptions import ConnectionCreationException, ScriptStatementFailedException
from .containers import DbApiContainer
from .delegate import AbstractDatabaseDelegate

logger = logging.getLogger(__name__)


def is_drop_statement(statement: str) -> bool:
    return statement.strip().lower().startswith("drop")


class BaseDbApiDatabaseDelegate(AbstractDatabaseDelegate):
    """Statement execution and failure policy shared by the DB-API delegates."""

    @abstractmethod
    def _cursor(self) -> Any:
        """Return the cursor a statement is executed on."""
        pass

    @abstractmethod
    def _transaction_connection(self) -> Optional[Any]:
        """Return the DB-API connection owning the current transaction, if known."""
        pass

    def _release_cursor(self, cursor: Any) -> None:
        pass

    def execute(self, statement, script_path, line_number, continue_on_error, ignore_failed_drops):
        cursor = self._cursor()
        try:
            cursor.execute(statement)
            self._commit()
            logger.debug(f"{cursor.rowcount} rows affected by SQL: {statement}")
        except Exception as e:
            self._rollback()
            if continue_on_error or (is_drop_statement(statement) and ignore_failed_drops):
                logger.debug(
                    f"Failed to execute SQL script statement at line {line_number} "
                    f"of resource {script_path}: {statement}",
                    exc_info=True,
                )
            else:
                raise ScriptStatementFailedException(statement, line_number, script_path) from e
        finally:
            self._release_cursor(cursor)

    def _commit(self):
        conn = self._transaction_connection()
        if conn is not None:
            conn.commit()

    def _rollback(self):
        conn = self._transaction_connection()
        if conn is None:
            return
        try:
            conn.rollback()
        except Exception:
            logger.warning("Could not roll back after failed statement", exc_info=True)


class DbApiDatabaseDelegate(BaseDbApiDatabaseDelegate):
    """DB-API delegate bound to a database container.

    The connection handle is a cursor opened on a fresh container connection.
    """

    def __init__(self, container: DbApiContainer):
        super().__init__(container)

    def create_new_connection(self) -> Any:
        try:
            return self.container.create_connection("").cursor()
        except Exception as e:
            logger.error("Could not obtain DB-API connection")
            raise ConnectionCreationException(
                "Could not obtain DB-API connection", detail=str(e)
            ) from e

    def _cursor(self):
        return self.connection

    def _transaction_connection(self):
        # DB-API optional extension: cursor.connection
        return getattr(self.connection, "connection", None)

    def close_connection_quietly(self) -> None:
        try:
            cursor = self.connection
            owner = getattr(cursor, "connection", None)
            try:
                cursor.close()
            finally:
                if owner is not None:
                    owner.close()
        except Exception:
            logger.error("Could not close DB-API connection", exc_info=True)


class ContainerLessDbApiDatabaseDelegate(BaseDbApiDatabaseDelegate):
    """DB-API delegate working on a connection supplied by the caller.

    The delegate takes ownership of the connection and closes it when done.
    """

    def __init__(self, connection: Any):
        super().__init__()
        self._supplied_connection = connection
        # Open from construction, so close() releases it even if nothing ran
        self._connection = connection

    def create_new_connection(self) -> Any:
        return self._supplied_connection

    def _cursor(self):
        return self.connection.cursor()

    def _transaction_connection(self):
        return self.connection

    def _release_cursor(self, cursor):
        cursor.close()

    def close_connection_quietly(self) -> None:
        try:
            self.connection.close()
        except Exception:
            logger.error("Could not close DB-API connection", exc_info=True)
