"""Cassandra database delegate."""
import logging
from typing import Optional

from cassandra import DriverException
from cassandra.cluster import Cluster, NoHostAvailable, Session

from ..core.config import settings
from ..core.exceptions import ConnectionCreationException, ScriptStatementFailedException
from .containers import CassandraContainer
from .delegate import AbstractDatabaseDelegate

logger = logging.getLogger(__name__)

APPLIED_COLUMN = "[applied]"


def was_applied(result) -> bool:
    """Return the applied flag of a CQL result.

    Only conditional statements report ``[applied]``; everything else that
    came back without a driver error counts as applied.
    """
    column_names = getattr(result, "column_names", None) or []
    if APPLIED_COLUMN not in column_names:
        return True
    return bool(result.was_applied)


class CassandraDatabaseDelegate(AbstractDatabaseDelegate):
    """Cassandra delegate bound to a Cassandra container.

    Unlike the DB-API delegates there is no error tolerance here: a driver
    error or a statement that was not applied always fails the script.
    """

    def __init__(self, container: CassandraContainer, cql_port: Optional[int] = None):
        super().__init__(container)
        self.cql_port = cql_port if cql_port is not None else settings.cassandra_cql_port

    def create_new_connection(self) -> Session:
        cluster = None
        try:
            cluster = Cluster(
                contact_points=[self.container.host],
                port=self.container.get_mapped_port(self.cql_port),
            )
            return cluster.connect()
        except (DriverException, NoHostAvailable) as e:
            if cluster is not None:
                cluster.shutdown()
            logger.error("Could not obtain cassandra connection")
            raise ConnectionCreationException(
                "Could not obtain cassandra connection", detail=str(e)
            ) from e

    def execute(self, statement, script_path, line_number, continue_on_error, ignore_failed_drops):
        session = self.connection
        try:
            result = session.execute(statement)
        except (DriverException, NoHostAvailable) as e:
            raise ScriptStatementFailedException(statement, line_number, script_path) from e
        if was_applied(result):
            logger.debug(f"Statement {statement} was applied")
        else:
            raise ScriptStatementFailedException(statement, line_number, script_path)

    def close_connection_quietly(self) -> None:
        try:
            self.connection.cluster.shutdown()
        except Exception:
            logger.error("Could not close cassandra connection", exc_info=True)
