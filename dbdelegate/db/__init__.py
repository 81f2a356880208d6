from .delegate import AbstractDatabaseDelegate, DatabaseDelegate
from .dbapi_delegate import ContainerLessDbApiDatabaseDelegate, DbApiDatabaseDelegate
from .containers import CQL_PORT, CassandraContainer, DbApiContainer
# Note: cassandra_delegate imported lazily by callers to avoid requiring cassandra-driver for DB-API use

__all__ = [
    "AbstractDatabaseDelegate",
    "DatabaseDelegate",
    "DbApiDatabaseDelegate",
    "ContainerLessDbApiDatabaseDelegate",
    "CQL_PORT",
    "CassandraContainer",
    "DbApiContainer",
]
