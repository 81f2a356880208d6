"""
dbdelegate: run init scripts against short-lived test databases.

Usage:

    from dbdelegate import ContainerLessDbApiDatabaseDelegate

    delegate = ContainerLessDbApiDatabaseDelegate(sqlite3.connect("test.db"))
    delegate.execute_script(
        ["DROP TABLE t", "CREATE TABLE t(x int)"],
        "init.sql",
        continue_on_error=False,
        ignore_failed_drops=True,
    )

The Cassandra delegate lives in ``dbdelegate.db.cassandra_delegate`` and
needs cassandra-driver.
"""

from .core.exceptions import (
    ConnectionCreationException,
    DatabaseDelegateException,
    DelegateClosedError,
    ScriptStatementFailedException,
    StatementFailed,
)
from .core.reuse import (
    ConflictingImageVersionsReuseBehaviour,
    ReusableContainerConfiguration,
    ReusableContainerConfigurationBuilder,
)
from .db import (
    AbstractDatabaseDelegate,
    ContainerLessDbApiDatabaseDelegate,
    DatabaseDelegate,
    DbApiDatabaseDelegate,
)

__all__ = [
    "AbstractDatabaseDelegate",
    "ConflictingImageVersionsReuseBehaviour",
    "ConnectionCreationException",
    "ContainerLessDbApiDatabaseDelegate",
    "DatabaseDelegate",
    "DatabaseDelegateException",
    "DbApiDatabaseDelegate",
    "DelegateClosedError",
    "ReusableContainerConfiguration",
    "ReusableContainerConfigurationBuilder",
    "ScriptStatementFailedException",
    "StatementFailed",
]
