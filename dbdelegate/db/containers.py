"""Protocols for the containers a delegate can be bound to.

Container lifecycle lives elsewhere; delegates only need a way to open a
connection (DB-API) or a host and mapped port (Cassandra).
"""

from __future__ import annotations

from typing import Any, Protocol

# Native protocol port inside a Cassandra container
CQL_PORT = 9042


class DbApiContainer(Protocol):
    """A running database container able to hand out DB-API connections."""

    def create_connection(self, query_string: str) -> Any:
        """Open a new DB-API 2.0 connection, appending ``query_string`` to the URL."""
        ...


class CassandraContainer(Protocol):
    """A running Cassandra container."""

    @property
    def host(self) -> str:
        """Address the container is reachable on."""
        ...

    def get_mapped_port(self, port: int) -> int:
        """Host port mapped to the given container port."""
        ...
