"""Utilities for handling PostgreSQL connection strings."""

from typing import Any

import psycopg
from psycopg.conninfo import conninfo_to_dict, make_conninfo

from .exceptions import PgServiceException
from .service_file import load


def format_connection_string(pg_connection: str) -> str:
    """Format a connection string for use with psycopg.

    A bare service name is wrapped as ``service=name``. A connection string
    (containing ``=`` or ``://``) is returned as-is.

    Args:
        pg_connection: Either a service name or a PostgreSQL connection string

    Returns:
        A connection string

    Raises:
        PgServiceException: If the input is empty.

    Examples:
        >>> format_connection_string('myservice')
        'service=myservice'
        >>> format_connection_string('host=localhost dbname=mydb')
        'host=localhost dbname=mydb'

    """
    pg_connection = pg_connection.strip()
    if not pg_connection:
        raise PgServiceException("Empty service name or connection string.")
    if "=" in pg_connection or "://" in pg_connection:
        return pg_connection
    return f"service={pg_connection}"


def service_conninfo(
    pg_connection: str, service_file: str | None = None, **overrides: Any
) -> str:
    """Build a libpq connection string, resolving the service it refers to.

    The ``service`` parameter is replaced by the parameters of that service
    from the service file. Parameters given in the connection string take
    precedence over the service file, and keyword overrides over both.

    Args:
        pg_connection: A service name or a connection string, e.g. ``service=prod user=me``.
        service_file: Explicit service file path. Located as usual if not given.
        **overrides: Connection parameters taking precedence over everything else.

    Returns:
        The connection string, e.g. ``host=localhost port=5432 dbname=mydb``.

    Raises:
        PgServiceException: If the service cannot be loaded or the parameters are invalid.

    """
    conninfo = format_connection_string(pg_connection)
    try:
        parameters: dict[str, Any] = conninfo_to_dict(conninfo)
    except psycopg.ProgrammingError as e:
        raise PgServiceException(f"Invalid connection string {conninfo!r}: {e}") from e

    service = parameters.pop("service", None)
    if service is not None:
        parameters = {**load(service, override=service_file), **parameters}
    parameters.update(overrides)

    try:
        return make_conninfo(**parameters)
    except psycopg.ProgrammingError as e:
        raise PgServiceException(f"Invalid connection parameters for {pg_connection}: {e}") from e
