import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum

from .exceptions import PgServicePropertyError

logger = logging.getLogger(__name__)


class PgProperty(Enum):
    """Canonical connection properties that can be set from a service.

    Attributes:
        PG_HOST (str): Host name of the server.
        PG_PORT (str): Port number of the server.
        PG_DBNAME (str): Name of the database.

    """

    PG_HOST = "PGHOST"
    PG_PORT = "PGPORT"
    PG_DBNAME = "PGDBNAME"

    def set(self, properties: MutableMapping[str, str], value: str) -> None:
        """Set the property in a properties mapping.

        Args:
            properties: The properties to update.
            value: The value of the property.

        Raises:
            PgServicePropertyError: If the value is not valid for the property.

        """
        if self == PgProperty.PG_PORT:
            # one port per host, an empty item selects the default port
            for port in value.split(","):
                port = port.strip()
                if port and not (port.isascii() and port.isdigit()):
                    raise PgServicePropertyError(
                        f"Invalid value for {self.value}: {value!r} is not a list of port numbers."
                    )
        properties[self.value] = value


# service parameter -> canonical property
SERVICE_PROPERTIES = {
    "port": PgProperty.PG_PORT,
    "host": PgProperty.PG_HOST,
    "dbname": PgProperty.PG_DBNAME,
}


def copy_properties(service: Mapping[str, str], properties: MutableMapping[str, str]) -> None:
    """Copy the parameters of a service into connection properties.

    The ``port``, ``host`` and ``dbname`` parameters are first set under their
    canonical property names, then every parameter is copied as is.

    Args:
        service: The parameters of the service.
        properties: The properties to update.

    Raises:
        PgServicePropertyError: If a parameter is not valid for its canonical property.

    """
    for key, pg_property in SERVICE_PROPERTIES.items():
        if key in service:
            logger.debug("Reading %s from service.", key)
            pg_property.set(properties, service[key])

    for key, value in service.items():
        logger.debug("Reading %s from service.", key)
        properties[key] = value
