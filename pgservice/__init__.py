from .connection import format_connection_string, service_conninfo
from .exceptions import (
    PgServiceException,
    PgServiceFileError,
    PgServiceParseError,
    PgServicePropertyError,
    PgServiceUnknownService,
)
from .location import ServiceFileLocation, find_path
from .properties import PgProperty, copy_properties
from .service_file import ServiceFile, load

__all__ = [
    "PgProperty",
    "PgServiceException",
    "PgServiceFileError",
    "PgServiceParseError",
    "PgServicePropertyError",
    "PgServiceUnknownService",
    "ServiceFile",
    "ServiceFileLocation",
    "copy_properties",
    "find_path",
    "format_connection_string",
    "load",
    "service_conninfo",
]
