"""Reading of PostgreSQL connection service files.

See https://www.postgresql.org/docs/current/static/libpq-pgservice.html.
"""

import io
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from .exceptions import PgServiceFileError, PgServiceParseError, PgServiceUnknownService
from .location import find_path

logger = logging.getLogger(__name__)

# leading whitespace of a line, ASCII only
LINE_WHITESPACE = " \t\n\x0b\f\r"
# trimmed around keys and values: every control character and space
TRIM_CHARACTERS = "".join(chr(c) for c in range(0x21))


class ServiceFile:
    """The services defined in a connection service file.

    A service file is made of ``[name]`` section headers followed by
    ``key = value`` parameters. Lines starting with ``#`` are comments.
    """

    def __init__(self) -> None:
        self.sections: dict[str, dict[str, str]] = {}

    def __repr__(self) -> str:
        return f"<ServiceFile: {len(self.sections)} services>"

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, name: str) -> bool:
        return name in self.sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "ServiceFile":
        """Parse the lines of a service file.

        Args:
            lines: The lines of the file, with or without line terminators.

        Returns:
            ServiceFile: The parsed services.

        Raises:
            PgServiceParseError: At the first malformed line.

        """
        service_file = cls()
        section = None

        for line_number, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n").lstrip(LINE_WHITESPACE)
            if not line or line.startswith("#"):
                continue
            if line.startswith("["):
                if not line.endswith("]"):
                    raise PgServiceParseError(line_number, "missing ]")
                # a repeated header starts over with an empty section
                section = {}
                service_file.sections[line[1:-1]] = section
            elif section is None:
                raise PgServiceParseError(line_number, "not in section")
            else:
                segments = line.split("=", 1)
                if len(segments) != 2:
                    raise PgServiceParseError(line_number, "bad syntax")
                section[segments[0].strip(TRIM_CHARACTERS)] = segments[1].strip(TRIM_CHARACTERS)

        return service_file

    @classmethod
    def from_string(cls, text: str) -> "ServiceFile":
        """Parse the content of a service file given as a string.

        Lines are split the same way as when reading the file from disk.
        """
        return cls.parse(io.StringIO(text, newline=None))

    @classmethod
    def from_path(cls, path: str | Path) -> "ServiceFile":
        """Read and parse a service file.

        Args:
            path: The path of the service file.

        Returns:
            ServiceFile: The parsed services.

        Raises:
            PgServiceFileError: If the file cannot be read.
            PgServiceParseError: If the file is malformed.

        """
        logger.debug("Reading service file %s", path)
        try:
            with open(path, encoding="utf-8") as file:
                return cls.parse(file)
        except (OSError, UnicodeDecodeError) as e:
            raise PgServiceFileError(f"Cannot read service file {path}: {e}") from e

    def services(self) -> list[str]:
        """Return the sorted names of the defined services."""
        return sorted(self.sections)

    def get_service(self, name: str) -> dict[str, str]:
        """Get the parameters of a service.

        Args:
            name: The name of the service, matched exactly.

        Returns:
            dict: A copy of the parameters of the service.

        Raises:
            PgServiceUnknownService: If the service is not defined.

        """
        if name not in self.sections:
            raise PgServiceUnknownService(name)
        return dict(self.sections[name])


def load(
    service: str,
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: str | None = None,
) -> dict[str, str]:
    """Load the parameters of a service from the service file.

    The service file is located with :func:`pgservice.location.find_path`.

    Args:
        service: The name of the service.
        override: Explicit service file path.
        environ: The environment to read ``PGSERVICEFILE`` from. Defaults to os.environ.
        home: The home directory. Defaults to the home directory of the current user.

    Returns:
        dict: The parameters of the service.

    Raises:
        PgServiceFileError: If the service file cannot be read.
        PgServiceParseError: If the service file is malformed.
        PgServiceUnknownService: If the service is not defined.

    """
    path = find_path(override=override, environ=environ, home=home)
    return ServiceFile.from_path(path).get_service(service)
