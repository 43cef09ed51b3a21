"""Resolution of the path of the connection service file."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

SERVICE_FILE_ENV = "PGSERVICEFILE"
SERVICE_FILE_NAME = ".pg_service.conf"


class ServiceFileLocation(BaseModel):
    """ServiceFileLocation holds the sources used to locate the service file.

    The sources are checked in order: the explicit override, then the
    ``PGSERVICEFILE`` environment variable, then the default file in the
    home directory.

    Attributes:
        override: Path explicitly set by the application.
        environment_file: Value of the ``PGSERVICEFILE`` environment variable.
        home: Home directory holding the default ``.pg_service.conf``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    override: str | None = Field(default=None, description="Explicit service file path")
    environment_file: str | None = Field(
        default=None, description=f"Value of the {SERVICE_FILE_ENV} environment variable"
    )
    home: str = Field(..., description="Home directory of the user")

    @classmethod
    def from_environment(
        cls,
        override: str | None = None,
        environ: Mapping[str, str] | None = None,
        home: str | None = None,
    ) -> "ServiceFileLocation":
        """Build the location from the process environment.

        Args:
            override: Explicit service file path, takes precedence over everything else.
            environ: The environment to read ``PGSERVICEFILE`` from. Defaults to os.environ.
            home: The home directory. Defaults to the home directory of the current user.

        Returns:
            ServiceFileLocation: The location sources.

        """
        if environ is None:
            environ = os.environ
        if home is None:
            home = os.path.expanduser("~")
        return cls(override=override, environment_file=environ.get(SERVICE_FILE_ENV), home=home)

    def path(self) -> str:
        """Return the path of the service file.

        The file is not checked for existence.
        """
        if self.override is not None:
            return self.override
        if self.environment_file is not None:
            return self.environment_file
        return self.home + os.sep + SERVICE_FILE_NAME


def find_path(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    home: str | None = None,
) -> str:
    """Find the path of the service file.

    Args:
        override: Explicit service file path.
        environ: The environment to read ``PGSERVICEFILE`` from. Defaults to os.environ.
        home: The home directory. Defaults to the home directory of the current user.

    Returns:
        str: The path of the service file, which may not exist.

    """
    return ServiceFileLocation.from_environment(override, environ, home).path()
