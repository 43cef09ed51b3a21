# Base exception for all pgservice errors
class PgServiceException(Exception):
    """Base class for all exceptions raised by pgservice."""


# --- Service file errors ---


class PgServiceFileError(PgServiceException):
    """Exception raised when the service file cannot be read."""


class PgServiceParseError(PgServiceException):
    """Exception raised for a malformed line in the service file."""

    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Error in service file line {line}: {reason}.")


class PgServiceUnknownService(PgServiceException):
    """Exception raised when the requested service is not defined."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown service {name}.")


# --- Property errors ---


class PgServicePropertyError(PgServiceException):
    """Exception raised for an invalid connection property value."""
