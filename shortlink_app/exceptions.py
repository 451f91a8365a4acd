"""
Errors raised by the link service.

Every error carries the HTTP status it is rendered with. The message is
sent to the client as a plain-text body, so it is kept short.
"""


class LinkServiceError(Exception):
    """Base class for link service failures (HTTP 500 unless overridden)"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LinkNotFound(LinkServiceError):
    """Requested link id does not exist"""

    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class MalformedURL(LinkServiceError):
    """Target URL could not be parsed as an absolute URL"""

    status_code = 409


class DatastoreError(LinkServiceError):
    """A query failed in the database layer"""

    @classmethod
    def from_exception(cls, exc: Exception) -> "DatastoreError":
        error = cls(str(exc))
        error.__cause__ = exc
        return error


class OperationTimeout(LinkServiceError):
    """A bounded database call did not finish in time"""

    def __init__(self, message: str = "deadline has elapsed"):
        super().__init__(message)
