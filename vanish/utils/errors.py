"""
Error type raised by every client operation.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """What caused a VanishError."""
    SERVER = "server"        # non-2xx response
    TIMEOUT = "timeout"      # request exceeded the configured timeout
    TRANSPORT = "transport"  # any other network or decoding failure


class VanishError(Exception):
    """
    Error raised by the Vanish API client.

    Callers catch this single type and branch on ``kind`` or
    ``status_code``. Only server errors carry a status code.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        kind: Optional[ErrorKind] = None,
    ):
        self.message = message
        self.status_code = status_code
        if kind is None:
            kind = ErrorKind.SERVER if status_code is not None else ErrorKind.TRANSPORT
        self.kind = kind
        super().__init__(self.message)

    @property
    def is_timeout(self) -> bool:
        return self.kind is ErrorKind.TIMEOUT


class RequestTimeoutError(VanishError):
    """The request did not complete before the client timeout."""

    def __init__(self):
        super().__init__("Request timeout", kind=ErrorKind.TIMEOUT)
