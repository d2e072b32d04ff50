"""
Typed failures raised by the RPC gateway.

Every failure of a daemon call is reported as one of three kinds so that
callers (the fetch resource, the JSON routes, the CLI) can tell the user
what went wrong without inspecting library exceptions.
"""

from enum import Enum


class FetchErrorKind(str, Enum):
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    DECODE = "decode"


class FetchError(Exception):
    """Base class for failed daemon calls."""

    kind: FetchErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.kind.value} error: {self.message}"


class TransportError(FetchError):
    """The daemon could not be reached or did not answer in time."""

    kind = FetchErrorKind.TRANSPORT


class ProtocolError(FetchError):
    """The daemon answered but reported a failure."""

    kind = FetchErrorKind.PROTOCOL


class DecodeError(FetchError):
    """The daemon's response could not be parsed into the expected shape."""

    kind = FetchErrorKind.DECODE
