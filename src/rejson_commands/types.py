"""Type definitions for rejson-commands."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Union

# Raw reply as produced by a transport reader:
# status string, optional bulk string, integer, or list of optional strings
RawReply = Union[str, None, int, List[Optional[str]]]


class Path(str):
    """Location inside a stored JSON document.

    Only the canonical string form is used on the wire; the path grammar
    itself is interpreted by the server.
    """

    ROOT = "."

    @classmethod
    def root(cls) -> "Path":
        """Return the path addressing the whole document."""
        return cls(cls.ROOT)


class Command(Enum):
    """JSON command set opcodes bound to their wire names."""

    DEL = "JSON.DEL"
    GET = "JSON.GET"
    SET = "JSON.SET"
    TYPE = "JSON.TYPE"
    MGET = "JSON.MGET"
    NUMINCRBY = "JSON.NUMINCRBY"
    NUMMULTBY = "JSON.NUMMULTBY"
    OBJKEYS = "JSON.OBJKEYS"
    OBJLEN = "JSON.OBJLEN"
    STRAPPEND = "JSON.STRAPPEND"
    STRLEN = "JSON.STRLEN"
    ARRAPPEND = "JSON.ARRAPPEND"
    ARRINDEX = "JSON.ARRINDEX"
    ARRINSERT = "JSON.ARRINSERT"
    ARRLEN = "JSON.ARRLEN"
    ARRPOP = "JSON.ARRPOP"
    ARRTRIM = "JSON.ARRTRIM"

    @property
    def wire_name(self) -> str:
        return self.value


class ReplyKind(Enum):
    """Shape of the raw reply a command produces."""

    STATUS = "status"
    BULK = "bulk"
    INTEGER = "integer"
    MULTI_BULK = "multi_bulk"


class ExistenceModifier(Enum):
    """Existential modifier for SET; DEFAULT means no constraint."""

    DEFAULT = ""
    NOT_EXISTS = "NX"
    MUST_EXIST = "XX"


@dataclass
class Config:
    """Connection settings for the bundled redis-py transport."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0

    # Optional: authentication
    username: Optional[str] = None
    password: Optional[str] = None

    # Optional: socket behavior (None means block indefinitely)
    socket_timeout: Optional[float] = None

    # Optional: CLIENT SETNAME issued on connect
    client_name: Optional[str] = None


class Transport(Protocol):
    """Connection used to send one command and read its reply.

    The caller owns the transport and must not interleave commands on it.
    Failures of the connection itself propagate unchanged.
    """

    def send_command(self, name: str, args: Sequence[bytes]) -> None: ...

    def read_status_reply(self) -> Optional[str]: ...

    def read_bulk_reply(self) -> Optional[str]: ...

    def read_integer_reply(self) -> Union[int, str]: ...

    def read_multi_bulk_reply(self) -> Optional[List[Optional[str]]]: ...

    def close(self) -> None: ...


class ReJSONError(Exception):
    """Base class for failures raised by this library."""

    pass


class ProtocolError(ReJSONError):
    """Raised when the server replies with an error or a non-OK status."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArgumentArityError(ReJSONError, ValueError):
    """Raised before sending when a call carries the wrong number of paths or keys."""

    pass


class UnrecognizedTypeError(ReJSONError):
    """Raised when a JSON.TYPE reply names no known JSON type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unrecognized JSON type: {type_name!r}")
        self.type_name = type_name
