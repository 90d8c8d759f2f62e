"""Validation and conversion of raw replies.

Server errors arrive as reply text starting with the ``-ERR`` marker; they
are raised as ProtocolError here so callers never see the raw marker.
"""

from typing import Any, List, Optional, Union

from rejson_commands.json_helpers import JSONCodec
from rejson_commands.types import ProtocolError, UnrecognizedTypeError

ERROR_MARKER = "-ERR"
OK_STATUS = "OK"


def assert_reply_not_error(reply: Optional[str]) -> None:
    """Raise if the reply text carries the server error marker.

    The message is the text after the marker and one delimiter.

    Raises:
        ProtocolError: If the reply starts with the error marker
    """
    if reply is None:
        return
    if reply.startswith(ERROR_MARKER):
        raise ProtocolError(reply[len(ERROR_MARKER) + 1 :])


def assert_reply_ok(reply: Optional[str]) -> None:
    """Raise unless the status reply is exactly OK.

    A nil reply is how the server reports an unmet NX/XX condition on SET.

    Raises:
        ProtocolError: If the reply is an error or anything other than OK
    """
    assert_reply_not_error(reply)
    if reply != OK_STATUS:
        raise ProtocolError(f"Expected OK status, got {reply!r}")


def decode_status(reply: Optional[str]) -> None:
    assert_reply_ok(reply)


def decode_integer(reply: Union[int, str]) -> int:
    """Convert an integer reply to a count.

    Raises:
        ProtocolError: If the transport handed back error text instead
    """
    if isinstance(reply, str):
        assert_reply_not_error(reply)
    return int(reply)


def decode_bulk_text(reply: Optional[str]) -> Optional[str]:
    """Validate a bulk reply and return its raw text."""
    assert_reply_not_error(reply)
    return reply


def decode_bulk_json(codec: JSONCodec, reply: Optional[str]) -> Any:
    """Validate a bulk reply and deserialize it as JSON."""
    assert_reply_not_error(reply)
    return codec.deserialize(reply)


def decode_multi_bulk(reply: Union[None, str, List[Optional[str]]]) -> List[Optional[str]]:
    """Validate a multi-bulk reply and return its elements in order.

    Only the first element is checked: a server error shows up as a
    single-element reply, or as bare error text from some transports.

    Raises:
        ProtocolError: If the reply or its first element is an error
    """
    if reply is None:
        return []
    if isinstance(reply, str):
        assert_reply_not_error(reply)
        raise ProtocolError(f"Expected a multi-bulk reply, got {reply!r}")
    if len(reply) >= 1:
        assert_reply_not_error(reply[0])
    return list(reply)


def decode_type(codec: JSONCodec, reply: Optional[str]) -> Optional[type]:
    """Map a JSON.TYPE reply to a native type; a missing key maps to None.

    Raises:
        ProtocolError: If the reply is an error
        UnrecognizedTypeError: If the reply names no known JSON type
    """
    assert_reply_not_error(reply)
    if reply is None:
        return None
    try:
        return codec.type_for_name(reply)
    except KeyError:
        raise UnrecognizedTypeError(reply) from None
