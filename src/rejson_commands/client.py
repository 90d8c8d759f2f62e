"""ReJSON client implementation."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence, Union, cast

from rejson_commands._internal import encoder, replies
from rejson_commands._internal.redis_transport import create_redis_transport
from rejson_commands._internal.types import Number, PathArg, reply_kind_for
from rejson_commands.json_helpers import JSONCodec
from rejson_commands.types import (
    Command,
    Config,
    ExistenceModifier,
    RawReply,
    ReplyKind,
    Transport,
)

logger = logging.getLogger(__name__)


class ReJSONClient:
    """JSON command set client over a caller-owned transport.

    Every method sends exactly one command and blocks until its reply is
    read. Nothing is retried; server errors raise ProtocolError, bad
    arguments raise ArgumentArityError before anything is sent, and
    transport failures propagate unchanged.

    Usage:
        with ReJSONClient.create(Config(host="localhost")) as client:
            client.set("doc", {"a": [1, 2]})
            client.arrappend("doc", ".a", [3])
            doc = client.get("doc")
    """

    def __init__(self, transport: Transport, codec: Optional[JSONCodec] = None) -> None:
        self._transport = transport
        self._codec = codec or JSONCodec()

    # =========================================================================
    # Factory Method
    # =========================================================================

    @classmethod
    @contextmanager
    def create(cls, config: Config, codec: Optional[JSONCodec] = None) -> Iterator["ReJSONClient"]:
        """Create a client on a new redis-py connection, closed on exit."""
        client = cls(create_redis_transport(config), codec)
        try:
            yield client
        finally:
            client.close()

    def close(self) -> None:
        self._transport.close()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _execute(self, command: Command, args: List[bytes]) -> RawReply:
        """Send one command and read the reply shape it is declared to produce."""
        logger.debug(f"{command.wire_name} with {len(args)} args")
        self._transport.send_command(command.wire_name, args)

        kind = reply_kind_for(command)
        if kind is ReplyKind.STATUS:
            return self._transport.read_status_reply()
        if kind is ReplyKind.BULK:
            return self._transport.read_bulk_reply()
        if kind is ReplyKind.INTEGER:
            return self._transport.read_integer_reply()
        return self._transport.read_multi_bulk_reply()

    # Narrow the raw reply to the shape each command's reply kind guarantees

    def _status(self, command: Command, args: List[bytes]) -> Optional[str]:
        return cast(Optional[str], self._execute(command, args))

    def _bulk(self, command: Command, args: List[bytes]) -> Optional[str]:
        return cast(Optional[str], self._execute(command, args))

    def _multi_bulk(self, command: Command, args: List[bytes]) -> Optional[List[Optional[str]]]:
        return cast(Optional[List[Optional[str]]], self._execute(command, args))

    def _count(self, command: Command, args: List[bytes]) -> int:
        return replies.decode_integer(cast(Union[int, str], self._execute(command, args)))

    # =========================================================================
    # Document commands
    # =========================================================================

    def delete(self, key: str, path: PathArg = None) -> int:
        """Delete the value at path (root by default).

        Returns:
            Number of paths deleted (0 or 1)
        """
        return self._count(Command.DEL, encoder.encode_key_path(key, path))

    def get(self, key: str, paths: Sequence[str] = ()) -> Any:
        """Get the value at zero or more paths, deserialized by the codec.

        With several paths the server replies with one object keyed by path.
        Returns None if the key does not exist.
        """
        reply = self._bulk(Command.GET, encoder.encode_get(key, paths))
        return replies.decode_bulk_json(self._codec, reply)

    def set(
        self,
        key: str,
        value: Any,
        modifier: ExistenceModifier = ExistenceModifier.DEFAULT,
        path: PathArg = None,
    ) -> None:
        """Store value at path (root by default).

        Raises:
            ProtocolError: If the server rejects the write, including an
                unmet NOT_EXISTS / MUST_EXIST condition
        """
        args = encoder.encode_set(self._codec, key, value, modifier, path)
        replies.decode_status(self._status(Command.SET, args))

    def type(self, key: str, path: PathArg = None) -> Optional[type]:
        """Get the native type of the value at path.

        Returns None for a JSON null or a missing key.

        Raises:
            UnrecognizedTypeError: If the server reports an unknown type name
        """
        reply = self._bulk(Command.TYPE, encoder.encode_key_path(key, path))
        return replies.decode_type(self._codec, reply)

    def mget(self, keys: Sequence[str], path: str) -> List[Optional[str]]:
        """Get the raw JSON text at path from each key, in key order."""
        reply = self._multi_bulk(Command.MGET, encoder.encode_mget(keys, path))
        return replies.decode_multi_bulk(reply)

    # =========================================================================
    # Number commands
    # =========================================================================

    def numincrby(self, key: str, path: str, increment: Number) -> Any:
        """Increment the number at path; returns the new value."""
        reply = self._bulk(Command.NUMINCRBY, encoder.encode_number_op(key, path, increment))
        return replies.decode_bulk_json(self._codec, reply)

    def nummultby(self, key: str, path: str, multiplier: Number) -> Any:
        """Multiply the number at path; returns the new value."""
        reply = self._bulk(Command.NUMMULTBY, encoder.encode_number_op(key, path, multiplier))
        return replies.decode_bulk_json(self._codec, reply)

    # =========================================================================
    # Object and string commands
    # =========================================================================

    def objkeys(self, key: str, path: PathArg = None) -> List[Optional[str]]:
        """Get the keys of the object at path."""
        reply = self._multi_bulk(Command.OBJKEYS, encoder.encode_key_path(key, path))
        return replies.decode_multi_bulk(reply)

    def objlen(self, key: str, path: PathArg = None) -> int:
        return self._count(Command.OBJLEN, encoder.encode_key_path(key, path))

    def strappend(self, key: str, value: str, path: PathArg = None) -> int:
        """Append to the string at path; returns the new length."""
        args = encoder.encode_strappend(self._codec, key, value, path)
        return self._count(Command.STRAPPEND, args)

    def strlen(self, key: str, path: PathArg = None) -> int:
        return self._count(Command.STRLEN, encoder.encode_key_path(key, path))

    # =========================================================================
    # Array commands
    # =========================================================================

    def arrappend(self, key: str, path: str, values: Sequence[Any]) -> int:
        """Append values to the array at path; returns the new length."""
        args = encoder.encode_arrappend(self._codec, key, path, values)
        return self._count(Command.ARRAPPEND, args)

    def arrindex(self, key: str, path: str, scalar: Any, start: int = 0, stop: int = 0) -> int:
        """Find the first index of scalar in the array at path, or -1.

        start is inclusive and stop exclusive. Passing start=0 and stop=0
        searches the whole array; an empty 0..0 range cannot be requested.
        """
        args = encoder.encode_arrindex(self._codec, key, path, scalar, start, stop)
        return self._count(Command.ARRINDEX, args)

    def arrinsert(self, key: str, path: str, index: int, values: Sequence[Any]) -> int:
        """Insert values before index in the array at path; returns the new length."""
        args = encoder.encode_arrinsert(self._codec, key, path, index, values)
        return self._count(Command.ARRINSERT, args)

    def arrlen(self, key: str, path: PathArg = None) -> int:
        return self._count(Command.ARRLEN, encoder.encode_key_path(key, path))

    def arrpop(self, key: str, path: str, index: int = -1) -> Optional[str]:
        """Remove and return the element at index (last by default) as raw JSON text.

        Returns None if the array is empty.
        """
        reply = self._bulk(Command.ARRPOP, encoder.encode_arrpop(key, path, index))
        return replies.decode_bulk_text(reply)

    def arrtrim(self, key: str, path: str, start: int, stop: int) -> int:
        """Trim the array at path to the inclusive start..stop range.

        Returns:
            New length of the array
        """
        return self._count(Command.ARRTRIM, encoder.encode_arrtrim(key, path, start, stop))
