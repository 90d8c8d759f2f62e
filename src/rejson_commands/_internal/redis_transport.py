"""redis-py backed transport.

This transport is not part of the public API; use ReJSONClient.create()
or supply your own object implementing the Transport protocol.
"""

import logging
from typing import List, Optional, Sequence, Union, cast

import redis
from redis.exceptions import ResponseError

from rejson_commands._internal.replies import ERROR_MARKER
from rejson_commands.types import Config

logger = logging.getLogger(__name__)


class RedisTransport:
    """Transport over a single redis-py connection.

    redis-py parses server error replies into ResponseError; the readers
    turn them back into ``-ERR <message>`` reply text so that error
    classification stays with the reply decoder. Every other redis-py
    exception (connection, timeout, authentication) propagates unchanged.
    """

    def __init__(self, connection: redis.Connection) -> None:
        self._connection = connection

    def send_command(self, name: str, args: Sequence[bytes]) -> None:
        self._connection.send_command(name, *args)

    def _read(self) -> object:
        try:
            return self._connection.read_response()
        except ResponseError as e:
            return f"{ERROR_MARKER} {e}"

    def read_status_reply(self) -> Optional[str]:
        return cast(Optional[str], self._read())

    def read_bulk_reply(self) -> Optional[str]:
        return cast(Optional[str], self._read())

    def read_integer_reply(self) -> Union[int, str]:
        return cast(Union[int, str], self._read())

    def read_multi_bulk_reply(self) -> Optional[List[Optional[str]]]:
        """Read an array reply; a server error becomes a single-element reply.

        redis-py raises a top-level error reply but leaves errors nested in
        an array as ResponseError elements, so both are rewritten.
        """
        reply = self._read()
        if isinstance(reply, str):
            return [reply]
        if reply is None:
            return None
        return [
            f"{ERROR_MARKER} {element}" if isinstance(element, ResponseError) else element
            for element in cast(List[Optional[str]], reply)
        ]

    def close(self) -> None:
        logger.debug("Disconnecting redis transport")
        self._connection.disconnect()


def create_redis_transport(config: Config) -> RedisTransport:
    """Build a transport from configuration.

    The connection is opened lazily by redis-py on the first command.
    """
    connection = redis.Connection(
        host=config.host,
        port=config.port,
        db=config.db,
        username=config.username,
        password=config.password,
        socket_timeout=config.socket_timeout,
        client_name=config.client_name,
        decode_responses=True,
    )
    logger.debug(f"Created redis transport for {config.host}:{config.port}/{config.db}")
    return RedisTransport(connection)
