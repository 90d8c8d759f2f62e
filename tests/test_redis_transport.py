"""Tests for the redis-py transport adapter using a fake connection."""

from typing import Any, List, Tuple

import pytest
import redis
from redis.exceptions import ConnectionError, ResponseError

from rejson_commands import Config, ProtocolError, ReJSONClient
from rejson_commands._internal.redis_transport import RedisTransport, create_redis_transport


class FakeConnection:
    """Stands in for redis.Connection: records commands, replays responses."""

    def __init__(self, *responses: Any) -> None:
        self.sent: List[Tuple[Any, ...]] = []
        self.disconnected = False
        self._responses = list(responses)

    def send_command(self, *args: Any) -> None:
        self.sent.append(args)

    def read_response(self) -> Any:
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def disconnect(self) -> None:
        self.disconnected = True


def make_transport(*responses: Any) -> Tuple[RedisTransport, FakeConnection]:
    connection = FakeConnection(*responses)
    return RedisTransport(connection), connection  # type: ignore[arg-type]


def test_send_command_spreads_arguments() -> None:
    transport, connection = make_transport()

    transport.send_command("JSON.SET", [b"doc", b".", b"1"])
    assert connection.sent == [("JSON.SET", b"doc", b".", b"1")]


def test_readers_return_parsed_replies() -> None:
    transport, _ = make_transport("OK", '{"a":1}', 3, ["x", None])

    assert transport.read_status_reply() == "OK"
    assert transport.read_bulk_reply() == '{"a":1}'
    assert transport.read_integer_reply() == 3
    assert transport.read_multi_bulk_reply() == ["x", None]


def test_response_error_becomes_error_reply() -> None:
    """redis-py strips the ERR code; the adapter restores the -ERR marker."""
    transport, _ = make_transport(ResponseError("key does not exist"))

    assert transport.read_bulk_reply() == "-ERR key does not exist"


def test_response_error_surfaces_as_protocol_error() -> None:
    transport, connection = make_transport(ResponseError("path .x does not exist"))
    client = ReJSONClient(transport)

    with pytest.raises(ProtocolError) as exc_info:
        client.arrlen("doc", ".x")
    assert exc_info.value.message == "path .x does not exist"
    assert connection.sent == [("JSON.ARRLEN", b"doc", b".x")]


def test_multi_bulk_error_becomes_single_element_reply() -> None:
    transport, _ = make_transport(ResponseError("wrong type of path value"))

    assert transport.read_multi_bulk_reply() == ["-ERR wrong type of path value"]


def test_multi_bulk_nested_error_elements_are_rewritten() -> None:
    transport, _ = make_transport([ResponseError("no such key"), '"x"'], None)

    assert transport.read_multi_bulk_reply() == ["-ERR no such key", '"x"']
    assert transport.read_multi_bulk_reply() is None


def test_objkeys_server_error_surfaces_as_protocol_error() -> None:
    transport, _ = make_transport(ResponseError("wrong type of path value - expected object"))
    client = ReJSONClient(transport)

    with pytest.raises(ProtocolError) as exc_info:
        client.objkeys("doc", ".a")
    assert exc_info.value.message == "wrong type of path value - expected object"


def test_mget_server_error_surfaces_as_protocol_error() -> None:
    transport, _ = make_transport(ResponseError("WRONGTYPE Operation against a key"))
    client = ReJSONClient(transport)

    with pytest.raises(ProtocolError) as exc_info:
        client.mget(["a"], ".")
    assert exc_info.value.message == "WRONGTYPE Operation against a key"


def test_mget_nested_error_in_first_element() -> None:
    transport, _ = make_transport([ResponseError("wrong type"), '"b"'])
    client = ReJSONClient(transport)

    with pytest.raises(ProtocolError, match="wrong type"):
        client.mget(["a", "b"], ".")


def test_connection_errors_propagate() -> None:
    transport, _ = make_transport(ConnectionError("Connection closed by server."))

    with pytest.raises(ConnectionError):
        transport.read_integer_reply()


def test_close_disconnects() -> None:
    transport, connection = make_transport()
    transport.close()
    assert connection.disconnected


def test_create_redis_transport_from_config() -> None:
    """Verify config reaches the connection; nothing connects until a command is sent."""
    config = Config(host="redis.internal", port=6380, db=2, password="secret", client_name="svc")

    transport = create_redis_transport(config)
    connection = transport._connection

    assert isinstance(connection, redis.Connection)
    assert connection.host == "redis.internal"
    assert connection.port == 6380
    assert connection.db == 2
    assert connection.password == "secret"
    assert connection.client_name == "svc"
    assert connection.encoder.decode_responses is True
