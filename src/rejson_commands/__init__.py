"""rejson-commands - Typed client codec for the JSON command set over Redis."""

from rejson_commands.client import ReJSONClient
from rejson_commands.json_helpers import JSONCodec, JSONValue, ValueDecoder, ValueEncoder
from rejson_commands.types import (
    ArgumentArityError,
    Command,
    Config,
    ExistenceModifier,
    Path,
    ProtocolError,
    ReJSONError,
    Transport,
    UnrecognizedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ReJSONClient",
    # JSON types and codec
    "JSONCodec",
    "JSONValue",
    "ValueDecoder",
    "ValueEncoder",
    # Core types
    "Command",
    "Config",
    "ExistenceModifier",
    "Path",
    "Transport",
    # Exceptions
    "ReJSONError",
    "ProtocolError",
    "ArgumentArityError",
    "UnrecognizedTypeError",
]
